# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import re
import typing as t
from functools import total_ordering

from ..errors import InvalidArgumentType, InvalidVersion

VERSION_RE = re.compile(r'^(-?\d+)(?:\.(-?\d+))?(?:\.(-?\d+))?$')


def _check_component(field_name: str, value: t.Any) -> int:
    # bool is an int subclass, but True.0.0 is never a version
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentType(field_name, 'an int', value)

    return value


@total_ordering
class Version:
    """
    A ``major.minor.patch`` version.

    Omitted components default to 0. Negative components are accepted and
    ordered like any other integer.
    """

    __slots__ = ('_major', '_minor', '_patch')

    def __init__(self, major: int = 0, minor: int = 0, patch: int = 0) -> None:
        self._major = _check_component('major', major)
        self._minor = _check_component('minor', minor)
        self._patch = _check_component('patch', patch)

    @classmethod
    def parse(cls, version_string: str) -> Version:
        if not isinstance(version_string, str):
            raise InvalidArgumentType('version', 'a str', version_string)

        match = VERSION_RE.match(version_string.strip())
        if not match:
            raise InvalidVersion(f'Invalid version string: "{version_string}"')

        return cls(*(int(part) for part in match.groups() if part is not None))

    @classmethod
    def coerce(cls, value: t.Union[Version, str], field_name: str = 'version') -> Version:
        """Accept a Version as is, parse a string, reject anything else"""
        if isinstance(value, Version):
            return value

        if isinstance(value, str):
            return cls.parse(value)

        raise InvalidArgumentType(field_name, 'a Version or str', value)

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    def as_tuple(self) -> t.Tuple[int, int, int]:
        return self._major, self._minor, self._patch

    def to_display_string(self) -> str:
        return f'{self._major}.{self._minor}.{self._patch}'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.as_tuple() < other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f'Version("{self}")'


def compare(a: t.Any, b: t.Any) -> t.Any:
    """
    Compare two versions, component by component.

    :returns: -1, 0 or 1, or ``NotImplemented`` if either side is not a Version
    """
    if not isinstance(a, Version) or not isinstance(b, Version):
        return NotImplemented

    for left, right in zip(a.as_tuple(), b.as_tuple()):
        if left != right:
            return -1 if left < right else 1

    return 0


def validate(version_string: t.Any) -> bool:
    if not isinstance(version_string, str):
        return False

    return bool(VERSION_RE.match(version_string.strip()))
