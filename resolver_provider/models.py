# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import re
import typing as t

from resolver_tools.errors import InvalidArgumentType, InvalidVersion
from resolver_tools.semver import Constraint, Version, parse_constraint

DEPENDENCY_RE = re.compile(r'^\s*([^\s~!=<>;]+)\s*(.*?)\s*$')


class Dependency:
    """
    A named requirement on another package.

    A missing constraint means any version is acceptable.
    """

    __slots__ = ('_name', '_constraint')

    def __init__(
        self, name: str, constraint: t.Optional[t.Union[Constraint, str]] = None
    ) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentType('name', 'a str', name)

        if isinstance(constraint, str):
            constraint = parse_constraint(constraint)
        elif constraint is not None and not isinstance(constraint, Constraint):
            raise InvalidArgumentType('constraint', 'a Constraint, str or None', constraint)

        self._name = name
        self._constraint = constraint

    @property
    def name(self) -> str:
        return self._name

    @property
    def constraint(self) -> t.Optional[Constraint]:
        return self._constraint

    def is_satisfied_by(self, release: Release) -> bool:
        if not isinstance(release, Release) or release.name != self._name:
            return False

        return self._constraint is None or self._constraint.is_satisfied_by(release.version)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dependency):
            return NotImplemented

        return self._name == other._name and self._constraint == other._constraint

    def __hash__(self) -> int:
        return hash((self._name, self._constraint))

    def __str__(self) -> str:
        return f'{self._name} ({self._constraint or "*"})'

    def __repr__(self) -> str:
        return f'Dependency("{self._name}", {self._constraint!r})'


class Release:
    """
    A concrete version of a package together with what it requires.

    Two releases are the same entity when name and version match, whatever
    their dependency lists say.
    """

    __slots__ = ('_name', '_version', '_dependencies')

    def __init__(
        self,
        name: str,
        version: t.Union[Version, str],
        dependencies: t.Optional[t.Iterable[Dependency]] = None,
    ) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentType('name', 'a str', name)

        if dependencies is None:
            dependencies = ()
        elif not isinstance(dependencies, (list, tuple)):
            raise InvalidArgumentType('dependencies', 'a list or tuple', dependencies)

        for index, dependency in enumerate(dependencies):
            if not isinstance(dependency, Dependency):
                raise InvalidArgumentType(f'dependencies[{index}]', 'a Dependency', dependency)

        self._name = name
        self._version = Version.coerce(version)
        self._dependencies: t.Tuple[Dependency, ...] = tuple(dependencies)

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> Version:
        return self._version

    @property
    def dependencies(self) -> t.Tuple[Dependency, ...]:
        return self._dependencies

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Release):
            return NotImplemented

        return self._name == other._name and self._version == other._version

    def __hash__(self) -> int:
        return hash((self._name, self._version))

    def __str__(self) -> str:
        return f'{self._name} ({self._version})'

    def __repr__(self) -> str:
        return f'Release("{self._name}", "{self._version}")'


def parse_dependency(spec: str) -> Dependency:
    """
    Parse ``name``, ``name >= 1.0`` or ``name~>2.1`` into a Dependency.
    """
    match = DEPENDENCY_RE.match(spec) if isinstance(spec, str) else None
    if not match:
        raise InvalidVersion(f'Invalid dependency: "{spec}"')

    name, constraint = match.groups()
    return Dependency(name, constraint or None)


def parse_dependencies(s: str) -> t.List[Dependency]:
    """Parse semicolon separated dependencies, empty entries are skipped"""
    return [parse_dependency(item) for item in s.split(';') if item.strip()]
