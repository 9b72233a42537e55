# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import re
import typing as t
from enum import Enum

from ..errors import InternalError, InvalidOperator, InvalidVersion
from .base import Version

CONSTRAINT_RE = re.compile(r'^\s*([~!=<>]*)\s*(\S+)\s*$')


class Operator(str, Enum):
    EQ = '='
    NEQ = '!='
    GT = '>'
    LT = '<'
    GTE = '>='
    LTE = '<='
    PESSIMISTIC = '~>'

    @classmethod
    def symbols(cls) -> t.List[str]:
        return [op.value for op in cls]

    @classmethod
    def from_symbol(cls, symbol: t.Any) -> Operator:
        if isinstance(symbol, Operator):
            return symbol

        if isinstance(symbol, str):
            for op in cls:
                if op.value == symbol:
                    return op

        raise InvalidOperator(symbol, cls.symbols())

    def __str__(self) -> str:
        return self.value


class Constraint:
    """
    An operator with a target version, e.g. ``>= 2.1.0``.

    ``~>`` is the compatible-release operator: it lets the rightmost stated
    segment advance and locks everything to its left. A target with a
    non-zero patch (``~> 1.4.2``) allows patch releases only, a target with
    a zero patch (``~> 2.1``) allows minor and patch releases within the
    same major.
    """

    __slots__ = ('_operator', '_target')

    def __init__(self, operator: t.Union[Operator, str], target: t.Union[Version, str]) -> None:
        self._operator = Operator.from_symbol(operator)
        self._target = Version.coerce(target, 'target')

    @classmethod
    def eq(cls, version: t.Union[Version, str]) -> Constraint:
        return cls(Operator.EQ, version)

    @classmethod
    def neq(cls, version: t.Union[Version, str]) -> Constraint:
        return cls(Operator.NEQ, version)

    @classmethod
    def gt(cls, version: t.Union[Version, str]) -> Constraint:
        return cls(Operator.GT, version)

    @classmethod
    def gte(cls, version: t.Union[Version, str]) -> Constraint:
        return cls(Operator.GTE, version)

    @classmethod
    def lt(cls, version: t.Union[Version, str]) -> Constraint:
        return cls(Operator.LT, version)

    @classmethod
    def lte(cls, version: t.Union[Version, str]) -> Constraint:
        return cls(Operator.LTE, version)

    @classmethod
    def pessimistic(cls, version: t.Union[Version, str]) -> Constraint:
        return cls(Operator.PESSIMISTIC, version)

    compatible = pessimistic
    twiddle_wakka = pessimistic

    @property
    def operator(self) -> Operator:
        return self._operator

    @property
    def target(self) -> Version:
        return self._target

    def is_satisfied_by(self, candidate: Version) -> bool:
        if not isinstance(candidate, Version):
            return False

        target = self._target
        op = self._operator

        if op is Operator.EQ:
            return candidate == target
        elif op is Operator.NEQ:
            return candidate != target
        elif op is Operator.GT:
            return candidate > target
        elif op is Operator.LT:
            return candidate < target
        elif op is Operator.GTE:
            return candidate >= target
        elif op is Operator.LTE:
            return candidate <= target
        elif op is Operator.PESSIMISTIC:
            if candidate < target or candidate.major != target.major:
                return False

            if target.patch != 0:
                return candidate.minor == target.minor

            return True

        raise InternalError(f'Operator "{op}" is not handled')

    def to_display_string(self) -> str:
        return f'{self._operator.value} {self._target}'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented

        return self._operator is other._operator and self._target == other._target

    def __hash__(self) -> int:
        return hash((self._operator, self._target))

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f'Constraint("{self}")'


def parse_constraint(spec: str) -> Constraint:
    """
    Parse strings like ``>= 2.1.0``, ``~>2.1`` or ``1.0.0``.

    A bare version means an exact match. An unknown operator raises
    ``InvalidOperator``, a malformed version ``InvalidVersion``.
    """
    match = CONSTRAINT_RE.match(spec) if isinstance(spec, str) else None
    if not match:
        raise InvalidVersion(f'Invalid version constraint: "{spec}"')

    symbol, version = match.groups()
    operator = Operator.from_symbol(symbol) if symbol else Operator.EQ
    return Constraint(operator, Version.parse(version))
