# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
Ordering of the solver frontier.

Requirements that are hardest to satisfy are tried first, so the solver
runs into dead ends early and backtracks less:

1. packages already involved in a conflict,
2. more restrictive operators before looser ones,
3. package name, for a reproducible order.
"""

import logging
import typing as t

from resolver_tools import debug, get_logger
from resolver_tools.semver import Constraint, Operator

from .models import Dependency

RESTRICTIVENESS = {
    Operator.EQ: 0,
    Operator.LT: 1,
    Operator.GT: 1,
    Operator.GTE: 2,
    Operator.LTE: 2,
}
LEAST_RESTRICTIVE = 3


def restrictiveness(constraint: t.Optional[Constraint]) -> int:
    """Lower is more restrictive, a missing constraint is the loosest"""
    if constraint is None:
        return LEAST_RESTRICTIVE

    return RESTRICTIVENESS.get(constraint.operator, LEAST_RESTRICTIVE)


def sort_key(
    dependency: Dependency, conflicts: t.Container[str]
) -> t.Tuple[int, int, str]:
    return (
        0 if dependency.name in conflicts else 1,
        restrictiveness(dependency.constraint),
        dependency.name,
    )


def sort_dependencies(
    dependencies: t.Iterable[Dependency], conflicts: t.Optional[t.Container[str]] = None
) -> t.List[Dependency]:
    """
    Stable sort of the frontier, see the module docstring for the key.

    ``conflicts`` is any container of package names (set, dict, ...).
    """
    if conflicts is None:
        conflicts = frozenset()

    result = sorted(dependencies, key=lambda dependency: sort_key(dependency, conflicts))
    if get_logger().isEnabledFor(logging.DEBUG):
        debug('Sorted dependencies: %s', ', '.join(str(dependency) for dependency in result))

    return result


def _equivalence_key(
    dependency: Dependency,
) -> t.Tuple[str, str, t.Tuple[int, ...]]:
    constraint = dependency.constraint
    if constraint is None:
        return dependency.name, '', ()

    return dependency.name, constraint.operator.value, constraint.target.as_tuple()


def are_requirement_sets_equivalent(
    a: t.Optional[t.Sequence[Dependency]], b: t.Optional[t.Sequence[Dependency]]
) -> bool:
    """
    True when both sequences hold the same dependencies in any order.
    """
    if a is None or b is None:
        return a is None and b is None

    if len(a) != len(b):
        return False

    return sorted(a, key=_equivalence_key) == sorted(b, key=_equivalence_key)
