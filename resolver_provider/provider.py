# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""Entry points a backtracking resolver calls while it searches"""

import typing as t

from resolver_tools import ResolverSettings

from .catalog import Catalog
from .models import Dependency, Release
from .ordering import are_requirement_sets_equivalent, sort_dependencies


class SpecificationProvider:
    """
    Interface between the external resolver and a source of releases.
    """

    def name_of(self, dependency: Dependency) -> str:
        return dependency.name

    def search(self, dependency: Dependency) -> t.List[Release]:
        raise NotImplementedError()

    def dependencies_of(self, release: Release) -> t.Sequence[Dependency]:
        raise NotImplementedError()

    def is_requirement_satisfied(
        self, dependency: Dependency, candidate: Release, activated: t.Any = None
    ) -> bool:
        """``activated`` is the resolver's current graph, not needed here"""
        return dependency.is_satisfied_by(candidate)

    def sort(
        self,
        dependencies: t.Iterable[Dependency],
        conflicts: t.Optional[t.Container[str]] = None,
        activated: t.Any = None,
    ) -> t.List[Dependency]:
        return sort_dependencies(dependencies, conflicts)

    def are_requirement_sets_equivalent(
        self,
        dependencies: t.Optional[t.Sequence[Dependency]],
        other_dependencies: t.Optional[t.Sequence[Dependency]],
    ) -> bool:
        return are_requirement_sets_equivalent(dependencies, other_dependencies)

    def name_for_explicit_dependency_source(self, dependency: Dependency) -> str:
        return dependency.name

    def name_for_locking_dependency_source(self, dependency: Dependency) -> str:
        return dependency.name

    def allow_missing(self, dependency: Dependency) -> bool:
        return False


class CatalogProvider(SpecificationProvider):
    def __init__(
        self, catalog: Catalog, settings: t.Optional[ResolverSettings] = None
    ) -> None:
        self._catalog = catalog
        self._settings = settings or ResolverSettings()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def search(self, dependency: Dependency) -> t.List[Release]:
        return self._catalog.search(dependency)

    def dependencies_of(self, release: Release) -> t.Sequence[Dependency]:
        return self._catalog.dependencies_of(release)

    def allow_missing(self, dependency: Dependency) -> bool:
        return self._settings.ALLOW_MISSING
