# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import typing as t
from types import MappingProxyType

from resolver_tools import debug, hint, notice, warn
from resolver_tools.errors import CatalogError, InvalidArgumentType
from resolver_tools.semver import Version

from .models import Dependency, Release, parse_dependency


class Catalog:
    """
    Read-only index of all known releases, grouped by package name.

    Every group is sorted newest first. The index is built once and never
    changes afterwards, so a catalog can be shared between threads.
    """

    def __init__(self, releases: t.Optional[t.Iterable[Release]] = None) -> None:
        self._releases: t.Optional[t.Mapping[str, t.Tuple[Release, ...]]] = None

        if releases is not None:
            self.register(releases)

    @classmethod
    def from_index(
        cls, index: t.Mapping[str, t.Mapping[t.Union[str, Version], t.Iterable[str]]]
    ) -> Catalog:
        """
        Build a catalog from ``{name: {version: [dependency, ...]}}``,
        where every dependency is a string like ``"rack >= 2.0"``.
        """
        releases = []
        for name, versions in index.items():
            for version, deps in versions.items():
                if deps is None:
                    deps = []
                elif not isinstance(deps, (list, tuple)):
                    raise InvalidArgumentType(
                        f'{name} {version} dependencies', 'a list or tuple', deps
                    )

                dependencies = [parse_dependency(dep) for dep in deps]
                releases.append(Release(name, version, dependencies))

        return cls(releases)

    def register(self, releases: t.Iterable[Release]) -> None:
        if self._releases is not None:
            raise CatalogError('Catalog is already registered and cannot be extended')

        groups: t.Dict[str, t.Dict[Release, Release]] = {}
        for index, release in enumerate(releases):
            if not isinstance(release, Release):
                raise InvalidArgumentType(f'releases[{index}]', 'a Release', release)

            group = groups.setdefault(release.name, {})
            known = group.get(release)
            if known is None:
                group[release] = release
            elif known.dependencies != release.dependencies:
                warn(
                    'Release %s is listed twice with different dependencies, keeping the first one',
                    release,
                )
            else:
                debug('Skipping duplicate release %s', release)

        self._releases = MappingProxyType({
            name: tuple(sorted(group, key=lambda r: r.version, reverse=True))
            for name, group in groups.items()
        })

        notice(
            'Catalog registered %d release(s) of %d package(s)',
            sum(len(group) for group in self._releases.values()),
            len(self._releases),
        )

        unknown = sorted({
            dependency.name
            for group in self._releases.values()
            for release in group
            for dependency in release.dependencies
            if dependency.name not in self._releases
        })
        if unknown:
            hint(
                'No releases registered for required package(s): %s. '
                'Dependencies on them will have no candidates',
                ', '.join(unknown),
            )

    @property
    def _index(self) -> t.Mapping[str, t.Tuple[Release, ...]]:
        if self._releases is None:
            return MappingProxyType({})

        return self._releases

    @property
    def names(self) -> t.List[str]:
        return sorted(self._index)

    def releases_of(self, name: str) -> t.Tuple[Release, ...]:
        return self._index.get(name, ())

    def versions_of(self, name: str) -> t.List[Version]:
        return [release.version for release in self.releases_of(name)]

    def search(self, dependency: Dependency) -> t.List[Release]:
        """
        Releases satisfying the dependency, newest first.

        An unknown name is a normal miss and yields an empty list.
        """
        candidates = self.releases_of(dependency.name)
        if not candidates:
            debug('No releases of "%s" in the catalog', dependency.name)
            return []

        return [release for release in candidates if dependency.is_satisfied_by(release)]

    def dependencies_of(self, release: Release) -> t.Tuple[Dependency, ...]:
        return release.dependencies

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return sum(len(group) for group in self._index.values())

    def __repr__(self) -> str:
        return f'Catalog({len(self)} releases)'
