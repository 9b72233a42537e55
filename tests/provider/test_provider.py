# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import pytest

from resolver_provider import CatalogProvider, Dependency, Release, SpecificationProvider
from resolver_tools import ResolverSettings


def test_name_of(provider):
    assert provider.name_of(Dependency('rails', '>= 1.0')) == 'rails'
    assert provider.name_of(Dependency('activerecord', '= 2.0')) == 'activerecord'
    assert provider.name_for_explicit_dependency_source(Dependency('json')) == 'json'
    assert provider.name_for_locking_dependency_source(Dependency('json')) == 'json'


def test_search(provider):
    results = provider.search(Dependency('rack', '>= 2.1.0'))

    assert [str(r.version) for r in results] == ['3.0.0', '2.1.0']
    assert provider.search(Dependency('missing', '>= 1.0')) == []


def test_dependencies_of(provider):
    sinatra = provider.search(Dependency('sinatra', '= 2.1.0'))[0]

    assert list(provider.dependencies_of(sinatra)) == [Dependency('rack', '>= 2.1.0')]
    assert list(provider.dependencies_of(provider.search(Dependency('rack'))[0])) == []


def test_is_requirement_satisfied(provider):
    dependency = Dependency('rack', '~> 2.0')

    assert provider.is_requirement_satisfied(dependency, Release('rack', '2.1.0'))
    assert provider.is_requirement_satisfied(dependency, Release('rack', '2.1.0'), activated={})
    assert not provider.is_requirement_satisfied(dependency, Release('rack', '3.0.0'))
    assert not provider.is_requirement_satisfied(dependency, Release('rails', '2.1.0'))


def test_sort(provider):
    dependencies = [
        Dependency('rspec', '>= 3.0'),
        Dependency('rails', '= 6.0'),
        Dependency('json', '< 2.0'),
    ]

    assert [d.name for d in provider.sort(dependencies, {})] == ['rails', 'json', 'rspec']
    assert [d.name for d in provider.sort(dependencies, {'rspec'})] == ['rspec', 'rails', 'json']


def test_are_requirement_sets_equivalent(provider):
    a = [Dependency('rack', '>= 2.0'), Dependency('json')]

    assert provider.are_requirement_sets_equivalent(a, list(reversed(a)))
    assert not provider.are_requirement_sets_equivalent(a, a[:1])


def test_allow_missing_from_settings(catalog, monkeypatch):
    assert not CatalogProvider(catalog).allow_missing(Dependency('missing'))

    monkeypatch.setenv('RESOLVER_ALLOW_MISSING', '1')
    assert CatalogProvider(catalog).allow_missing(Dependency('missing'))
    assert CatalogProvider(catalog, settings=ResolverSettings()).allow_missing(Dependency('x'))


def test_walk_expansion_graph(provider):
    # newest-first greedy walk, the way a resolver expands the graph without conflicts
    frontier = [Dependency('sinatra', '>= 2.0.0')]
    chosen = {}

    while frontier:
        dependency = provider.sort(frontier, set())[0]
        frontier.remove(dependency)
        if provider.name_of(dependency) in chosen:
            assert provider.is_requirement_satisfied(dependency, chosen[dependency.name])
            continue

        candidate = provider.search(dependency)[0]
        chosen[candidate.name] = candidate
        frontier.extend(provider.dependencies_of(candidate))

    assert {name: str(release.version) for name, release in chosen.items()} == {
        'sinatra': '2.1.0',
        'rack': '3.0.0',
    }


def test_base_provider_requires_a_source():
    provider = SpecificationProvider()

    with pytest.raises(NotImplementedError):
        provider.search(Dependency('rack'))

    with pytest.raises(NotImplementedError):
        provider.dependencies_of(Release('rack', '1.0.0'))

    assert not provider.allow_missing(Dependency('rack'))
