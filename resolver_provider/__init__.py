# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

from .catalog import Catalog
from .models import Dependency, Release, parse_dependencies, parse_dependency
from .ordering import are_requirement_sets_equivalent, restrictiveness, sort_dependencies
from .provider import CatalogProvider, SpecificationProvider

__all__ = [
    'Catalog',
    'CatalogProvider',
    'Dependency',
    'Release',
    'SpecificationProvider',
    'are_requirement_sets_equivalent',
    'parse_dependencies',
    'parse_dependency',
    'restrictiveness',
    'sort_dependencies',
]
