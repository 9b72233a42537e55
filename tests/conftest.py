# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import pytest

from resolver_provider import Catalog, CatalogProvider
from resolver_tools import HINT_LEVEL, get_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield

    logger = get_logger()
    logger.setLevel(HINT_LEVEL)
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture(autouse=True)
def clean_resolver_env(monkeypatch):
    for name in ['DEBUG_MODE', 'NO_HINTS', 'NO_COLORS', 'ALLOW_MISSING']:
        monkeypatch.delenv(f'RESOLVER_{name}', raising=False)


@pytest.fixture()
def catalog():
    return Catalog.from_index({
        'rack': {'2.0.0': [], '2.1.0': [], '3.0.0': []},
        'sinatra': {
            '2.0.0': ['rack >= 2.0.0'],
            '2.1.0': ['rack >= 2.1.0'],
        },
        'rails': {
            '6.0.0': ['rack ~> 2.0'],
            '7.0.0': ['rack ~> 2.1', 'json'],
        },
        'json': {'1.8.6': [], '2.6.3': []},
        'legacy_app': {'1.0.0': ['rack = 2.0.0']},
        'modern_app': {'1.0.0': ['rack = 3.0.0']},
    })


@pytest.fixture()
def provider(catalog):
    return CatalogProvider(catalog)
