# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging

from resolver_provider import Catalog, Dependency, Release
from resolver_tools import (
    HINT_LEVEL,
    ResolverSettings,
    debug,
    get_logger,
    hint,
    notice,
    setup_logging,
    warn,
)
from resolver_tools.logging import LevelRangeFilter, ResolverFormatter


def test_setup_logging_streams(capsys):
    setup_logging()

    debug('hidden')
    hint('try this')
    notice('done')
    warn('careful')

    captured = capsys.readouterr()
    assert captured.out == 'HINT: try this\nNOTICE: done\n'
    assert captured.err == 'WARNING: careful\n'


def test_setup_logging_levels(monkeypatch):
    setup_logging()
    assert get_logger().level == HINT_LEVEL

    monkeypatch.setenv('RESOLVER_NO_HINTS', '1')
    setup_logging()
    assert get_logger().level == logging.INFO

    monkeypatch.setenv('RESOLVER_DEBUG_MODE', '1')
    setup_logging()
    assert get_logger().level == logging.DEBUG
    assert len(get_logger().handlers) == 2


def test_setup_logging_with_explicit_settings(monkeypatch):
    monkeypatch.setenv('RESOLVER_DEBUG_MODE', '1')

    setup_logging(ResolverSettings.model_construct(DEBUG_MODE=False, NO_HINTS=True))

    assert get_logger().level == logging.INFO


def test_message_arguments(capsys, monkeypatch):
    monkeypatch.setenv('RESOLVER_DEBUG_MODE', '1')
    setup_logging()

    debug('found %d release(s) of "%s"', 3, 'rack')

    assert capsys.readouterr().out == 'DEBUG: found 3 release(s) of "rack"\n'


def test_catalog_messages_reach_their_streams(capsys):
    setup_logging()

    Catalog([
        Release('sinatra', '2.0.0', [Dependency('rack')]),
        Release('sinatra', '2.0.0', [Dependency('json')]),
    ])

    captured = capsys.readouterr()
    assert 'NOTICE: Catalog registered 1 release(s) of 1 package(s)\n' in captured.out
    assert 'HINT: No releases registered for required package(s): rack.' in captured.out
    assert captured.err == (
        'WARNING: Release sinatra (2.0.0) is listed twice with different dependencies, '
        'keeping the first one\n'
    )


def test_level_range_filter():
    def record(level):
        return logging.LogRecord('x', level, __file__, 1, 'msg', None, None)

    below_warning = LevelRangeFilter(high=logging.WARNING)
    assert below_warning.filter(record(logging.DEBUG))
    assert below_warning.filter(record(HINT_LEVEL))
    assert not below_warning.filter(record(logging.WARNING))

    from_warning = LevelRangeFilter(low=logging.WARNING)
    assert not from_warning.filter(record(logging.INFO))
    assert from_warning.filter(record(logging.CRITICAL))


def test_formatter_unknown_level():
    message = logging.LogRecord('x', 25, __file__, 1, 'between', None, None)

    assert ResolverFormatter(colored=False).format(message) == 'Level 25: between'
