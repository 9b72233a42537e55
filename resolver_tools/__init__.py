# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging as lib_logging

LOGGING_NAMESPACE = __package__
HINT_LEVEL = 15


def get_logger() -> lib_logging.Logger:
    """
    Get logger for the resolver.

    Use this instead of `logging.getLogger(__package__)` to get the universal logger for both
    resolver_tools and resolver_provider
    """
    return lib_logging.getLogger(LOGGING_NAMESPACE)


from resolver_tools.environment import ResolverSettings  # noqa: E402
from resolver_tools.logging import setup_logging  # noqa: E402
from resolver_tools.messages import (  # noqa: E402
    debug,
    hint,
    notice,
    warn,
)

__all__ = [
    'ResolverSettings',
    'debug',
    'get_logger',
    'hint',
    'notice',
    'setup_logging',
    'warn',
]
