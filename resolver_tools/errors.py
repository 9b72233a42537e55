# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t


class ResolverError(Exception):
    """Base class for all errors raised by the resolver data layer"""


class InternalError(RuntimeError):
    """Internal Error, should report to us"""

    def __init__(self, extra_msg: t.Optional[str] = None):
        err = (
            'This is an internal error. Please report it '
            'with your operating system, resolver version, '
            'and the traceback log. Thanks for reporting! '
        )

        if extra_msg:
            err = extra_msg + '\n' + err

        super().__init__(err)


class ConstructionError(ResolverError):
    """Malformed value passed to a constructor"""


class InvalidOperator(ConstructionError, ValueError):
    def __init__(self, operator: t.Any, known: t.Iterable[str]) -> None:
        super().__init__(
            'Invalid operator: {!r}. Must be one of {}'.format(
                operator, ', '.join(f'"{op}"' for op in known)
            )
        )
        self.operator = operator


class InvalidArgumentType(ConstructionError, TypeError):
    def __init__(self, field_name: str, expected: str, value: t.Any) -> None:
        super().__init__(
            '{} must be {}, got {}'.format(field_name, expected, type(value).__name__)
        )
        self.field_name = field_name
        self.value = value


class InvalidVersion(ConstructionError, ValueError):
    pass


class CatalogError(ResolverError):
    pass
