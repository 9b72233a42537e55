# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

from .base import Version, compare, validate
from .constraint import Constraint, Operator, parse_constraint

__all__ = [
    'compare',
    'validate',
    'parse_constraint',
    'Constraint',
    'Operator',
    'Version',
]
