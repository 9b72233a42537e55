# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0


from resolver_tools import HINT_LEVEL, get_logger


def debug(message: str, *args, **kwargs) -> None:
    """Log in level 10 (DEBUG)"""
    logger = get_logger()
    logger.debug(message, *args, **kwargs)


def hint(message: str, *args, **kwargs) -> None:
    """Log in level 15"""
    logger = get_logger()
    logger.log(HINT_LEVEL, message, *args, **kwargs)


def notice(message: str, *args, **kwargs) -> None:
    """Log in level 20 (INFO)"""
    logger = get_logger()
    logger.info(message, *args, **kwargs)


def warn(message: str, *args, **kwargs) -> None:
    """Log in level 30 (WARNING)"""
    logger = get_logger()
    logger.warning(message, *args, **kwargs)
