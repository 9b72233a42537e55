# SPDX-FileCopyrightText: 2025 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
This module contains utility functions for working with environment variables.
"""

import typing as t
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo, ValidatorFunctionWrapHandler
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


def _env_to_bool(value: str) -> bool:
    """Returns True if environment variable is set to 1, t, y, yes, true, or False otherwise"""

    return value.lower() in {'1', 't', 'true', 'y', 'yes'}


class ResolverSettings(BaseSettings):
    """
    Resolver settings, read from ``RESOLVER_*`` environment variables only.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_prefix='RESOLVER_',
    )

    # LOGGING

    # by default log-level is hint(15)
    DEBUG_MODE: bool = Field(False, description='Enable debug mode.')  # log-level: debug(10)

    NO_HINTS: bool = Field(
        False, description='Disable hints in the output.'
    )  # log-level: notice/info(20)

    NO_COLORS: bool = Field(False, description='Disable colored output.')  # with colorama or not

    # PROVIDER

    ALLOW_MISSING: bool = Field(
        False,
        description="""
            | Let the solver skip dependencies that have no candidates in the catalog
            | instead of treating them as unsatisfiable.
        """,
    )

    @field_validator('*', mode='wrap')
    @classmethod
    def fallback_to_default(
        cls, v: t.Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> t.Any:
        field = cls.model_fields.get(info.field_name)

        try:
            if v is None:
                return field.default

            if field.annotation is bool and isinstance(v, str):
                return _env_to_bool(v)
            else:
                return handler(v)
        except Exception:  # all exceptions will fall back to default
            return field.default

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: t.Type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> t.Tuple[PydanticBaseSettingsSource, ...]:
        # we only want to use the env_settings
        return (env_settings,)

    @classmethod
    @lru_cache(1)
    def known_env_vars(cls) -> t.List[str]:
        prefix = ResolverSettings.model_config.get('env_prefix', '')
        return sorted(prefix + name for name in ResolverSettings.model_fields)
