"""Unified settings: CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``STRVAL_*`` prefix
  3. Code defaults

Coercion rules are fixed; settings only cover the process around them.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class StrvalSettings(BaseSettings):
    """Settings for the ``strval`` CLI.

    Attributes:
        verbose: Emit DEBUG logs for the ``strval`` logger.
        log_json: Render logs (including coercion diagnostics) as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STRVAL_",
    }

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and environment; no dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> StrvalSettings:
        """Construct settings from CLI flags.

        Flags left at their unset value (``False``/``None``) do not mask
        environment variables.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
