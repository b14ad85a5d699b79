"""
Configuration model for the rules engine.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import RulesConfigError

logger = logging.getLogger("dm20-rules")

ENV_PREFIX = "DM20_RULES_"


class RulesConfig(BaseModel):
    """Tunable limits for the rules engine.

    The defaults are the SRD values. Validators fall back to DEFAULT_CONFIG
    when no config is passed, so results never depend on the environment
    unless the caller asks for it through load_config().
    """

    point_buy_budget: int = Field(
        default=27,
        ge=0,
        description="Points available when generating scores by point buy"
    )
    ability_score_normal_max: int = Field(
        default=20,
        ge=1,
        description="Highest score reachable without magic items or special features"
    )
    ability_score_absolute_max: int = Field(
        default=30,
        ge=1,
        description="Hard ceiling for any ability score"
    )
    log_level: str = Field(
        default="WARNING",
        description="Level applied to the dm20-rules logger by configure_logging()"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @model_validator(mode="after")
    def check_score_ceilings(self) -> RulesConfig:
        if self.ability_score_absolute_max < self.ability_score_normal_max:
            raise ValueError(
                "ability_score_absolute_max must be >= ability_score_normal_max "
                f"(got {self.ability_score_absolute_max} < {self.ability_score_normal_max})"
            )
        return self


DEFAULT_CONFIG = RulesConfig()


def load_config(env_file: str | Path | None = None) -> RulesConfig:
    """Build a RulesConfig from DM20_RULES_* environment variables.

    A .env file is loaded first when present; variables already set in the
    environment win.

    Raises:
        RulesConfigError: If a variable holds an invalid value.
    """
    if not load_dotenv(env_file):
        logger.debug("No .env file found, reading rules config from the environment only")

    values: dict[str, str] = {}
    for name in RulesConfig.model_fields:
        raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None:
            values[name] = raw

    try:
        config = RulesConfig(**values)
    except ValidationError as e:
        raise RulesConfigError(f"Invalid rules configuration: {e}") from e

    logger.debug(f"Rules config loaded: {config.model_dump()}")
    return config


def configure_logging(config: RulesConfig | None = None) -> None:
    """Apply the configured level to the dm20-rules logger hierarchy."""
    config = config or DEFAULT_CONFIG
    logging.getLogger("dm20-rules").setLevel(config.log_level)
