"""Mediator configuration loaded from MEDIATOR_* environment variables."""

import json
import os
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .exceptions import ConfigurationError
from .logging_config import logger

MEDIATOR_ENV_VAR_PREFIX = "MEDIATOR_"

# MEDIATOR_* variables that configure logging rather than the mediator
_NON_CONFIG_ENV_VARS = {"MEDIATOR_LOG_LEVEL"}


def _parse_env_value(value: str, annotation: Any) -> Any:
    # String fields keep the raw value
    if annotation is str:
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


class MediatorConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    strict_dispatch: bool = Field(
        default=False,
        description="Raise UnregisteredDirectorError when no director handles a signal",
    )
    default_key: str = Field(
        default="default",
        min_length=1,
        description="Registry key used when register/unregister are called without one",
    )

    @classmethod
    def from_env(cls, **overrides: Any) -> "MediatorConfig":
        """Create MediatorConfig from environment variables.

        Keyword arguments take precedence over MEDIATOR_* environment variables.

        Raises:
            ConfigurationError: If a value fails validation
        """
        try:
            return cls(**overrides)
        except ValidationError as e:
            logger.error(f"Invalid mediator configuration: {e}")
            raise ConfigurationError(f"Invalid mediator configuration: {e}") from e

    @model_validator(mode="before")
    @classmethod
    def load_from_env_vars(cls, data: Any) -> Dict[str, Any]:
        """Merge MEDIATOR_* environment variables under the provided data.

        Unknown MEDIATOR_* variables are ignored (only defined fields are loaded).
        """
        env_config: Dict[str, Any] = {}
        for key, val in os.environ.items():
            if (
                not key.startswith(MEDIATOR_ENV_VAR_PREFIX)
                or key in _NON_CONFIG_ENV_VARS
            ):
                continue
            field_name = key[len(MEDIATOR_ENV_VAR_PREFIX) :].lower()
            field = cls.model_fields.get(field_name)
            annotation = field.annotation if field is not None else None
            env_config[field_name] = _parse_env_value(val, annotation)

        if isinstance(data, dict):
            return {**env_config, **data}
        return env_config
