"""Process-wide configuration, overridable per execution context.

The configuration is loaded once at import time. Code reads it through
``get_config()``; tests and scripts swap parts of it with ``with_context``.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.config_template import load_templated_yaml
from src.catalog.runtime.config.settings import EnvironmentVariables


@dataclass
class AppContext:
    config: ConfigData


def load_default_config() -> ConfigData:
    """Load the configured YAML file, or fall back to defaults when it is absent.

    ``LOG_LEVEL`` from the environment or ``.env`` wins over the file.
    """
    env = EnvironmentVariables()
    config_path = Path(env.config_path)
    if config_path.is_file():
        config = load_templated_yaml(config_path)
    else:
        logger.warning("Config file {} not found; using defaults", config_path)
        config = ConfigData()
        config.app.environment = env.environment
        config.database.environment_mode = env.environment

    if env.log_level:
        config.logging.level = env.log_level
    return config


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=load_default_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def _explicit_values(model: BaseModel) -> dict[str, Any]:
    """Values assigned on ``model`` or any nested section, nothing else."""
    values: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_values(value)
            if nested:
                values[name] = nested
            elif name in model.model_fields_set:
                values[name] = value.model_dump()
        elif name in model.model_fields_set:
            values[name] = value
    return values


def _overlay(base: dict[str, Any], changes: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily apply the fields explicitly set on ``config_override``.

    Fields left at their defaults on the override keep the current values:

        override = ConfigData()
        override.database.url = "sqlite://"
        with with_context(override):
            ...  # only database.url differs
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    current = get_context()
    merged = ConfigData.model_validate(
        _overlay(current.config.model_dump(), _explicit_values(config_override))
    )
    token = set_context(replace(current, config=merged))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the whole configuration for the current context."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    return get_context().config
