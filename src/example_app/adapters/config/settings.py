"""Typed views of the ``[demo]`` and ``[arithmetic]`` configuration sections.

Pydantic parses the raw section dictionaries once at the boundary; the rest
of the application only sees validated, frozen models.

Contents:
    * :class:`DemoSettings` - Message and operands for the demo command.
    * :class:`ArithmeticSettings` - Overflow mode for the arithmetic utility.
    * :func:`load_demo_settings` / :func:`load_arithmetic_settings` - Loaders
      that translate validation failures into :class:`ConfigurationError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator

from example_app.domain.enums import OverflowMode
from example_app.domain.errors import ConfigurationError


class DemoSettings(BaseModel):
    """Inputs of the demo run.

    Example:
        >>> settings = DemoSettings()
        >>> settings.message, settings.left, settings.right
        ('  maven tutorial  ', 5, 3)
    """

    model_config = ConfigDict(frozen=True)

    message: str = "  maven tutorial  "
    left: StrictInt = 5
    right: StrictInt = 3


class ArithmeticSettings(BaseModel):
    """Arithmetic behaviour switches.

    Example:
        >>> ArithmeticSettings(overflow="WRAP32").overflow
        <OverflowMode.WRAP32: 'wrap32'>
    """

    model_config = ConfigDict(frozen=True)

    overflow: OverflowMode = OverflowMode.UNBOUNDED

    @field_validator("overflow", mode="before")
    @classmethod
    def _normalise_overflow(cls, v: Any) -> Any:
        """Accept mode names case-insensitively and with surrounding blanks."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def _section(config: Config, name: str) -> dict[str, object]:
    raw: object = config.get(name, default={})
    if not raw:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{name}] must be a table, got {type(raw).__name__}")
    return dict(cast("Mapping[str, object]", raw))


def load_demo_settings(config: Config) -> DemoSettings:
    """Parse the ``[demo]`` section.

    Raises:
        ConfigurationError: If a value has the wrong type.
    """
    try:
        return DemoSettings.model_validate(_section(config, "demo"))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [demo] configuration: {exc}") from exc


def load_arithmetic_settings(config: Config) -> ArithmeticSettings:
    """Parse the ``[arithmetic]`` section.

    Raises:
        ConfigurationError: If the overflow mode is unknown.

    Example:
        >>> load_arithmetic_settings(Config({"arithmetic": {"overflow": "wrap64"}}, {})).overflow
        <OverflowMode.WRAP64: 'wrap64'>
    """
    try:
        return ArithmeticSettings.model_validate(_section(config, "arithmetic"))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [arithmetic] configuration: {exc}") from exc


__all__ = [
    "ArithmeticSettings",
    "DemoSettings",
    "load_arithmetic_settings",
    "load_demo_settings",
]
