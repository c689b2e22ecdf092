from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .logger import get_logger

log = get_logger(__name__)

__all__ = [
    "TransformOptions",
    "ResolverConfigModel",
    "ResolverConfig",
    "coerce_options",
]

WarningCallback = Callable[[str], None]


class TransformOptions(BaseModel):
    """Options for a single transform call."""

    # Drop rules and declarations that neither define nor use a variable.
    only_variables: bool = True
    # Keep definitions and var() declarations next to their resolved copies.
    preserve_originals: bool = True
    # Extra definitions merged after :root; they always win.
    override_variables: Dict[str, str] = Field(default_factory=dict)
    # Flatten calc() nested inside calc() in resolved values.
    fix_nested_calc: bool = True
    on_warning: Optional[WarningCallback] = None

    @field_validator("override_variables", mode="before")
    @classmethod
    def _stringify_values(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(k): str(v) for k, v in value.items()}
        return value


def coerce_options(
    options: Union[TransformOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> TransformOptions:
    """Build :class:`TransformOptions` from a model, a mapping or keywords."""
    try:
        if isinstance(options, TransformOptions):
            if not overrides:
                return options
            data: Dict[str, Any] = options.model_dump(exclude={"on_warning"})
            data["on_warning"] = options.on_warning
        else:
            data = dict(options or {})
        data.update(overrides)
        return TransformOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid transform options: {exc}") from exc


class ResolverConfigModel(BaseModel):
    """On-disk configuration for the command line."""

    only_variables: bool = True
    preserve_originals: bool = True
    fix_nested_calc: bool = True
    override_variables: Dict[str, str] = Field(default_factory=dict)
    silent: bool = False
    sources: List[str] = Field(default_factory=list)

    @field_validator("override_variables", mode="before")
    @classmethod
    def _stringify_values(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(k): str(v) for k, v in value.items()}
        return value

    def to_options(self, on_warning: Optional[WarningCallback] = None) -> TransformOptions:
        return TransformOptions(
            only_variables=self.only_variables,
            preserve_originals=self.preserve_originals,
            override_variables=dict(self.override_variables),
            fix_nested_calc=self.fix_nested_calc,
            on_warning=on_warning,
        )


class ResolverConfig:
    def __init__(self, path: Path):
        self.path = path
        self.model: Optional[ResolverConfigModel] = None

    def load(self) -> ResolverConfigModel:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Cannot read config {self.path}: {exc}") from exc
        try:
            self.model = ResolverConfigModel.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config {self.path}: {exc}") from exc
        log.debug(f"Loaded resolver config from {self.path}")
        return self.model
