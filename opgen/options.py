"""Generator configuration.

Options come from a JSON file whose keys use camelCase
(``excludeParameters``, ``skipJsonSuffix``, ...). The snake_case field names
are accepted as well, which keeps tests and programmatic use readable.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError


class Options(BaseModel):
    """Options recognized by the generator."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    input: Optional[str] = Field(default=None, description="Path to the OpenAPI document")
    output: str = Field(default="generated", description="Output directory")
    templates: Optional[str] = Field(
        default=None, description="Directory with custom templates overriding the built-ins",
    )
    exclude_parameters: list[str] = Field(
        default_factory=list,
        alias="excludeParameters",
        description="Parameter names that are always dropped",
    )
    skip_json_suffix: bool = Field(
        default=False,
        alias="skipJsonSuffix",
        description="Collapse a plain 'json' content label to an empty method suffix",
    )
    silent: bool = Field(default=False, description="Suppress warnings")
    default_tag: str = Field(
        default="Api", alias="defaultTag", description="Tag for operations without tags",
    )
    file_extension: str = Field(
        default=".ts", alias="fileExtension", description="Extension of generated files",
    )


def load_options(path: Path | str) -> Options:
    """Read options from a JSON configuration file."""
    config_file = Path(path)
    try:
        data = json.loads(config_file.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_file}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {config_file}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a JSON object")
    data.pop("$schema", None)

    try:
        return Options.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {config_file}: {exc}") from exc
