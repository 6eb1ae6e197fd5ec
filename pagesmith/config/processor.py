"""Caller-owned configuration for a single template processor"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pagesmith.config.settings import get_settings

# Suffix of the front-matter-stripped copy handed to the engine
PREPARED_SUFFIX = ".ready"

Staging = Literal["memory", "file"]


class ProcessorConfig(BaseModel):
    """Where a template lives and how the engine should be set up for it.

    Any option the model does not know about is treated as a keyword argument
    for the engine environment (see :meth:`from_mapping`).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    template_dir: Path
    template_filename: str
    staging: Staging = Field(default_factory=lambda: get_settings().default_staging)
    project_markers: tuple[str, ...] = Field(
        default_factory=lambda: get_settings().project_markers
    )
    layouts_dirname: str = Field(
        default_factory=lambda: get_settings().layouts_dirname
    )
    environment: dict[str, Any] = Field(default_factory=dict)

    @field_validator("template_filename")
    @classmethod
    def _filename_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("template_filename must not be empty")
        return value

    @property
    def source_path(self) -> Path:
        """Path of the template file as authored"""
        return self.template_dir / self.template_filename

    @property
    def prepared_name(self) -> str:
        """Loader name of the prepared template (always '/'-separated)"""
        return PurePath(self.template_filename).as_posix() + PREPARED_SUFFIX

    @property
    def prepared_path(self) -> Path:
        """Sibling file used when staging on disk"""
        return self.template_dir / (self.template_filename + PREPARED_SUFFIX)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> ProcessorConfig:
        """Build a config from plain processor options.

        Keys that are not config fields are merged into ``environment`` so
        pipeline-level options such as ``trim_blocks`` reach the engine.
        """
        known = set(cls.model_fields)
        data = {key: value for key, value in options.items() if key in known}
        extra = {key: value for key, value in options.items() if key not in known}
        if extra:
            data["environment"] = {**dict(data.get("environment") or {}), **extra}
        return cls.model_validate(data)
