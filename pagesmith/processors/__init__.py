"""Template processors for the page pipeline.

Processors are created by name so pipeline configuration can pick one::

    >>> from pagesmith.processors import create_processor
    >>> processor = create_processor(
    ...     "jinja", {"template_dir": "site/entries", "template_filename": "index.html"}
    ... )
    >>> html = processor.render(variables={"title": "Home"})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pagesmith.config import ProcessorConfig

from .base import BaseProcessor, Processor
from .errors import (
    FrontMatterError,
    ProcessorError,
    ProcessorNotConfiguredError,
    UnknownProcessorError,
)
from .frontmatter import parse_front_matter, split_front_matter, strip_front_matter
from .jinja import JinjaProcessor
from .project_path import ProjectPath

_PROCESSORS: dict[str, type[BaseProcessor]] = {}


def register_processor(name: str, processor_class: type[BaseProcessor]) -> None:
    """Register a processor class under *name* (case-insensitive)"""
    _PROCESSORS[name.lower()] = processor_class


def available_processors() -> list[str]:
    return sorted(_PROCESSORS)


def create_processor(
    name: str,
    config: ProcessorConfig | Mapping[str, Any] | None = None,
) -> BaseProcessor:
    """Instantiate the processor registered under *name*.

    Raises:
        UnknownProcessorError: If nothing is registered under *name*
    """
    processor_class = _PROCESSORS.get(name.lower())
    if processor_class is None:
        raise UnknownProcessorError(name, available_processors())

    processor = processor_class()
    if config is not None:
        processor.set_config(config)
    return processor


register_processor("jinja", JinjaProcessor)
register_processor("jinja2", JinjaProcessor)

__all__ = [
    "BaseProcessor",
    "FrontMatterError",
    "JinjaProcessor",
    "Processor",
    "ProcessorError",
    "ProcessorNotConfiguredError",
    "ProjectPath",
    "UnknownProcessorError",
    "available_processors",
    "create_processor",
    "parse_front_matter",
    "register_processor",
    "split_front_matter",
    "strip_front_matter",
]
