"""Front matter handling for page templates.

A page template may start with a metadata block that ends at the first line
of three hyphens::

    title: Hello
    layout: default
    ---
    <h1>{{ title }}</h1>

Only the first delimiter counts. Everything after it is the template body,
passed to the engine untouched, so a later ``---`` line stays in the body.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from .errors import FrontMatterError

# Optional newlines, three hyphens, newline
FRONT_MATTER_DELIMITER = re.compile(r"\n*-{3}\n")


def split_front_matter(source: str) -> tuple[str | None, str]:
    """Split *source* into ``(metadata, body)``.

    When no delimiter is present the metadata is ``None`` and the body is the
    whole source with surrounding whitespace trimmed.
    """
    parts = FRONT_MATTER_DELIMITER.split(source, maxsplit=1)
    if len(parts) == 2:
        return parts[0], parts[1]
    return None, source.strip()


def strip_front_matter(source: str) -> str:
    """Return the template body of *source* without its front matter"""
    _, body = split_front_matter(source)
    return body


def parse_front_matter(source: str) -> tuple[dict[str, Any], str]:
    """フロントマターを YAML として読み込み、(メタデータ, 本文) を返す

    Raises:
        FrontMatterError: メタデータが YAML のマッピングではない場合
    """
    metadata, body = split_front_matter(source)
    if metadata is None or not metadata.strip():
        return {}, body

    try:
        data = yaml.safe_load(metadata)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid front matter: {exc}") from exc

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a YAML mapping, got {type(data).__name__}"
        )
    return data, body
