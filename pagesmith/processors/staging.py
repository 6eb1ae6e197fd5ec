"""Template source reading and prepared-template staging.

The engine loads templates by name, so the stripped body has to be made
visible to it under ``<template_filename>.ready`` for the duration of one
render. Two backends exist:

* ``memory`` puts the body into the mapping behind the processor's
  ``DictLoader`` and removes it afterwards.
* ``file`` writes a sibling file next to the template and deletes it
  afterwards.

Both release the prepared template on every exit path.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator, Iterator, MutableMapping
from pathlib import Path

import aiofiles
import aiofiles.os

from pagesmith.config import ProcessorConfig
from pagesmith.utils.logger import get_logger

logger = get_logger("pagesmith.staging")


def read_template_source(path: Path) -> str:
    """Read a template file without newline translation"""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


async def aread_template_source(path: Path) -> str:
    """テンプレートファイルを非同期で読み込む（改行変換なし）"""
    async with aiofiles.open(path, encoding="utf-8", newline="") as f:
        return await f.read()


def _write_prepared(path: Path, body: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(body)


def _remove_prepared(path: Path) -> None:
    with contextlib.suppress(FileNotFoundError):
        path.unlink()


@contextlib.contextmanager
def prepared_template(
    config: ProcessorConfig,
    body: str,
    staged: MutableMapping[str, str],
) -> Iterator[str]:
    """Stage *body* for the engine and yield the name to load it by."""
    name = config.prepared_name

    if config.staging == "file":
        path = config.prepared_path
        try:
            _write_prepared(path, body)
            logger.debug("Staged prepared template", template=name, path=str(path))
            yield name
        finally:
            _remove_prepared(path)
            logger.debug("Removed prepared template", template=name)
        return

    staged[name] = body
    logger.debug("Staged prepared template in memory", template=name)
    try:
        yield name
    finally:
        staged.pop(name, None)
        logger.debug("Released in-memory template", template=name)


@contextlib.asynccontextmanager
async def aprepared_template(
    config: ProcessorConfig,
    body: str,
    staged: MutableMapping[str, str],
) -> AsyncIterator[str]:
    """Async counterpart of :func:`prepared_template`"""
    name = config.prepared_name

    if config.staging == "file":
        path = config.prepared_path
        try:
            async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
                await f.write(body)
            logger.debug("Staged prepared template", template=name, path=str(path))
            yield name
        finally:
            with contextlib.suppress(FileNotFoundError):
                await aiofiles.os.remove(path)
            logger.debug("Removed prepared template", template=name)
        return

    staged[name] = body
    logger.debug("Staged prepared template in memory", template=name)
    try:
        yield name
    finally:
        staged.pop(name, None)
        logger.debug("Released in-memory template", template=name)
