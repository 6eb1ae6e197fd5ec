"""Jinja2 template processor

Renders page templates through Jinja2. The page's front matter is stripped,
the body is staged as ``<template_filename>.ready`` and loaded by name, so
``{% extends %}`` and ``{% include %}`` resolve against the template
directory and, inside a project, its ``layouts`` directory and root.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader

from pagesmith.config import ProcessorConfig
from pagesmith.utils.error_handler import critical_operation
from pagesmith.utils.logger import preview_source

from .base import BaseProcessor
from .errors import ProcessorNotConfiguredError
from .frontmatter import strip_front_matter
from .project_path import ProjectPath
from .staging import (
    aprepared_template,
    aread_template_source,
    prepared_template,
    read_template_source,
)

# Environment options the processor always sets itself
_RESERVED_OPTIONS = ("loader",)


class JinjaProcessor(BaseProcessor):
    """Jinja2 テンプレートプロセッサ

    Passing a config to the constructor yields a ready-to-use processor.
    Output is never autoescaped: pipeline variables are substituted raw.
    """

    def __init__(self, config: ProcessorConfig | Mapping[str, Any] | None = None):
        super().__init__()
        self._environment: Environment | None = None
        self._staged: dict[str, str] = {}
        if config is not None:
            self.configure(config)

    def set_config(
        self, config: ProcessorConfig | Mapping[str, Any]
    ) -> JinjaProcessor:
        super().set_config(config)
        return self.reset()

    def configure(
        self, config: ProcessorConfig | Mapping[str, Any]
    ) -> JinjaProcessor:
        """Apply *config*, rebuilding the environment only if it changed"""
        config = self.coerce_config(config)
        if self._environment is not None and self._config == config:
            return self
        return self.set_config(config)

    def reset(self) -> JinjaProcessor:
        """Rebuild the environment from the current config"""
        self._environment = self.build_environment()
        return self

    @property
    def environment(self) -> Environment:
        if self._environment is None:
            raise ProcessorNotConfiguredError(
                "JinjaProcessor must be configured before rendering"
            )
        return self._environment

    @property
    def staged_templates(self) -> Mapping[str, str]:
        """Prepared templates currently held in memory"""
        return dict(self._staged)

    def search_paths(self) -> list[Path]:
        """Directories searched for the template and the ones it pulls in"""
        config = self.get_config()
        paths = [config.template_dir]

        project = ProjectPath(config.template_dir, markers=config.project_markers)
        project_dir = project.get()
        if project_dir is not None:
            paths.append(project_dir / config.layouts_dirname)
            paths.append(project_dir)
        return paths

    def build_environment(self) -> Environment:
        config = self.get_config()
        options = dict(config.environment)

        if options.pop("autoescape", False):
            self.logger.warning(
                "Autoescaping is disabled for page templates",
                template=config.template_filename,
            )
        for option in _RESERVED_OPTIONS:
            if options.pop(option, None) is not None:
                self.logger.warning("Ignoring environment option", option=option)

        paths = self.search_paths()
        loader = ChoiceLoader(
            [
                DictLoader(self._staged),
                FileSystemLoader([str(path) for path in paths]),
            ]
        )
        environment = Environment(loader=loader, autoescape=False, **options)
        self.logger.debug(
            "Built template environment",
            template=config.template_filename,
            search_paths=[str(path) for path in paths],
            staging=config.staging,
        )
        return environment

    @critical_operation("render template")
    def render(
        self,
        template: str | None = None,
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        """Render a page template.

        Args:
            template: Template source as already read by the pipeline. When
                omitted the configured template file is read.
            variables: Values available inside the template.

        Returns:
            The rendered text.
        """
        config = self.get_config()
        if template is None:
            template = read_template_source(config.source_path)
        body = strip_front_matter(template)

        with prepared_template(config, body, self._staged) as name:
            rendered = self.environment.get_template(name).render(
                dict(variables or {})
            )

        self.logger.debug(
            "Rendered template",
            template=config.template_filename,
            body=preview_source(body),
            length=len(rendered),
        )
        return rendered

    @critical_operation("render template")
    async def arender(
        self,
        template: str | None = None,
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        """非同期パイプライン向けの render（読み込みとステージングのみ非同期）"""
        config = self.get_config()
        if template is None:
            template = await aread_template_source(config.source_path)
        body = strip_front_matter(template)

        async with aprepared_template(config, body, self._staged) as name:
            rendered = self.environment.get_template(name).render(
                dict(variables or {})
            )

        self.logger.debug(
            "Rendered template",
            template=config.template_filename,
            body=preview_source(body),
            length=len(rendered),
        )
        return rendered
