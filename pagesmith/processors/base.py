"""Processor base classes and protocols"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pagesmith.config import ProcessorConfig
from pagesmith.utils.mixins import LoggerMixin

from .errors import ProcessorNotConfiguredError


@runtime_checkable
class Processor(Protocol):
    """Interface every pipeline processor implements."""

    def render(
        self,
        template: str | None = None,
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        """Render template source with the given variables."""
        ...


class BaseProcessor(LoggerMixin, ABC):
    """Holds the processor configuration shared by concrete processors"""

    def __init__(self) -> None:
        self._config: ProcessorConfig | None = None

    @staticmethod
    def coerce_config(
        config: ProcessorConfig | Mapping[str, Any],
    ) -> ProcessorConfig:
        if isinstance(config, ProcessorConfig):
            return config
        return ProcessorConfig.from_mapping(config)

    def set_config(self, config: ProcessorConfig | Mapping[str, Any]) -> BaseProcessor:
        self._config = self.coerce_config(config)
        return self

    def get_config(self) -> ProcessorConfig:
        if self._config is None:
            raise ProcessorNotConfiguredError(
                f"{self.__class__.__name__} has no configuration"
            )
        return self._config

    @property
    def config(self) -> ProcessorConfig:
        return self.get_config()

    @property
    def is_configured(self) -> bool:
        return self._config is not None

    @abstractmethod
    def render(
        self,
        template: str | None = None,
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        """Render template source with the given variables."""
