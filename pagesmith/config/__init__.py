"""Configuration module for pagesmith"""

from pagesmith.config.settings import (
    Settings,
    clear_settings_cache,
    get_settings,
    override_settings,
)
from pagesmith.config.processor import (
    PREPARED_SUFFIX,
    ProcessorConfig,
    Staging,
)

__all__ = [
    "PREPARED_SUFFIX",
    "ProcessorConfig",
    "Settings",
    "Staging",
    "clear_settings_cache",
    "get_settings",
    "override_settings",
]
