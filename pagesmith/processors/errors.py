"""Exceptions raised by pagesmith processors.

Engine errors (``jinja2.TemplateError`` and friends) and file I/O errors are
never wrapped; only problems the processor layer itself detects live here.
"""


class ProcessorError(Exception):
    """Base class for processor-level failures"""


class ProcessorNotConfiguredError(ProcessorError):
    """A processor was used before it received a configuration"""


class UnknownProcessorError(ProcessorError, LookupError):
    """No processor is registered under the requested name"""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown processor: '{name}'. Available: {', '.join(available)}"
        )


class FrontMatterError(ProcessorError, ValueError):
    """Front matter exists but is not a YAML mapping"""
