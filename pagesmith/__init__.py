"""pagesmith - front-matter aware Jinja2 page processor"""

__version__ = "0.1.0"

from pagesmith.config import ProcessorConfig
from pagesmith.processors import (
    JinjaProcessor,
    create_processor,
    parse_front_matter,
    split_front_matter,
    strip_front_matter,
)

__all__ = [
    "JinjaProcessor",
    "ProcessorConfig",
    "__version__",
    "create_processor",
    "parse_front_matter",
    "split_front_matter",
    "strip_front_matter",
]
