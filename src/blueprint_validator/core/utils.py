"""Utility functions."""

import logging.config
import structlog
import yaml
from pathlib import Path
from typing import Any, List, Optional, Union


def _select_renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def build_processors(log_format: str = "text") -> List[Any]:
    """Processor chain for validation logs, ending in the renderer for ``log_format``."""
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _select_renderer(log_format),
    ]


def setup_logging(config_path: Optional[Union[str, Path]] = None, log_level: str = "INFO",
                  log_format: str = "text") -> None:
    """Configure stdlib logging and structlog for a validation run.

    A YAML dictConfig file, when present, replaces the basic stderr handler.
    ``log_format`` picks JSON or console rendering of structlog events.
    """
    if config_path and Path(config_path).exists():
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(
            level=getattr(logging, log_level.upper()),
            format='%(message)s' if log_format == "json" else '%(levelname)s %(name)s: %(message)s'
        )

    structlog.configure(
        processors=build_processors(log_format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def resource_to_yaml(resource) -> str:
    """Serialize a resource for embedding in diagnostics."""
    return yaml.safe_dump(resource.model_dump(), sort_keys=False, default_flow_style=False)
