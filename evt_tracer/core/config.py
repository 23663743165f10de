"""
Default event sink configuration.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from evt_tracer.exporters.base import BaseExporter

logger = logging.getLogger("evt_tracer.core.config")


@dataclass(frozen=True)
class TracingConfig:
    """What ``setup_tracing`` configured."""

    service_name: str
    exporter: BaseExporter


# =============================================================================
# GLOBAL INSTANCE & SETUP
# =============================================================================

_config: Optional[TracingConfig] = None


def setup_tracing(
    service_name: str,
    exporter: Union[str, BaseExporter, List[Dict]] = "logging",
    # Logging options
    logger_name: str = None,
    level: int = logging.INFO,
    # Console options
    console: bool = False,
    colored: bool = True,
    verbose: bool = False,
    # File options
    file_path: str = None,
    rotate_size_mb: int = 100
) -> TracingConfig:
    """
    Configure the default exporter that root spans emit their events to.

    Args:
        service_name: Name of this service, used to build operation names
        exporter: Exporter type or instance. Options:
            - "logging": standard library logger
            - "console": Console output
            - "file": JSONL file output
            - BaseExporter instance
            - List of exporter configs for multiple exporters

    Returns:
        TracingConfig instance

    Examples:
        # Log through the "myservice.evt" logger
        setup_tracing("myservice", logger_name="myservice.evt")

        # Multiple exporters
        setup_tracing("myservice", exporter=[
            {"type": "logging"},
            {"type": "file", "path": "/var/log/myservice/evt.jsonl"},
        ])
    """
    global _config

    if not isinstance(service_name, str) or not service_name:
        raise ValueError("service_name must be a non-empty string")

    from evt_tracer.exporters.console import ConsoleExporter
    from evt_tracer.exporters.file import FileExporter
    from evt_tracer.exporters.multi import MultiExporter

    exporters = []

    # Handle list of exporters
    if isinstance(exporter, list):
        for exp_config in exporter:
            exp_type = exp_config.get("type", "logging")
            exporters.append(_create_exporter(exp_type, exp_config))

    # Handle string exporter type
    elif isinstance(exporter, str):
        config = {
            "logger_name": logger_name,
            "level": level,
            "colored": colored,
            "verbose": verbose,
            "file_path": file_path,
            "rotate_size_mb": rotate_size_mb,
        }
        exporters.append(_create_exporter(exporter, config))

    # Handle direct exporter instance
    elif isinstance(exporter, BaseExporter):
        exporters.append(exporter)

    else:
        raise ValueError(f"Unsupported exporter: {exporter!r}")

    # Add console if requested
    if console and not any(isinstance(e, ConsoleExporter) for e in exporters):
        exporters.append(ConsoleExporter(colored=colored, verbose=verbose))

    # Add file if requested
    if file_path and not any(isinstance(e, FileExporter) for e in exporters):
        exporters.append(FileExporter(file_path, rotate_size_mb=rotate_size_mb))

    if not exporters:
        raise ValueError("At least one exporter is required")

    # Create final exporter
    final_exporter = MultiExporter(exporters) if len(exporters) > 1 else exporters[0]
    final_exporter.start()

    if _config is not None:
        _config.exporter.stop()

    _config = TracingConfig(service_name=service_name, exporter=final_exporter)
    logger.debug(f"Tracing configured for {service_name} with {type(final_exporter).__name__}")

    return _config


def _create_exporter(exporter_type: str, config: dict) -> BaseExporter:
    """Create an exporter instance from type and config."""
    # Import exporters here to avoid circular imports
    from evt_tracer.exporters.console import ConsoleExporter
    from evt_tracer.exporters.file import FileExporter
    from evt_tracer.exporters.logger import LoggingExporter

    exporter_type = exporter_type.lower()

    if exporter_type in ("logging", "logger", "log"):
        return LoggingExporter(
            logger=config.get("logger_name") or config.get("logger"),
            level=config.get("level", logging.INFO)
        )

    elif exporter_type == "file":
        path = config.get("file_path") or config.get("path", "evt_traces.jsonl")
        return FileExporter(
            file_path=path,
            rotate_size_mb=config.get("rotate_size_mb", 100)
        )

    elif exporter_type == "console":
        return ConsoleExporter(
            colored=config.get("colored", True),
            verbose=config.get("verbose", False)
        )

    else:
        raise ValueError(f"Unknown exporter type: {exporter_type}")


def get_config() -> TracingConfig:
    """Get the tracing configuration."""
    if _config is None:
        raise RuntimeError("Call setup_tracing() first")
    return _config


def get_exporter() -> BaseExporter:
    """Get the default exporter."""
    return get_config().exporter


def get_service_name() -> str:
    """Get the configured service name."""
    return get_config().service_name


def reset_tracing() -> None:
    """Stop and forget the default exporter."""
    global _config

    if _config is not None:
        _config.exporter.stop()
    _config = None
