"""Core shared configuration, logging and artifact utilities."""

from core.structured_logging import (
    configure_structured_logging,
    get_run_id,
    phase_scope,
    set_run_id,
    unit_scope,
)
from core.run_artifacts import (
    render_doc_artifact,
    write_doc_artifact,
    write_run_report,
)
from core.docgen_config import (
    ConfigValidationError,
    DocgenConfig,
    load_docgen_config,
    resolve_strict_config,
)

__all__ = [
    "configure_structured_logging",
    "get_run_id",
    "phase_scope",
    "set_run_id",
    "unit_scope",
    "render_doc_artifact",
    "write_doc_artifact",
    "write_run_report",
    "ConfigValidationError",
    "DocgenConfig",
    "load_docgen_config",
    "resolve_strict_config",
]
