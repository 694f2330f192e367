"""Output artifact helpers: the documentation file and run reports."""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime, timezone
from typing import Any, Iterable, Protocol


class SupportsToDict(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


def _atomic_write_text(path: str, text: str) -> None:
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def render_doc_artifact(classes: Iterable[SupportsToDict]) -> str:
    """Serialize class docs to pretty-printed JSON.

    Output contains no timestamps or other run-specific values, so the
    same input always renders to the same text.
    """
    payload = [c.to_dict() for c in classes]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_doc_artifact(classes: Iterable[SupportsToDict], output_path: str) -> str:
    """Write the documentation artifact and return its absolute path."""
    _atomic_write_text(output_path, render_doc_artifact(classes))
    return os.path.abspath(output_path)


def write_run_report(
    report: dict[str, Any],
    run_id: str,
    output_dir: str = "output/run_reports",
) -> str:
    """Write a JSON run report and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    payload = dict(report)
    payload.setdefault("run_id", run_id)
    payload.setdefault("timestamp_utc", datetime.now(timezone.utc).isoformat())
    path = os.path.join(output_dir, f"{run_id}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)
    return path
