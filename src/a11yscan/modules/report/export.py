"""Persist rendered summaries as write-once report files."""

import logging
import os
import tempfile
import uuid
from collections.abc import Sequence
from pathlib import Path

from a11yscan.errors import ExportError
from a11yscan.modules.scan.models import Violation

from .models import ExportRecord, ReportFormat
from .renderers import render_summary
from .summary import summarize_violations

logger = logging.getLogger(__name__)


def write_report_file(directory: Path, content: str, extension: str) -> Path:
    """Create ``<directory>/<uuid4>.<extension>`` holding ``content``.

    The content is written to a hidden temporary file first and then hard
    linked under its final name, so the report never appears half written
    and an existing file is never replaced.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(f"Cannot create output directory {directory}: {exc}") from exc

    path = directory / f"{uuid.uuid4()}.{extension}"
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=directory,
            prefix=".",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.link(tmp_name, path)
    except OSError as exc:
        raise ExportError(f"Cannot write report {path}: {exc}") from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
    return path


def export_report(
    violations: Sequence[Violation],
    report_format: ReportFormat,
    directory: Path,
) -> ExportRecord:
    """Summarize, render and persist ``violations`` under ``directory``."""
    summary = summarize_violations(violations)
    content = render_summary(report_format, summary, violations)
    path = write_report_file(directory, content, report_format.extension)
    logger.info("Wrote %s violations report to %s", report_format.value, path)
    return ExportRecord(path=path, format=report_format, summary=summary, content=content)
