"""Tests for report file export."""

import json
from pathlib import Path

import pytest

from a11yscan.errors import ExportError
from a11yscan.modules.report import (
    ReportFormat,
    export_report,
    parse_violations,
    write_report_file,
)


def test_export_creates_directory_and_json_file(temp_dir: Path, sample_violations) -> None:
    directory = temp_dir / "out" / "accessibility-test-results"
    record = export_report(parse_violations(sample_violations), ReportFormat.DEFAULT, directory)

    assert record.path.parent == directory
    assert record.path.suffix == ".json"
    data = json.loads(record.path.read_text(encoding="utf-8"))
    assert data == record.summary.to_dict()
    assert data["byImpact"] == {"critical": 1, "serious": 2}


@pytest.mark.parametrize(
    ("report_format", "suffix"),
    [
        (ReportFormat.SIMPLE, ".txt"),
        (ReportFormat.MARKDOWN, ".md"),
        (ReportFormat.HTML, ".html"),
        (ReportFormat.CSV, ".csv"),
        (ReportFormat.DETAILED, ".json"),
    ],
)
def test_export_extension_follows_format(
    temp_dir: Path, sample_violations, report_format, suffix
) -> None:
    record = export_report(parse_violations(sample_violations), report_format, temp_dir)
    assert record.path.suffix == suffix
    assert record.path.read_text(encoding="utf-8") == record.content


def test_csv_export_uses_plain_newlines(temp_dir: Path, sample_violations) -> None:
    record = export_report(parse_violations(sample_violations), ReportFormat.CSV, temp_dir)
    raw = record.path.read_bytes()
    assert b"\r" not in raw
    assert raw == record.content.encode("utf-8")
    assert len(record.content.splitlines()) == len(record.summary.entries) + 1


def test_written_content_is_byte_exact(temp_dir: Path) -> None:
    path = write_report_file(temp_dir, "a,b\r\nc,d\n", "csv")
    assert path.read_bytes() == b"a,b\r\nc,d\n"


def test_export_names_are_unique(temp_dir: Path, sample_violations) -> None:
    violations = parse_violations(sample_violations)
    paths = {export_report(violations, ReportFormat.DEFAULT, temp_dir).path for _ in range(5)}
    assert len(paths) == 5


def test_export_leaves_no_temporary_files(temp_dir: Path) -> None:
    write_report_file(temp_dir, "{}", "json")
    assert [path.name for path in temp_dir.iterdir() if path.name.startswith(".")] == []
    assert len(list(temp_dir.iterdir())) == 1


def test_export_fails_when_directory_is_a_file(temp_dir: Path) -> None:
    blocker = temp_dir / "results"
    blocker.write_text("not a directory")
    with pytest.raises(ExportError):
        write_report_file(blocker, "{}", "json")
