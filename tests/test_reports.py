import json
from pathlib import Path

from avsim.core.session_service import ScanSession
from avsim.reports.html_report import generate_html_report
from avsim.reports.json_report import generate_json_report, snapshot_payload
from avsim.reports.text_report import render_text_report


def _session() -> ScanSession:
    session = ScanSession(signatures=["virus"])
    session.load_file("virus1.exe", 10)
    session.load_file("virus2.exe", 20)
    session.load_file("<notes>.txt", 3)
    session.scan()
    session.quarantine("virus1.exe")
    return session


def test_text_report_layout() -> None:
    text = render_text_report(ScanSession().report())
    assert "========== ANTIVIRUS REPORT ==========" in text
    assert text.count("  (empty)") == 4


def test_json_payload() -> None:
    payload = snapshot_payload(_session().report())
    assert payload["partitions"]["quarantine"] == {
        "count": 1,
        "total_bytes": 10,
        "files": [{"name": "virus1.exe", "size": 10, "is_suspicious": True}],
    }
    assert payload["partitions"]["clean"]["count"] == 1
    assert payload["signatures"] == ["virus"]


def test_json_report_written(tmp_path: Path) -> None:
    output = generate_json_report(_session().report(), tmp_path / "nested" / "report.json")
    assert json.loads(output.read_text(encoding="utf-8"))["partitions"]["suspect"]["count"] == 1


def test_html_report_escapes_names(tmp_path: Path) -> None:
    output = generate_html_report(_session().report(), tmp_path / "report.html")
    html = output.read_text(encoding="utf-8")
    assert "&lt;notes&gt;.txt" in html
    assert "Quarantined Files: 1 (Total: 10 bytes)" in html
    assert "<li>virus</li>" in html


def test_reports_include_scan_stats(tmp_path: Path) -> None:
    snapshot = _session().report()
    assert snapshot.scan_stats == {"scans_run": 1, "files_checked": 3, "matches_found": 2}
    assert "Scans Run: 1 (Files Checked: 3, Matches: 2)" in render_text_report(snapshot)
    assert snapshot_payload(snapshot)["scan_stats"]["matches_found"] == 2
    html = generate_html_report(snapshot, tmp_path / "report.html").read_text(encoding="utf-8")
    assert "scans_run: 1" in html


def test_text_report_before_any_scan() -> None:
    assert "Scans Run: 0 (Files Checked: 0, Matches: 0)" in render_text_report(ScanSession().report())
