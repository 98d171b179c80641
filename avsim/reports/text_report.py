from __future__ import annotations

from typing import List, Tuple

from avsim.core.models import FileView, ReportSnapshot

COMMANDS = [
    ("ADD_SIG <pattern>", "Add signature pattern"),
    ("DEL_SIG <pattern>", "Delete signature pattern"),
    ("LOAD <name> <size>", "Load a file (mock)"),
    ("SCAN", "Scan files for signatures"),
    ("QUAR <name>", "Quarantine a suspect file"),
    ("RESTORE <name>", "Restore from quarantine"),
    ("REPORT", "Display status report"),
    ("EXPORT <html|json> <path>", "Write report to a file"),
    ("PURGE", "Delete all data"),
    ("HELP", "Show this help"),
    ("EXIT", "Exit program"),
]


def _file_lines(files: Tuple[FileView, ...]) -> List[str]:
    lines = ["", "  Contents:"]
    if not files:
        lines.append("  (empty)")
        return lines
    for index, item in enumerate(files, start=1):
        flag = " [SUSPICIOUS]" if item.is_suspicious else ""
        lines.append(f"  {index}. {item.name} ({item.size} bytes){flag}")
    return lines


def render_text_report(snapshot: ReportSnapshot) -> str:
    lines = ["", "========== ANTIVIRUS REPORT =========="]
    for summary in snapshot.partitions:
        lines.append("")
        lines.append(f"{summary.partition.heading}: {summary.count} (Total: {summary.total_bytes} bytes)")
        lines.extend(_file_lines(summary.files))
    stats = snapshot.scan_stats
    lines.append("")
    lines.append(
        f"Scans Run: {stats.get('scans_run', 0)} "
        f"(Files Checked: {stats.get('files_checked', 0)}, Matches: {stats.get('matches_found', 0)})"
    )
    lines.extend(["", "Signature Database:"])
    if not snapshot.signatures:
        lines.append("  (empty)")
    for index, pattern in enumerate(snapshot.signatures, start=1):
        lines.append(f'  {index}. "{pattern}"')
    lines.extend(["", "======================================"])
    return "\n".join(lines)


def render_help() -> str:
    width = max(len(usage) for usage, _ in COMMANDS) + 2
    lines = ["", "=== TOY ANTIVIRUS COMMANDS ==="]
    lines.extend(f"  {usage.ljust(width)} - {text}" for usage, text in COMMANDS)
    lines.extend(["==============================", ""])
    return "\n".join(lines)
