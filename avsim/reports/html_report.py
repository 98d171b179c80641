from __future__ import annotations

import json
from html import escape
from pathlib import Path
from typing import Any, Dict

from avsim import __app_name__, __version__
from avsim.core.models import PartitionSummary, ReportSnapshot
from avsim.infra.logging_utils import LOGGER


def _chart_data(snapshot: ReportSnapshot) -> Dict[str, Any]:
    return {
        "labels": [s.partition.value for s in snapshot.partitions],
        "counts": [s.count for s in snapshot.partitions],
        "bytes": [s.total_bytes for s in snapshot.partitions],
    }


def _partition_section(summary: PartitionSummary) -> str:
    rows = "".join(
        f"<tr><td>{i}</td><td>{escape(f.name)}</td><td>{f.size}</td><td>{'yes' if f.is_suspicious else ''}</td></tr>"
        for i, f in enumerate(summary.files, start=1)
    )
    return f"""
    <div class='section'>
    <h2>{summary.partition.heading}: {summary.count} (Total: {summary.total_bytes} bytes)</h2>
    <table>
    <tr><th>#</th><th>Name</th><th>Size</th><th>Suspicious</th></tr>
    {rows or "<tr><td colspan='4'>(empty)</td></tr>"}
    </table>
    </div>
    """


def generate_html_report(snapshot: ReportSnapshot, output_path: Path) -> Path:
    chart = _chart_data(snapshot)
    signatures = "".join(f"<li>{escape(p)}</li>" for p in snapshot.signatures)

    html = f"""
    <html>
    <head>
    <meta charset='utf-8'>
    <title>{__app_name__} Report</title>
    <style>
    body {{ font-family: Arial, sans-serif; margin: 20px; }}
    table {{ border-collapse: collapse; width: 100%; margin-bottom: 20px; }}
    th, td {{ border: 1px solid #ccc; padding: 8px; text-align: left; }}
    th {{ background: #f5f5f5; }}
    .section {{ margin-bottom: 24px; }}
    .bar {{ background: #3366cc; height: 14px; margin: 4px 0; }}
    </style>
    </head>
    <body>
    <h1>{__app_name__} - Scan Report</h1>
    <p>Version: {__version__} | Generated: {snapshot.generated_at.isoformat()}</p>

    <div class='section'>
    <h2>Overview</h2>
    <div id='chart'></div>
    <script>
    const data = {json.dumps(chart)};
    const chart = document.getElementById('chart');
    const most = Math.max(1, ...data.counts);
    data.labels.forEach((label, idx) => {{
        const row = document.createElement('div');
        row.textContent = label + ': ' + data.counts[idx] + ' file(s), ' + data.bytes[idx] + ' bytes';
        const bar = document.createElement('div');
        bar.className = 'bar';
        bar.style.width = (data.counts[idx] / most * 100) + '%';
        chart.appendChild(row);
        chart.appendChild(bar);
    }});
    </script>
    </div>
    {''.join(_partition_section(s) for s in snapshot.partitions)}
    <div class='section'>
    <h2>Scan Statistics</h2>
    <p>{' | '.join(f"{escape(k)}: {v}" for k, v in snapshot.scan_stats.items()) or "(no scans)"}</p>
    </div>

    <div class='section'>
    <h2>Signature Database</h2>
    <ol>{signatures or "<li>(empty)</li>"}</ol>
    </div>

    </body></html>
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    LOGGER.info("HTML report generated", extra={"extra_data": {"output": str(output_path)}})
    return output_path
