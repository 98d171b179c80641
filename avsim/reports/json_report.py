from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from avsim import __version__
from avsim.core.models import ReportSnapshot
from avsim.infra.logging_utils import LOGGER


def snapshot_payload(snapshot: ReportSnapshot) -> Dict[str, Any]:
    return {
        "version": __version__,
        "generated_at": snapshot.generated_at.isoformat(),
        "partitions": {
            summary.partition.value: {
                "count": summary.count,
                "total_bytes": summary.total_bytes,
                "files": [
                    {
                        "name": item.name,
                        "size": item.size,
                        "is_suspicious": item.is_suspicious,
                    }
                    for item in summary.files
                ],
            }
            for summary in snapshot.partitions
        },
        "signatures": list(snapshot.signatures),
        "scan_stats": dict(snapshot.scan_stats),
    }


def generate_json_report(snapshot: ReportSnapshot, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(snapshot_payload(snapshot), indent=2), encoding="utf-8")
    LOGGER.info("JSON report generated", extra={"extra_data": {"output": str(output_path)}})
    return output_path
