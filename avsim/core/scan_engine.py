from __future__ import annotations

from typing import Dict, List, Optional

from avsim.core.models import FileRecord, Partition, ScanHit, ScanResult
from avsim.core.registry import FileRegistry
from avsim.core.signature_store import SignatureStore
from avsim.infra.logging_utils import LOGGER


class ScanEngine:
    """Matches clean file names against the signature store.

    A scan runs in two passes. The classification pass walks a snapshot of
    the clean partition and flags each record on its first matching
    signature. The migration pass then moves only the flagged records to
    suspect, so removals never disturb the walk.
    """

    def __init__(self, store: SignatureStore, registry: FileRegistry) -> None:
        self.store = store
        self.registry = registry
        self.stats = {
            "scans_run": 0,
            "files_checked": 0,
            "matches_found": 0,
        }

    def match(self, name: str, patterns: List[str]) -> Optional[str]:
        for pattern in patterns:
            if pattern in name:
                return pattern
        return None

    def scan(self) -> ScanResult:
        if not len(self.store):
            LOGGER.info("Scan skipped, no signatures loaded")
            return ScanResult(skipped=True)

        patterns = self.store.list()
        candidates = self.registry.records(Partition.CLEAN)
        hits: List[ScanHit] = []
        flagged: List[FileRecord] = []
        for record in candidates:
            pattern = self.match(record.name, patterns)
            if pattern is None:
                continue
            record.is_suspicious = True
            flagged.append(record)
            hits.append(ScanHit(name=record.name, pattern=pattern))

        for record in flagged:
            self.registry.move(record.name, Partition.CLEAN, Partition.SUSPECT)

        self.stats["scans_run"] += 1
        self.stats["files_checked"] += len(candidates)
        self.stats["matches_found"] += len(hits)
        LOGGER.info(
            "Scan complete",
            extra={"extra_data": {"checked": len(candidates), "suspicious": len(hits), "signatures": len(patterns)}},
        )
        return ScanResult(hits=hits)

    def get_stats(self) -> Dict[str, int]:
        return self.stats.copy()
