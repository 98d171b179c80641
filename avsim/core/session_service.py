from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from avsim.core.models import FileRecord, FileView, Partition, PartitionSummary, ReportSnapshot, ScanResult
from avsim.core.registry import FileRegistry
from avsim.core.scan_engine import ScanEngine
from avsim.core.signature_store import SignatureStore
from avsim.infra.logging_utils import LOGGER


class ScanSession:
    """The operations a console session can invoke.

    Each call either completes or raises an ``AVSimError`` before touching
    any state.
    """

    def __init__(self, signatures: Optional[Iterable[str]] = None) -> None:
        self.store = SignatureStore()
        self.registry = FileRegistry()
        self.engine = ScanEngine(self.store, self.registry)
        for pattern in signatures or ():
            self.store.add(pattern)

    def add_signature(self, pattern: str) -> None:
        self.store.add(pattern)
        LOGGER.info("Added signature", extra={"extra_data": {"pattern": pattern}})

    def delete_signature(self, pattern: str) -> str:
        removed = self.store.remove(pattern)
        LOGGER.info("Removed signature", extra={"extra_data": {"pattern": pattern}})
        return removed

    def load_file(self, name: str, size: int) -> FileRecord:
        record = self.registry.load(name, size)
        LOGGER.info("Loaded file", extra={"extra_data": {"file": name, "size": size}})
        return record

    def scan(self) -> ScanResult:
        return self.engine.scan()

    def quarantine(self, name: str) -> FileRecord:
        record = self.registry.move(name, Partition.SUSPECT, Partition.QUARANTINE)
        LOGGER.info("Quarantined file", extra={"extra_data": {"file": name}})
        return record

    def restore(self, name: str) -> FileRecord:
        record = self.registry.move(name, Partition.QUARANTINE, Partition.CLEAN)
        record.is_suspicious = False
        LOGGER.info("Restored file", extra={"extra_data": {"file": name}})
        return record

    def report(self) -> ReportSnapshot:
        partitions = tuple(
            PartitionSummary(
                partition=partition,
                count=self.registry.count(partition),
                total_bytes=self.registry.total_bytes(partition),
                files=tuple(FileView.of(r) for r in self.registry.records(partition)),
            )
            for partition in Partition
        )
        return ReportSnapshot(
            partitions=partitions,
            signatures=tuple(self.store.list()),
            generated_at=datetime.now(timezone.utc),
            scan_stats=self.engine.get_stats(),
        )

    def purge(self) -> None:
        self.registry.clear_all()
        self.store.clear()
        LOGGER.info("Purged all data")
