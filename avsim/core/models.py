from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Tuple


class Partition(str, Enum):
    CLEAN = "clean"
    SUSPECT = "suspect"
    QUARANTINE = "quarantine"

    @property
    def label(self) -> str:
        return {
            Partition.CLEAN: "clean list",
            Partition.SUSPECT: "suspect list",
            Partition.QUARANTINE: "quarantine",
        }[self]

    @property
    def heading(self) -> str:
        return {
            Partition.CLEAN: "Clean Files",
            Partition.SUSPECT: "Suspect Files",
            Partition.QUARANTINE: "Quarantined Files",
        }[self]


@dataclass
class FileRecord:
    name: str
    size: int
    is_suspicious: bool = False


@dataclass(frozen=True)
class FileView:
    """Read-only copy of a FileRecord as it looked when a report was taken."""

    name: str
    size: int
    is_suspicious: bool

    @classmethod
    def of(cls, record: FileRecord) -> "FileView":
        return cls(name=record.name, size=record.size, is_suspicious=record.is_suspicious)


@dataclass(frozen=True)
class ScanHit:
    name: str
    pattern: str


@dataclass
class ScanResult:
    hits: List[ScanHit] = field(default_factory=list)
    skipped: bool = False

    @property
    def suspicious_count(self) -> int:
        return len(self.hits)


@dataclass(frozen=True)
class PartitionSummary:
    partition: Partition
    count: int
    total_bytes: int
    files: Tuple[FileView, ...]


@dataclass(frozen=True)
class ReportSnapshot:
    partitions: Tuple[PartitionSummary, ...]
    signatures: Tuple[str, ...]
    generated_at: datetime
    scan_stats: Dict[str, int] = field(default_factory=dict)
