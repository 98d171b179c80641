from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from avsim.core.errors import DuplicateFileError, FileNotFoundInPartitionError, InvalidArgumentError
from avsim.core.models import FileRecord, Partition


class FileRegistry:
    """Clean, suspect and quarantine partitions keyed by file name.

    A name lives in at most one partition. Each partition is an insertion
    ordered dict, so ``records()`` can list the latest arrival first.
    """

    def __init__(self) -> None:
        self._partitions: Dict[Partition, Dict[str, FileRecord]] = {p: {} for p in Partition}

    def load(self, name: str, size: int) -> FileRecord:
        if not name:
            raise InvalidArgumentError("File name must not be empty.")
        if size < 0:
            raise InvalidArgumentError(f"File size must be non-negative, got {size}.")
        owner = self._owner_of(name)
        if owner is not None:
            raise DuplicateFileError(name, owner)
        record = FileRecord(name=name, size=size)
        self._partitions[Partition.CLEAN][name] = record
        return record

    def find(self, name: str, partition: Optional[Partition] = None) -> Tuple[Partition, FileRecord]:
        searched = [partition] if partition is not None else list(Partition)
        for candidate in searched:
            record = self._partitions[candidate].get(name)
            if record is not None:
                return candidate, record
        raise FileNotFoundInPartitionError(name, partition)

    def move(self, name: str, source: Partition, destination: Partition) -> FileRecord:
        records = self._partitions[source]
        if name not in records:
            raise FileNotFoundInPartitionError(name, source)
        # pop and insert cannot fail in between, so the record is never dropped
        record = records.pop(name)
        self._partitions[destination][name] = record
        return record

    def count(self, partition: Partition) -> int:
        return len(self._partitions[partition])

    def total_bytes(self, partition: Partition) -> int:
        return sum(record.size for record in self._partitions[partition].values())

    def records(self, partition: Partition) -> List[FileRecord]:
        return list(reversed(self._partitions[partition].values()))

    def clear_all(self) -> None:
        for records in self._partitions.values():
            records.clear()

    def __len__(self) -> int:
        return sum(len(records) for records in self._partitions.values())

    def _owner_of(self, name: str) -> Optional[Partition]:
        for partition, records in self._partitions.items():
            if name in records:
                return partition
        return None
