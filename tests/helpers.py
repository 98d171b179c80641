from typing import List

from avsim.core.models import Partition, PartitionSummary, ReportSnapshot
from avsim.core.registry import FileRegistry


def names(registry: FileRegistry, partition: Partition) -> List[str]:
    return [record.name for record in registry.records(partition)]


def summary_of(snapshot: ReportSnapshot, partition: Partition) -> PartitionSummary:
    return next(item for item in snapshot.partitions if item.partition is partition)
