from __future__ import annotations

from typing import Optional

from avsim.core.models import Partition


class AVSimError(Exception):
    """Base class for recoverable domain errors; state is unchanged when raised."""


class InvalidArgumentError(AVSimError, ValueError):
    pass


class ConfigError(AVSimError):
    pass


class DuplicateSignatureError(AVSimError):
    def __init__(self, pattern: str) -> None:
        super().__init__(f"Signature '{pattern}' already exists.")
        self.pattern = pattern


class DuplicateFileError(AVSimError):
    def __init__(self, name: str, partition: Partition) -> None:
        super().__init__(f"File '{name}' already exists.")
        self.name = name
        self.partition = partition


class NotFoundError(AVSimError, KeyError):
    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class SignatureNotFoundError(NotFoundError):
    def __init__(self, pattern: str) -> None:
        super().__init__(f"Signature '{pattern}' not found.")
        self.pattern = pattern


class FileNotFoundInPartitionError(NotFoundError):
    def __init__(self, name: str, partition: Optional[Partition] = None) -> None:
        where = partition.label if partition else "any partition"
        super().__init__(f"File '{name}' not found in {where}.")
        self.name = name
        self.partition = partition
