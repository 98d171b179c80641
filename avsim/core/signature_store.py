from __future__ import annotations

from typing import Dict, Iterator, List

from avsim.core.errors import DuplicateSignatureError, InvalidArgumentError, SignatureNotFoundError


class SignatureStore:
    """Unique name patterns, listed most-recently-added first."""

    def __init__(self) -> None:
        # dict keeps insertion order; list() walks it backwards
        self._patterns: Dict[str, None] = {}

    def add(self, pattern: str) -> None:
        if not pattern:
            raise InvalidArgumentError("Signature pattern must not be empty.")
        if pattern in self._patterns:
            raise DuplicateSignatureError(pattern)
        self._patterns[pattern] = None

    def remove(self, pattern: str) -> str:
        if pattern not in self._patterns:
            raise SignatureNotFoundError(pattern)
        del self._patterns[pattern]
        return pattern

    def contains(self, pattern: str) -> bool:
        return pattern in self._patterns

    def list(self) -> List[str]:
        return list(reversed(self._patterns))

    def clear(self) -> None:
        self._patterns.clear()

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._patterns)
