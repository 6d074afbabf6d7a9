"""
Reputation Scoring - Repository.

============================================================
PURPOSE
============================================================
Repository pattern for keeping verified reputations.

Provides clean interface for:
- Saving a verified reputation record
- Looking up a record by attestation identifier
- Looking up the latest record for a wallet address

============================================================
STORAGE
============================================================
InMemoryReputationRepository keeps records for the lifetime
of the process only. A durable store implements the same
ReputationRepository interface.

============================================================
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .types import ReputationRecord

logger = logging.getLogger(__name__)


class ReputationRepository(ABC):
    """
    Storage interface for verified reputation records.

    ============================================================
    METHODS
    ============================================================
    - save: Insert or replace a record by identifier
    - get: Record for an attestation identifier
    - find_by_address: Latest record for a wallet address
    - delete: Remove a record
    - list_records: All records, newest first

    ============================================================
    """

    @abstractmethod
    def save(self, record: ReputationRecord) -> ReputationRecord:
        raise NotImplementedError

    @abstractmethod
    def get(self, identifier: str) -> Optional[ReputationRecord]:
        raise NotImplementedError

    @abstractmethod
    def find_by_address(self, address: str) -> Optional[ReputationRecord]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, identifier: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_records(self) -> List[ReputationRecord]:
        raise NotImplementedError

    def count(self) -> int:
        return len(self.list_records())


class InMemoryReputationRepository(ReputationRepository):
    """In-process reputation store guarded by a re-entrant lock."""

    def __init__(self) -> None:
        self._records: Dict[str, ReputationRecord] = {}
        self._lock = threading.RLock()

    def save(self, record: ReputationRecord) -> ReputationRecord:
        with self._lock:
            replaced = record.identifier in self._records
            self._records[record.identifier] = record

        logger.info(
            f"{'Replaced' if replaced else 'Stored'} reputation: "
            f"identifier={record.identifier} score={record.score.value}"
        )
        return record

    def get(self, identifier: str) -> Optional[ReputationRecord]:
        with self._lock:
            return self._records.get(identifier)

    def find_by_address(self, address: str) -> Optional[ReputationRecord]:
        """
        Latest record for a wallet address.

        Addresses are compared case-insensitively, so checksummed and
        lower-case forms match.
        """
        if not address:
            return None

        needle = address.lower()
        with self._lock:
            matches = [
                record for record in self._records.values()
                if record.user_address and record.user_address.lower() == needle
            ]

        if not matches:
            return None
        return max(matches, key=lambda record: record.verified_at)

    def delete(self, identifier: str) -> bool:
        with self._lock:
            if identifier in self._records:
                del self._records[identifier]
                return True
            return False

    def list_records(self) -> List[ReputationRecord]:
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda record: record.verified_at, reverse=True)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
