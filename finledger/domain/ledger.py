"""In-memory store of records for a session."""

from collections.abc import Iterable, Iterator

from finledger.domain.records import Record


class Ledger:
    """Append-only, insertion-ordered sequence of records.

    Duplicates are allowed and kept as distinct entries.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: list[Record] = list(records)

    def append(self, record: Record) -> None:
        self._records.append(record)

    def extend(self, records: Iterable[Record]) -> None:
        self._records.extend(records)

    @property
    def records(self) -> tuple[Record, ...]:
        """Snapshot of all records in entry order."""
        return tuple(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"Ledger({len(self._records)} records)"
