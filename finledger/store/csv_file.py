"""Flat-file persistence for the ledger.

The file is plain comma-separated text with no quoting: a fixed header line,
then one line per record. Categories or descriptions containing a comma do
not survive a round trip.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from finledger.domain.models import CategoryName, Description
from finledger.domain.records import (
    ParseError,
    Record,
    TransactionKind,
    format_amount,
    format_date,
    parse_amount,
    parse_date,
)

HEADER = "Date,Type,Amount,Category,Description"
FIELD_COUNT = 5
DEFAULT_DATA_FILE = "finance_data.csv"


@dataclass(frozen=True)
class LineError:
    """A well-shaped line whose fields could not be parsed."""

    line_number: int
    message: str


@dataclass
class LoadReport:
    """Outcome of reading the data file."""

    found: bool
    records: list[Record] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    errors: list[LineError] = field(default_factory=list)


def format_line(record: Record) -> str:
    """Serialize a record as one data line (without terminator)."""
    return ",".join(
        [
            format_date(record.date),
            record.kind.tag,
            format_amount(record.amount),
            record.category,
            record.description,
        ]
    )


def split_line(line: str) -> list[str] | None:
    """Split a data line into its fields.

    Args:
        line: Raw line, with or without its terminator.

    Returns:
        The five fields, or None if the line does not have exactly five.
    """
    parts = line.rstrip("\r\n").split(",")
    if len(parts) != FIELD_COUNT:
        return None
    return parts


def parse_fields(parts: list[str]) -> Record:
    """Build a record from five split fields.

    Raises:
        ParseError: If the date, type or amount field is invalid.
    """
    raw_date, raw_kind, raw_amount, category, description = parts
    return Record(
        date=parse_date(raw_date),
        kind=TransactionKind.parse(raw_kind),
        amount=parse_amount(raw_amount),
        category=CategoryName(category),
        description=Description(description),
    )


def parse_line(line: str) -> Record | None:
    """Parse one data line.

    Args:
        line: Raw data line.

    Returns:
        Parsed record, or None if the line has the wrong number of fields.

    Raises:
        ParseError: If the line is well-shaped but a field is invalid.
    """
    parts = split_line(line)
    if parts is None:
        return None
    return parse_fields(parts)


def load_ledger(path: Path) -> LoadReport:
    """Read all records from the data file.

    The first line is always treated as the header. Lines with the wrong
    field count are skipped; lines with an unparseable date, type or amount
    are skipped and reported. Loading continues past both.

    Args:
        path: Data file path.

    Returns:
        LoadReport with the records read and any skipped or failed lines.
        A missing file gives an empty report with found=False.

    Raises:
        OSError: If the file exists but cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if not path.exists():
        return LoadReport(found=False)

    report = LoadReport(found=True)

    with open(path, encoding="utf-8", newline="") as f:
        # Skip header
        f.readline()

        for line_number, line in enumerate(f, start=2):
            try:
                record = parse_line(line)
            except ParseError as e:
                report.errors.append(LineError(line_number=line_number, message=str(e)))
                continue

            if record is None:
                report.skipped.append(line_number)
                continue

            report.records.append(record)

    return report


def save_ledger(path: Path, records: Iterable[Record]) -> int:
    """Overwrite the data file with the header and every record.

    Args:
        path: Data file path.
        records: Records to write, in order.

    Returns:
        Number of records written.

    Raises:
        OSError: If the file cannot be written.
        UnicodeEncodeError: If a record holds text that UTF-8 cannot encode.
            The file is left untouched in that case.
    """
    # Render everything first so a bad record cannot leave a truncated file
    lines = [format_line(record) for record in records]
    content = "".join(line + "\n" for line in [HEADER, *lines])
    data = content.encode("utf-8")

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)

    return len(lines)
