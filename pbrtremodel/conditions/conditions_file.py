"""Reading and writing tab-separated conditions files.

A conditions file has a header line of parameter names followed by one line
per render instance. Columns are separated by tabs; lines starting with `#`
or `%` are comments. Numeric vectors are written as space separated numbers,
optionally wrapped in brackets, e.g. `[4 4]`.
"""

import csv
import logging
import re

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

from pbrtremodel.conditions.condition_row import ConditionRow
from pbrtremodel.errors import ConditionFileError

console_logger = logging.getLogger(__name__)

_COMMENT_PREFIXES = ("#", "%")
_NUMBER_RE = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")

# Identifier columns keep their text, so "007" does not become 7.
TEXT_COLUMNS = ("imageName", "type", "lens", "mode")


def parse_cell(text: str, as_text: bool = False) -> Any:
    """Convert a conditions-file cell into a typed value.

    Args:
        text: Raw cell text.
        as_text: Keep non-empty cells as stripped text without number parsing.

    Returns:
        int or float for a single number, a tuple of numbers for a vector,
        None for an empty cell, and the stripped text otherwise.
    """
    text = text.strip()
    if not text:
        return None
    if as_text:
        return text

    inner = text[1:-1] if text.startswith("[") and text.endswith("]") else text
    tokens = inner.replace(",", " ").split()
    if tokens and all(_NUMBER_RE.match(token) for token in tokens):
        values = tuple(_parse_number(token) for token in tokens)
        if len(values) == 1 and inner is text:
            return values[0]
        return values
    return text


def _parse_number(token: str) -> int | float:
    if re.fullmatch(r"[-+]?\d+", token):
        return int(token)
    return float(token)


def format_cell(value: Any) -> str:
    """Inverse of `parse_cell`."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_cell(v) for v in value) + "]"
    return str(value)


@dataclass
class ConditionTable:
    """Ordered condition rows that share one header."""

    names: list[str]
    """Column names in file order."""

    rows: list[ConditionRow] = field(default_factory=list)

    def __iter__(self) -> Iterator[ConditionRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> ConditionRow:
        return self.rows[index]

    @classmethod
    def from_records(
        cls, records: list[dict[str, Any]], names: list[str] | None = None
    ) -> "ConditionTable":
        """Build a table from dictionaries, one per render instance.

        Args:
            records: Row values keyed by parameter name.
            names: Column order. Defaults to first-seen order over all records.
        """
        if names is None:
            names = []
            for record in records:
                names.extend(name for name in record if name not in names)
        rows = [
            ConditionRow({name: record.get(name) for name in names}, index=i)
            for i, record in enumerate(records)
        ]
        return cls(names=list(names), rows=rows)

    @classmethod
    def from_file(cls, path: Path | str) -> "ConditionTable":
        """Read a conditions file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConditionFileError: If the header is missing or a row has more
                cells than the header.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Conditions file does not exist: {path}")

        with open(path, newline="") as f:
            lines = [
                line
                for line in f
                if line.strip() and not line.lstrip().startswith(_COMMENT_PREFIXES)
            ]
        if not lines:
            raise ConditionFileError(f"Conditions file {path} has no header line")

        reader = csv.reader(lines, delimiter="\t")
        names = [name.strip() for name in next(reader)]
        if len(set(names)) != len(names) or not all(names):
            raise ConditionFileError(
                f"Conditions file {path} has empty or duplicate column names: {names}"
            )

        rows = []
        for line_number, cells in enumerate(reader, start=2):
            if len(cells) > len(names):
                raise ConditionFileError(
                    f"{path}: row {line_number} has {len(cells)} cells but the "
                    f"header has {len(names)} names"
                )
            # Trailing empty cells may be dropped by editors.
            cells = cells + [""] * (len(names) - len(cells))
            values = {
                name: parse_cell(cell, as_text=name in TEXT_COLUMNS)
                for name, cell in zip(names, cells)
            }
            rows.append(ConditionRow(values, index=len(rows)))

        console_logger.info(f"Read {len(rows)} conditions from {path}")
        return cls(names=names, rows=rows)

    def write(self, path: Path | str) -> Path:
        """Write the table in the conditions-file format."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="") as f:
            writer = csv.writer(f, delimiter="\t", lineterminator="\n")
            writer.writerow(self.names)
            for row in self.rows:
                writer.writerow([format_cell(row.get(name)) for name in self.names])
        return path
