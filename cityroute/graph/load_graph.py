"""Graph loading from ``from,to,weight`` text records.

Two ingestion styles are provided:

- ``parse_edge_line`` is strict: any line that is not exactly three
  fields with an integer weight raises ``MalformedRecordError``.
- ``iter_edge_records`` walks a whole file. Blank rows and rows with
  the wrong field count are always skipped. A non-integer weight aborts
  the load in strict mode and skips the row (with a warning) otherwise.

Both drop empty trailing fields before counting, so ``A,B,5,`` is a
valid record and ``A,B,`` has only two fields.

A record is fully parsed before it reaches the graph, so a rejected
line never leaves a half-inserted edge behind.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from ..domain.errors import MalformedRecordError
from ..domain.models import EdgeRecord
from .store import Graph

logger = logging.getLogger(__name__)

FIELD_COUNT = 3


def parse_edge_line(line: str) -> EdgeRecord:
    """Parse a single line of the form ``from,to,weight``.

    Raises:
        MalformedRecordError: If the line does not hold three fields or
            the weight is not an integer.
    """
    parts = _drop_trailing_empty(line.strip().split(","))
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(
            "Invalid input format. Expected format: from,to,distance",
            line=line,
        )
    return _to_record(parts, line)


def _drop_trailing_empty(fields: List[str]) -> List[str]:
    """Drop empty trailing fields, so ``A,B,5,`` has three fields and ``A,B,`` two."""
    end = len(fields)
    while end and fields[end - 1] == "":
        end -= 1
    return fields[:end]


def _to_record(
    parts: List[str], line: str, line_number: Optional[int] = None
) -> EdgeRecord:
    source, target, weight_str = (part.strip() for part in parts)
    try:
        weight = int(weight_str)
    except ValueError as e:
        raise MalformedRecordError(
            "Distance must be an integer",
            line=line,
            line_number=line_number,
            cause=e,
        )
    return EdgeRecord(source=source, target=target, weight=weight)


def iter_edge_records(lines: Iterable[str], strict: bool = False) -> Iterator[EdgeRecord]:
    """Yield edge records from an iterable of text lines.

    Args:
        lines: Raw lines, e.g. an open text file.
        strict: Raise on a non-integer weight instead of skipping the row.

    Raises:
        MalformedRecordError: In strict mode, on the first bad weight.
    """
    reader = csv.reader(lines)
    for raw_row in reader:
        line_number = reader.line_num
        row = _drop_trailing_empty(raw_row)
        if not row or all(not field.strip() for field in row):
            continue

        if len(row) != FIELD_COUNT:
            logger.debug(
                "Skipping row with wrong field count",
                extra={"line_number": line_number, "fields": len(row)},
            )
            continue

        try:
            yield _to_record(row, ",".join(row), line_number)
        except MalformedRecordError as e:
            if strict:
                raise
            logger.warning(
                "Skipping row with invalid distance",
                extra={"line_number": line_number, "line": e.line},
            )


def build_graph(records: Iterable[EdgeRecord], directed: bool = False) -> Graph:
    graph = Graph(directed=directed)
    for record in records:
        graph.add_record(record)
    return graph


def load_graph(
    routes_path: Union[str, Path],
    directed: bool = False,
    strict: bool = False,
) -> Graph:
    """Load a graph from a ``from,to,weight`` CSV file."""
    with open(routes_path, newline="", encoding="utf-8") as f:
        return build_graph(iter_edge_records(f, strict=strict), directed=directed)
