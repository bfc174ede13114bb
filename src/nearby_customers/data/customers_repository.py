"""Data access helpers for streaming customer records from line-delimited files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from os import PathLike

import anyio

from ..errors import SourceNotFoundError, StrictIngestionError
from ..models.domain import CustomerRecord

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IngestionResult:
    """Records parsed from a source along with the lines that failed to parse."""

    records: list[CustomerRecord] = field(default_factory=list)
    failed_lines: list[int] = field(default_factory=list)
    lines_read: int = 0


def parse_customer_line(line: str, line_index: int) -> CustomerRecord:
    """Parse one JSON line into a ``CustomerRecord``.

    Raises ``ValueError`` when the line is not a JSON object.
    """

    payload = json.loads(line)
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
    return CustomerRecord(
        line_index=line_index,
        user_id=payload.get("user_id"),
        name=payload.get("name"),
        latitude=payload.get("latitude"),
        longitude=payload.get("longitude"),
        raw=payload,
    )


def _accept_line(result: IngestionResult, raw_line: bytes, line_index: int, *, strict: bool) -> None:
    result.lines_read += 1
    try:
        line = raw_line.decode("utf-8").rstrip("\r\n")
        record = parse_customer_line(line, line_index)
    except ValueError as exc:
        if strict:
            logger.warning("Aborting ingestion, line %d is malformed: %s", line_index, exc)
            raise StrictIngestionError(line_index) from exc
        logger.debug("Skipping malformed customer line %d: %s", line_index, exc)
        result.failed_lines.append(line_index)
        return
    result.records.append(record)


async def ingest_customers(source: str | PathLike[str], *, strict: bool = False) -> IngestionResult:
    """Stream customers from ``source`` line by line.

    Malformed lines are skipped unless ``strict`` is set, in which case the
    first one raises ``StrictIngestionError`` and the rest of the file is not
    read. The file handle is closed on every exit path.
    """

    try:
        handle = await anyio.open_file(source, mode="rb")
    except OSError as exc:
        raise SourceNotFoundError(source) from exc

    result = IngestionResult()
    async with handle:
        line_index = 0
        async for raw_line in handle:
            # invalid UTF-8 on a line makes that line malformed
            _accept_line(result, raw_line, line_index, strict=strict)
            line_index += 1

    logger.info(
        "Ingested %d customer(s) from %s, %d malformed line(s) skipped",
        len(result.records),
        source,
        len(result.failed_lines),
    )
    return result
