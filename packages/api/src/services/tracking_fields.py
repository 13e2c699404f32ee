# This project was developed with assistance from AI tools.
"""Tracking field codec.

Missing and received document lists are stored as human-readable text, one
entry per line::

    Pay stub - recent [PRE]
    Void cheque [FULL]

Older records hold JSON arrays instead. Readers try each strategy in order:
JSON first when the text looks like an array, then line parsing. Writers
always emit the line format.
"""

import json
import logging
import re
from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any

from db.enums import ChecklistStage, DocStatus, TrackingField

from ..schemas.tracking import DocEntry, TrackingFields

logger = logging.getLogger(__name__)

_STAGE_SUFFIX = re.compile(r"^(?P<name>.*?)\s*\[(?P<stage>[A-Za-z_]+)\]$")

MissingStrategy = Callable[[str], list[DocEntry] | None]
ReceivedStrategy = Callable[[str], list[str] | None]


def _load_json_array(text: str) -> list | None:
    if not text.startswith("["):
        return None
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return parsed if isinstance(parsed, list) else None


def _legacy_entry(raw: Any) -> DocEntry | None:
    if isinstance(raw, str):
        return DocEntry(name=raw.strip()) if raw.strip() else None
    if isinstance(raw, dict) and isinstance(raw.get("name"), str):
        try:
            stage = ChecklistStage(raw.get("stage") or ChecklistStage.PRE)
        except ValueError:
            stage = ChecklistStage.PRE
        return DocEntry(name=raw["name"].strip(), stage=stage)
    return None


def missing_from_json(text: str) -> list[DocEntry] | None:
    """Legacy format: ``[{"name": ..., "stage": ...}]`` or bare strings."""
    parsed = _load_json_array(text)
    if parsed is None:
        return None
    entries: list[DocEntry] = []
    for raw in parsed:
        entry = _legacy_entry(raw)
        if entry is None:
            return None
        entries.append(entry)
    return entries


def parse_missing_line(line: str) -> DocEntry:
    """Parse ``"<name> [<STAGE>]"``; unknown or absent stage means PRE."""
    match = _STAGE_SUFFIX.match(line)
    if match is not None:
        try:
            return DocEntry(name=match.group("name").strip(), stage=ChecklistStage(match.group("stage")))
        except ValueError:
            pass
    return DocEntry(name=line)


def missing_from_lines(text: str) -> list[DocEntry]:
    return [parse_missing_line(line.strip()) for line in text.splitlines() if line.strip()]


def received_from_json(text: str) -> list[str] | None:
    parsed = _load_json_array(text)
    if parsed is None or not all(isinstance(n, str) for n in parsed):
        return None
    return [n.strip() for n in parsed if n.strip()]


def received_from_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


MISSING_STRATEGIES: tuple[MissingStrategy, ...] = (missing_from_json, missing_from_lines)
RECEIVED_STRATEGIES: tuple[ReceivedStrategy, ...] = (received_from_json, received_from_lines)


def parse_missing_entries(raw: str | None) -> list[DocEntry]:
    if not raw or not raw.strip():
        return []
    text = raw.strip()
    for strategy in MISSING_STRATEGIES:
        entries = strategy(text)
        if entries is not None:
            return entries
    return []


def parse_received_names(raw: str | None) -> list[str]:
    if not raw or not raw.strip():
        return []
    text = raw.strip()
    for strategy in RECEIVED_STRATEGIES:
        names = strategy(text)
        if names is not None:
            return names
    return []


def format_missing_entries(entries: list[DocEntry]) -> str:
    return "\n".join(f"{e.name} [{e.stage.value}]" for e in entries)


def format_received_names(names: list[str]) -> str:
    return "\n".join(names)


def parse_counter(value: Any) -> int:
    """Integers, integral floats and numeric strings; anything else is 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else 0
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return 0
        return int(number) if number.is_integer() else 0
    return 0


def _parse_status(value: Any) -> DocStatus | None:
    if value is None or value == "":
        return None
    try:
        return DocStatus(value)
    except ValueError:
        logger.warning("Ignoring unknown doc status %r", value)
        return None


def _parse_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def parse_tracking_fields(raw: Mapping[TrackingField, Any]) -> TrackingFields:
    """Decode raw stored values; absent or malformed fields get safe defaults."""
    return TrackingFields(
        missing_docs=parse_missing_entries(raw.get(TrackingField.MISSING_DOCS)),
        received_docs=parse_received_names(raw.get(TrackingField.RECEIVED_DOCS)),
        pre_docs_total=parse_counter(raw.get(TrackingField.PRE_DOCS_TOTAL)),
        pre_docs_received=parse_counter(raw.get(TrackingField.PRE_DOCS_RECEIVED)),
        full_docs_total=parse_counter(raw.get(TrackingField.FULL_DOCS_TOTAL)),
        full_docs_received=parse_counter(raw.get(TrackingField.FULL_DOCS_RECEIVED)),
        doc_status=_parse_status(raw.get(TrackingField.DOC_STATUS)),
        doc_request_sent=_parse_date(raw.get(TrackingField.DOC_REQUEST_SENT)),
    )
