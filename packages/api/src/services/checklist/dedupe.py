# This project was developed with assistance from AI tools.
"""Per-target deduplication of checklist items."""

from ...schemas.checklist import ChecklistItem


def merge_notes(*notes: str | None) -> str | None:
    """Join the distinct non-empty notes with " / ", keeping first-seen order."""
    distinct: list[str] = []
    for note in notes:
        if note and note not in distinct:
            distinct.append(note)
    return " / ".join(distinct) if distinct else None


def deduplicate_items(items: list[ChecklistItem]) -> list[ChecklistItem]:
    """Keep the first item per rule id; later duplicates only contribute notes."""
    kept: dict[str, ChecklistItem] = {}
    for item in items:
        existing = kept.get(item.rule_id)
        if existing is None:
            kept[item.rule_id] = item
            continue
        merged = merge_notes(existing.notes, item.notes)
        if merged != existing.notes:
            kept[item.rule_id] = existing.model_copy(update={"notes": merged})
    return list(kept.values())
