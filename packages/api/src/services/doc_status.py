# This project was developed with assistance from AI tools.
"""Aggregate document collection status."""

from db.enums import DocStatus


def compute_doc_status(
    pre_total: int,
    pre_received: int,
    full_total: int,
    full_received: int,
) -> DocStatus:
    """Derive the status label from the stage counters.

    A stage with nothing required counts as complete.
    """
    if pre_received >= pre_total and full_received >= full_total:
        return DocStatus.ALL_COMPLETE
    if pre_received >= pre_total:
        return DocStatus.PRE_COMPLETE
    if pre_received > 0 or full_received > 0:
        return DocStatus.IN_PROGRESS
    return DocStatus.NOT_STARTED
