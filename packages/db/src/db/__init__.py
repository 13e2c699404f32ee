# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, SessionLocal, engine, get_db
from .enums import (
    ChecklistScope,
    ChecklistStage,
    DealStatus,
    DocStatus,
    DocumentType,
    InternalFlagType,
    ReceiptSource,
    TrackingField,
    TrackingSkipReason,
    TrackingTarget,
)
from .models import Contact, Deal, ReceiptNote

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_db",
    "__version__",
    # Enums
    "ChecklistStage",
    "ChecklistScope",
    "InternalFlagType",
    "DocStatus",
    "DocumentType",
    "DealStatus",
    "ReceiptSource",
    "TrackingTarget",
    "TrackingSkipReason",
    "TrackingField",
    # Models
    "Contact",
    "Deal",
    "ReceiptNote",
]
