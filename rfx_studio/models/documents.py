"""Document and draft version Pydantic models."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Timezone-aware current time used for ``createdAt`` stamps."""
    return datetime.now(timezone.utc)


class DocumentType(str, Enum):
    """Kinds of documents kept in the library."""

    RFX = "rfx"
    COMPANY = "company"


class Document(BaseModel):
    """An uploaded or pasted plain-text document."""

    id: str = Field(..., min_length=1, description="Unique document identifier")
    name: str = Field(..., description="Display name")
    content: str = Field(default="", description="Full plain-text content")
    created_at: datetime = Field(default_factory=utcnow)
    type: DocumentType = Field(..., description="rfx or company")

    model_config = {
        "frozen": False,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class DraftVersion(BaseModel):
    """Immutable snapshot of the response draft."""

    id: str = Field(..., min_length=1)
    label: str = Field(..., description="User supplied or generated label")
    content: str = Field(default="")
    created_at: datetime = Field(default_factory=utcnow)

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
