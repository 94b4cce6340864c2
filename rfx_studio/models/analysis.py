"""Analysis result models."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CompanyReference(BaseModel):
    """A company document matched against the RFx keywords."""

    document_id: str = Field(..., description="Matched document id")
    document_name: str = Field(default="", description="Name at analysis time")
    score: int = Field(..., ge=1, description="Keyword occurrences in the document")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class AnalysisResult(BaseModel):
    """Structured extraction produced from one RFx document's text.

    The value is derived purely from the RFx text and the company documents
    supplied at analysis time, so recomputing it from the same inputs yields an
    equal result.
    """

    word_count: int = Field(default=0, ge=0)
    sections: dict[str, str] = Field(default_factory=dict)
    keywords: tuple[str, ...] = Field(default=(), max_length=20)
    due_date: str | None = Field(default=None)
    budget: str | None = Field(default=None)
    evaluation: tuple[str, ...] = Field(default=(), max_length=8)
    mandatory_requirements: tuple[str, ...] = Field(default=(), max_length=12)
    goals: tuple[str, ...] = Field(default=(), max_length=6)
    suggested_company_references: tuple[CompanyReference, ...] = Field(
        default=(), max_length=5
    )

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
