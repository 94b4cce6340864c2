"""Request and response payloads for the RFx Studio API."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from rfx_studio.models.documents import DocumentType


class ApiModel(BaseModel):
    """Base payload accepting and emitting camelCase keys."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class AddDocumentRequest(ApiModel):
    """Add a document from pasted or typed text."""

    type: DocumentType = Field(default=DocumentType.RFX)
    name: str | None = Field(
        default=None,
        description="Display name; a 'Pasted <timestamp>' name is generated when omitted",
    )
    content: str = Field(..., description="Plain-text content")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "type": "rfx",
                    "name": "City Network Upgrade",
                    "content": "Project Due Date: March 15, 2024\nBudget: $500,000",
                },
            ]
        }
    }


class RenameDocumentRequest(ApiModel):
    """Rename an existing document."""

    name: str = Field(..., min_length=1, max_length=500)


class AnalyzeRequest(ApiModel):
    """Run the heuristic analysis.

    With ``document_id`` the document is selected first; with ``text`` that
    text is analyzed instead of the selected document's content.
    """

    document_id: str | None = Field(default=None)
    text: str | None = Field(default=None)


class DraftRequest(ApiModel):
    """Compose a draft for the selected (or given) RFx document."""

    document_id: str | None = Field(default=None)


class SnippetRequest(ApiModel):
    """Append a snippet of the given kind to the draft."""

    kind: str = Field(..., description="executive, compliance or qualifications")


class SaveVersionRequest(ApiModel):
    """Snapshot the current draft."""

    label: str | None = Field(default=None, max_length=200)


class DraftContent(ApiModel):
    """The draft currently being edited."""

    content: str = Field(default="")


class SnippetResponse(ApiModel):
    """Generated snippet together with the updated draft."""

    kind: str
    snippet: str
    content: str


class HealthResponse(ApiModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
