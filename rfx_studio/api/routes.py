"""API routes for RFx Studio."""

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile, status

from rfx_studio import __version__
from rfx_studio.api.dependencies import WorkspaceDep
from rfx_studio.loaders.base import strip_extension
from rfx_studio.loaders.text_loader import TextFileLoader
from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import Document, DocumentType, DraftVersion
from rfx_studio.models.requests import (
    AddDocumentRequest,
    AnalyzeRequest,
    DraftContent,
    DraftRequest,
    HealthResponse,
    RenameDocumentRequest,
    SaveVersionRequest,
    SnippetRequest,
    SnippetResponse,
)
from rfx_studio.store.json_store import DocumentNotFoundError, StoreError
from rfx_studio.workspace.session import RFxWorkspace


router = APIRouter(prefix="/api/v1", tags=["RFx Studio"])


def _select_or_404(workspace: RFxWorkspace, doc_id: str) -> Document:
    document = workspace.select_rfx(doc_id)
    if document is None:
        raise HTTPException(status_code=404, detail=f"RFx document not found: {doc_id}")
    return document


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


# Library


@router.get("/documents", response_model=list[Document])
async def list_documents(
    workspace: WorkspaceDep,
    doc_type: DocumentType = Query(default=DocumentType.RFX, alias="type"),
    q: str = Query(default="", description="Case-insensitive name or content filter"),
) -> list[Document]:
    """List documents of one type, newest first."""
    return workspace.search_documents(doc_type, q)


@router.post("/documents", response_model=Document, status_code=status.HTTP_201_CREATED)
async def add_document(request: AddDocumentRequest, workspace: WorkspaceDep) -> Document:
    """Add a document from text.

    Without a name the text is treated as pasted and named after the current
    time; empty pasted text is rejected.
    """
    if request.name:
        return workspace.add_document(request.type, request.name, request.content)

    document = workspace.add_pasted(request.type, request.content)
    if document is None:
        raise HTTPException(status_code=400, detail="Nothing to paste")
    return document


@router.post(
    "/documents/upload", response_model=Document, status_code=status.HTTP_201_CREATED
)
async def upload_document(
    workspace: WorkspaceDep,
    file: UploadFile = File(...),
    doc_type: DocumentType = Form(default=DocumentType.RFX, alias="type"),
) -> Document:
    """Upload a file; its bytes are stored as text without format checks."""
    raw = await file.read()
    content = raw.decode(TextFileLoader.ENCODING, errors="replace")
    name = strip_extension(file.filename or "Untitled")
    return workspace.add_document(doc_type, name, content)


@router.get("/documents/{doc_id}", response_model=Document)
async def get_document(doc_id: str, workspace: WorkspaceDep) -> Document:
    document = workspace.store.get_document(doc_id)
    if document is None:
        raise HTTPException(status_code=404, detail=f"Document not found: {doc_id}")
    return document


@router.patch("/documents/{doc_id}", response_model=Document)
async def rename_document(
    doc_id: str, request: RenameDocumentRequest, workspace: WorkspaceDep
) -> Document:
    """Rename a document."""
    try:
        return workspace.rename_document(doc_id, request.name)
    except DocumentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=400, detail=str(e))


# Analysis


@router.post("/rfx/{doc_id}/select", response_model=Document)
async def select_rfx(doc_id: str, workspace: WorkspaceDep) -> Document:
    """Make a document the RFx being worked on."""
    return _select_or_404(workspace, doc_id)


@router.post("/analyze", response_model=AnalysisResult)
async def analyze_rfx(request: AnalyzeRequest, workspace: WorkspaceDep) -> AnalysisResult:
    """Analyze the selected RFx, or the supplied text.

    Args:
        request: Optional document to select and optional text override.
        workspace: Injected workspace.

    Returns:
        The analysis, also stored under the selected document id.
    """
    if request.document_id:
        _select_or_404(workspace, request.document_id)
    return workspace.analyze(request.text)


@router.get("/analysis/{doc_id}", response_model=AnalysisResult)
async def get_analysis(doc_id: str, workspace: WorkspaceDep) -> AnalysisResult:
    analysis = workspace.store.get_analysis(doc_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail=f"No analysis for document: {doc_id}")
    return analysis


# Draft


@router.post("/draft", response_model=DraftContent)
async def generate_draft(request: DraftRequest, workspace: WorkspaceDep) -> DraftContent:
    """Replace the draft with the composed response template."""
    if request.document_id:
        _select_or_404(workspace, request.document_id)
    return DraftContent(content=workspace.generate_draft())


@router.get("/draft/content", response_model=DraftContent)
async def get_draft(workspace: WorkspaceDep) -> DraftContent:
    return DraftContent(content=workspace.content)


@router.put("/draft/content", response_model=DraftContent)
async def edit_draft(request: DraftContent, workspace: WorkspaceDep) -> DraftContent:
    """Overwrite the draft with edited text."""
    workspace.content = request.content
    return DraftContent(content=workspace.content)


@router.post("/draft/snippets", response_model=SnippetResponse)
async def insert_snippet(request: SnippetRequest, workspace: WorkspaceDep) -> SnippetResponse:
    """Append a snippet to the draft; unknown kinds insert nothing."""
    snippet = workspace.smart_insert(request.kind)
    return SnippetResponse(kind=request.kind, snippet=snippet, content=workspace.content)


# Versions


@router.get("/versions", response_model=list[DraftVersion])
async def list_versions(workspace: WorkspaceDep) -> list[DraftVersion]:
    """Saved versions, newest first."""
    return workspace.versions


@router.post("/versions", response_model=DraftVersion, status_code=status.HTTP_201_CREATED)
async def save_version(request: SaveVersionRequest, workspace: WorkspaceDep) -> DraftVersion:
    """Snapshot the current draft."""
    return workspace.save_version(request.label)


@router.post("/versions/{version_id}/restore", response_model=DraftContent)
async def restore_version(version_id: str, workspace: WorkspaceDep) -> DraftContent:
    """Make a saved version the current draft."""
    if not workspace.restore_version(version_id):
        raise HTTPException(status_code=404, detail=f"Version not found: {version_id}")
    return DraftContent(content=workspace.content)
