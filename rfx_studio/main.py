"""Main entry point for RFx Studio."""

import argparse
import sys
from pathlib import Path

from rfx_studio.config import get_settings
from rfx_studio.drafting.snippets import SnippetKind
from rfx_studio.models.analysis import AnalysisResult
from rfx_studio.models.documents import DocumentType
from rfx_studio.store.json_store import JSONStore, StoreError
from rfx_studio.utils.logging import get_logger, setup_logging
from rfx_studio.workspace.session import RFxWorkspace


logger = get_logger(__name__)


def build_workspace(store_path: Path | None = None) -> RFxWorkspace:
    """Workspace backed by the configured (or given) store file."""
    return RFxWorkspace(store=JSONStore(store_path))


def _write(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        logger.info("Wrote output", file=str(output), chars=len(text))
    else:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")


def print_analysis(analysis: AnalysisResult) -> None:
    """Print an analysis the way the analyzer panel lays it out."""
    print("\n" + "=" * 60)
    print("RFx ANALYSIS")
    print("=" * 60)

    print(f"\nWords: {analysis.word_count}  Sections: {len(analysis.sections)}")
    print(f"Due Date: {(analysis.due_date or 'Not detected').strip()}")
    print(f"Budget: {(analysis.budget or 'Not detected').strip()}")

    panels = [
        ("Goals", analysis.goals),
        ("Top Keywords", analysis.keywords),
        ("Mandatory Requirements", analysis.mandatory_requirements),
        ("Evaluation Criteria", analysis.evaluation),
        (
            "Suggested References",
            [f"{r.document_name} ({r.score})" for r in analysis.suggested_company_references],
        ),
    ]
    for title, items in panels:
        print(f"\n{title}:")
        if not items:
            print("  None")
        for item in items:
            print(f"  - {item}")

    print("\n" + "=" * 60)


def add_document(workspace: RFxWorkspace, path: Path, doc_type: DocumentType) -> None:
    document = workspace.upload_file(doc_type, path)
    print(f"{document.id}\t{document.name}")


def list_documents(workspace: RFxWorkspace, doc_type: DocumentType, query: str) -> None:
    documents = workspace.search_documents(doc_type, query)
    if not documents:
        print("No documents. Upload or paste to get started.")
    for document in documents:
        print(f"{document.id}\t{document.created_at:%Y-%m-%d %H:%M}\t{document.name}")


def _select(workspace: RFxWorkspace, doc_id: str) -> bool:
    if workspace.select_rfx(doc_id) is None:
        print(f"RFx document not found: {doc_id}", file=sys.stderr)
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="RFx Studio - analyze RFx documents and draft responses")
    parser.add_argument("--store", type=Path, default=None, help="Store file (overrides settings)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    types = [t.value for t in DocumentType]

    # Library commands
    add_parser = subparsers.add_parser("add", help="Upload a text file into the library")
    add_parser.add_argument("path", type=Path, help="File to upload")
    add_parser.add_argument("--type", choices=types, default="rfx", help="Document type")

    list_parser = subparsers.add_parser("list", help="List library documents")
    list_parser.add_argument("--type", choices=types, default="rfx", help="Document type")
    list_parser.add_argument("--query", default="", help="Name or content filter")

    rename_parser = subparsers.add_parser("rename", help="Rename a document")
    rename_parser.add_argument("doc_id", help="Document id")
    rename_parser.add_argument("name", help="New name")

    # Analysis and drafting commands
    analyze_parser = subparsers.add_parser("analyze", help="Analyze an RFx document")
    analyze_parser.add_argument("doc_id", help="RFx document id")
    analyze_parser.add_argument("--json", action="store_true", help="Print the raw analysis JSON")

    draft_parser = subparsers.add_parser("draft", help="Generate a response draft")
    draft_parser.add_argument("doc_id", help="RFx document id")
    draft_parser.add_argument("--output", type=Path, default=None, help="Write the draft to a file")

    snippet_parser = subparsers.add_parser("snippet", help="Render a reusable snippet")
    snippet_parser.add_argument("kind", choices=[k.value for k in SnippetKind], help="Snippet kind")
    snippet_parser.add_argument("doc_id", help="RFx document id")

    # Version commands
    save_parser = subparsers.add_parser("save-version", help="Save a draft file as a version")
    save_parser.add_argument("--file", type=Path, required=True, help="Draft text file")
    save_parser.add_argument("--label", default=None, help="Version label")
    save_parser.add_argument("--rfx", default=None, help="RFx document the draft belongs to")

    subparsers.add_parser("versions", help="List saved versions")

    restore_parser = subparsers.add_parser("restore-version", help="Print a saved version")
    restore_parser.add_argument("version_id", help="Version id")
    restore_parser.add_argument("--output", type=Path, default=None, help="Write to a file")

    # Server command
    server_parser = subparsers.add_parser("serve", help="Start API server")
    settings = get_settings()
    server_parser.add_argument("--host", default=settings.api_host, help="Host")
    server_parser.add_argument("--port", type=int, default=settings.api_port, help="Port")

    args = parser.parse_args(argv)
    setup_logging(settings.log_level, json_format=settings.json_logs or settings.is_production)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "serve":
        import uvicorn
        uvicorn.run("rfx_studio.api.app:create_app", factory=True, host=args.host, port=args.port)
        return 0

    try:
        workspace = build_workspace(args.store)
    except StoreError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.command == "add":
        try:
            add_document(workspace, args.path, DocumentType(args.type))
        except (FileNotFoundError, ValueError) as e:
            print(str(e), file=sys.stderr)
            return 1
    elif args.command == "list":
        list_documents(workspace, DocumentType(args.type), args.query)
    elif args.command == "rename":
        try:
            document = workspace.rename_document(args.doc_id, args.name)
        except StoreError as e:
            print(str(e), file=sys.stderr)
            return 1
        print(f"{document.id}\t{document.name}")
    elif args.command == "analyze":
        if not _select(workspace, args.doc_id):
            return 1
        analysis = workspace.analyze()
        if args.json:
            print(analysis.model_dump_json(by_alias=True, indent=2))
        else:
            print_analysis(analysis)
    elif args.command == "draft":
        if not _select(workspace, args.doc_id):
            return 1
        _write(workspace.generate_draft(), args.output)
    elif args.command == "snippet":
        if not _select(workspace, args.doc_id):
            return 1
        if workspace.current_analysis is None:
            workspace.analyze()
        _write(workspace.smart_insert(args.kind), None)
    elif args.command == "save-version":
        if args.rfx and not _select(workspace, args.rfx):
            return 1
        try:
            workspace.content = args.file.read_text(encoding="utf-8")
        except OSError as e:
            print(str(e), file=sys.stderr)
            return 1
        version = workspace.save_version(args.label)
        print(f"{version.id}\t{version.label}")
    elif args.command == "versions":
        if not workspace.versions:
            print("No versions yet. Save your progress.")
        for version in workspace.versions:
            print(f"{version.id}\t{version.created_at:%Y-%m-%d %H:%M}\t{version.label}")
    elif args.command == "restore-version":
        if not workspace.restore_version(args.version_id):
            print(f"Version not found: {args.version_id}", file=sys.stderr)
            return 1
        _write(workspace.content, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
