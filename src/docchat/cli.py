"""CLI entry point for DocChat."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from docchat.assistant import Assistant
from docchat.chunkers import SentenceChunker
from docchat.config import Settings, get_settings
from docchat.errors import UnsupportedSourceError
from docchat.ingesters import ingest_paths
from docchat.utils.text import decode_text

logger = logging.getLogger(__name__)


def load_assistant(sources: list[str], settings: Settings) -> Assistant:
    """Build an assistant and ingest every source into its store.

    Args:
        sources: Paths to text files or folders
        settings: Settings used for chunking, scoring and retrieval
    """
    assistant = Assistant.from_settings(settings)
    try:
        for upload in ingest_paths(sources):
            assistant.store.add_document(upload.title, upload.content)
    except UnsupportedSourceError as e:
        logger.error(str(e))
        logger.error("Supported inputs: folders, .txt, .md and .json files")
        sys.exit(1)
    return assistant


def chunk(path: str, chunk_size: int, overlap: int) -> None:
    """Print the chunks of a single file."""
    file_path = Path(path)
    if not file_path.is_file():
        logger.error(f"File not found: {path}")
        sys.exit(1)

    text = decode_text(file_path.read_bytes())
    if text is None:
        logger.error(f"Not a text file: {path}")
        sys.exit(1)

    try:
        chunker = SentenceChunker(chunk_size=chunk_size, overlap=overlap)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    chunks = chunker.chunk(text)
    for i, piece in enumerate(chunks, 1):
        print(f"--- chunk {i}/{len(chunks)} ({len(piece)} chars)")
        print(piece)


def search(
    sources: list[str],
    query: str,
    settings: Settings,
    top_k: Optional[int] = None,
    threshold: Optional[float] = None,
    as_json: bool = False,
    show_all: bool = False,
) -> None:
    """Print the top-ranked chunks for a query.

    With show_all, print every chunk's score in store order instead, without
    the threshold or top-k cut.
    """
    assistant = load_assistant(sources, settings)
    if show_all:
        print_all_scores(assistant, query, as_json)
        return

    results = assistant.retriever.retrieve(
        query,
        top_k=settings.top_k if top_k is None else top_k,
        threshold=settings.relevance_threshold if threshold is None else threshold,
    )

    if as_json:
        print(json.dumps([s.to_dict() for s in results], indent=2))
        return

    if not results:
        print(f"No results found for: {query}")
        return

    for i, source in enumerate(results, 1):
        print(f"{i}. [{source.relevance:.3f}] {source.title}")
        print(f"   {source.content}")


def print_all_scores(assistant: Assistant, query: str, as_json: bool = False) -> None:
    scored = assistant.retriever.score_all(query)

    if as_json:
        rows = [
            {
                "title": c.document.title,
                "chunk_index": c.chunk_index,
                "score": c.score,
                "content": c.text,
            }
            for c in scored
        ]
        print(json.dumps(rows, indent=2))
        return

    if not scored:
        print("No chunks loaded")
        return

    for c in scored:
        print(f"[{c.score:.3f}] {c.document.title} #{c.chunk_index}")


def ask(sources: list[str], query: str, settings: Settings) -> None:
    """Answer a question from the given sources."""
    assistant = load_assistant(sources, settings)
    answer = assistant.ask(query)

    print(answer.text)
    if answer.sources:
        print("")
        print("Sources:")
        for source in answer.sources:
            print(f"  - {source.title} ({source.relevance:.0%})")

    if answer.failed:
        sys.exit(2)


def info(sources: list[str], settings: Settings) -> None:
    """Show document and chunk counts for the given sources."""
    assistant = load_assistant(sources, settings)
    store = assistant.store

    print(f"Documents: {len(store)}")
    for doc in store.list_documents():
        print(f"  {doc.title}: {doc.size_bytes} bytes, {doc.chunk_count} chunks")
    print(f"")
    print(f"Searchable chunks: {store.chunk_count}")
    print(f"Total size: {store.total_bytes / 1024:.1f} KB")


def serve(sources: list[str], settings: Settings, transport: str = "stdio") -> None:
    """Start an MCP server, optionally preloaded with sources."""
    # Import here to avoid loading MCP unless needed
    from typing import Literal, cast

    from docchat.server import create_mcp_server

    assistant = load_assistant(sources, settings)
    logger.info(f"Serving {len(assistant.store)} documents via {transport}")
    mcp = create_mcp_server(assistant)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docchat",
        description="DocChat - ask questions about your text documents",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # chunk command
    chunk_parser = subparsers.add_parser("chunk", help="Show how a file is chunked")
    chunk_parser.add_argument("file", help="Text file path")
    chunk_parser.add_argument("--chunk-size", type=int, default=None)
    chunk_parser.add_argument("--overlap", type=int, default=None)

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Rank document chunks against a query",
    )
    search_parser.add_argument("sources", nargs="+", help="Text files or folders")
    search_parser.add_argument("-q", "--query", required=True, help="Query text")
    search_parser.add_argument("-k", "--top-k", type=int, default=None)
    search_parser.add_argument("-t", "--threshold", type=float, default=None)
    search_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    search_parser.add_argument(
        "--all",
        dest="show_all",
        action="store_true",
        help="Print the score of every chunk, unfiltered, in store order",
    )

    # ask command
    ask_parser = subparsers.add_parser(
        "ask",
        help="Answer a question from documents",
    )
    ask_parser.add_argument("sources", nargs="+", help="Text files or folders")
    ask_parser.add_argument("-q", "--query", required=True, help="Question text")

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show document and chunk counts",
    )
    info_parser.add_argument("sources", nargs="+", help="Text files or folders")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server",
    )
    serve_parser.add_argument("sources", nargs="*", help="Files or folders to preload")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(message)s",
    )

    args = build_parser().parse_args(argv)

    if args.command == "chunk":
        chunk(
            args.file,
            chunk_size=settings.chunk_size if args.chunk_size is None else args.chunk_size,
            overlap=settings.chunk_overlap if args.overlap is None else args.overlap,
        )
    elif args.command == "search":
        search(
            args.sources,
            args.query,
            settings,
            args.top_k,
            args.threshold,
            args.json,
            args.show_all,
        )
    elif args.command == "ask":
        ask(args.sources, args.query, settings)
    elif args.command == "info":
        info(args.sources, settings)
    elif args.command == "serve":
        serve(args.sources, settings, args.transport)


if __name__ == "__main__":
    main()
