"""FastMCP server implementation for DocChat."""

from mcp.server.fastmcp import FastMCP

from docchat.assistant import Assistant


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    elif size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


class DocChatTools:
    """Tool implementations backed by one assistant and its in-memory store."""

    def __init__(self, assistant: Assistant):
        self.assistant = assistant
        self.store = assistant.store

    def add_document(self, title: str, content: str) -> str:
        """Add a plain-text document to the knowledge base.

        Args:
            title: Document title (e.g., the file name)
            content: Full plain-text content

        Returns:
            The new document id and its chunk count
        """
        doc = self.store.add_document(title, content)
        return f"Added {doc.title} (id: {doc.id}, {doc.chunk_count} chunks)"

    def delete_document(self, doc_id: str) -> str:
        """Delete a document by id. Unknown ids are ignored.

        Args:
            doc_id: Id as shown by ls

        Returns:
            Confirmation message
        """
        self.store.delete_document(doc_id)
        return f"Deleted {doc_id}"

    def ls(self) -> str:
        """List documents in the knowledge base.

        Returns:
            One line per document with id, size and chunk count
        """
        docs = self.store.list_documents()
        if not docs:
            return "No documents loaded"

        lines = [
            f"{doc.id}  {doc.title:<40} {_format_size(doc.size_bytes):>10}  {doc.chunk_count} chunks"
            for doc in docs
        ]
        lines.append(f"{len(docs)} documents, {self.store.chunk_count} searchable chunks")
        return "\n".join(lines)

    def recall(self, query: str, limit: int = 3, threshold: float = 0.1) -> str:
        """Keyword search across the knowledge base.

        Args:
            query: Question or keywords to look for
            limit: Maximum number of chunks to return (default: 3)
            threshold: Minimum relevance a chunk must exceed (default: 0.1)

        Returns:
            Ranked list of matching chunks with relevance scores
        """
        sources = self.assistant.retriever.retrieve(query, top_k=limit, threshold=threshold)
        if not sources:
            return f"No results found for: {query}"

        lines = []
        for i, source in enumerate(sources, 1):
            text = source.content[:200].replace("\n", " ")
            if len(source.content) > 200:
                text += "..."
            lines.append(f"{i}. [{source.relevance:.3f}] {source.title}")
            lines.append(f"   {text}")
            lines.append("")

        return "\n".join(lines)

    def ask(self, question: str) -> str:
        """Answer a question from the uploaded documents.

        Args:
            question: Natural language question

        Returns:
            The answer followed by its sources
        """
        answer = self.assistant.ask(question)
        if not answer.sources:
            return answer.text

        lines = [answer.text, "", "Sources:"]
        for source in answer.sources:
            lines.append(f"  - {source.title} ({source.relevance:.0%})")
        return "\n".join(lines)


def create_mcp_server(assistant: Assistant) -> FastMCP:
    """Create an MCP server around an assistant.

    Design: 1 process = 1 in-memory knowledge base. Nothing survives a
    restart.

    Args:
        assistant: Assistant whose store the tools read and mutate

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(name="docchat")
    tools = DocChatTools(assistant)

    for fn in (tools.add_document, tools.delete_document, tools.ls, tools.recall, tools.ask):
        mcp.add_tool(fn)

    return mcp
