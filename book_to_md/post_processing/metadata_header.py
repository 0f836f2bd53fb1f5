"""Markdown header block built from document metadata."""

from ..processing.models import DocumentMetadata


def format_metadata(metadata: DocumentMetadata) -> str:
    """Format document metadata as a markdown header.

    Args:
        metadata: Metadata of the converted document.

    Returns:
        Header ending in a horizontal rule and a newline, or an empty string
        when no metadata is known.
    """
    lines = []

    if metadata.title:
        lines.append(f"# {metadata.title}")
        lines.append("")

    if metadata.authors:
        lines.append(f"**Author:** {', '.join(metadata.authors)}")

    if metadata.publisher:
        lines.append(f"**Publisher:** {metadata.publisher}")

    if metadata.language:
        lines.append(f"**Language:** {metadata.language}")

    if metadata.description:
        lines.append("")
        lines.append(f"> {metadata.description}")

    if not lines:
        return ""

    lines.extend(["", "---", ""])
    return "\n".join(lines) + "\n"
