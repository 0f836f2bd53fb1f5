"""Whitespace normalization post-processor for collapsing excessive newlines."""

import re


# A newline followed by two or more lines holding nothing but whitespace
BLANK_RUN_PATTERN = re.compile(r'\n(?:[^\S\n]*\n){2,}')


class MarkdownNormalizer:
    """Collapses blank lines and trailing whitespace in Markdown.

    ``normalize`` is idempotent: feeding its output back in returns the
    same text.
    """

    def normalize(self, markdown: str) -> str:
        """Normalize blank lines, trailing whitespace and the final newline.

        Args:
            markdown: Input markdown content.

        Returns:
            Markdown ending in exactly one newline, or an empty string when
            nothing but whitespace was given.
        """
        result = markdown

        # Collapse 3+ newlines into 2 (one blank line)
        while BLANK_RUN_PATTERN.search(result):
            result = BLANK_RUN_PATTERN.sub('\n\n', result)

        result = '\n'.join(line.rstrip() for line in result.split('\n'))

        result = result.rstrip()
        if not result:
            return ""
        return result + '\n'


def normalize_markdown(markdown: str) -> str:
    """Normalize markdown with a default MarkdownNormalizer."""
    return MarkdownNormalizer().normalize(markdown)
