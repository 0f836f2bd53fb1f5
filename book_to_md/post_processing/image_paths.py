"""Rewriting of original image references to extracted output paths."""

from pathlib import PurePosixPath

from ..processing.models import ImageMap


class ImagePathRewriter:
    """Rewrites asset references in markdown using an image map.

    Besides the exact reference, the bare file name is rewritten, but only inside
    link targets ``](name)`` and quoted attributes ``"name"`` so that prose
    mentioning the file name is left alone.
    """

    def rewrite(self, markdown: str, image_map: ImageMap) -> str:
        """Apply every image map entry in insertion order.

        Later entries see the output of earlier ones, so the map should hold
        one entry per distinct original reference.

        Args:
            markdown: The markdown content.
            image_map: Original reference -> output-relative path.

        Returns:
            Markdown with rewritten image paths.
        """
        result = markdown
        for original, replacement in image_map.items():
            result = self._rewrite_path(result, original, replacement)
        return result

    def _rewrite_path(self, markdown: str, original: str, replacement: str) -> str:
        """Rewrite one original reference.

        Args:
            markdown: Input markdown.
            original: Reference as it appears in the source.
            replacement: Output-relative path.

        Returns:
            Markdown with this reference rewritten.
        """
        # An empty needle would match between every character
        if not original:
            return markdown

        result = markdown.replace(original, replacement)

        filename = PurePosixPath(original).name
        if not filename:
            return result

        for pattern in (f']({filename})', f'"{filename}"'):
            if pattern in result:
                result = result.replace(pattern, pattern.replace(filename, replacement))

        return result
