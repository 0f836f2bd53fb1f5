"""Resolution of relationship ids to image paths and link targets."""

import logging
from typing import Optional

from ..processing.models import ImageMap, RelationshipTable
from .config import RenderConfig


logger = logging.getLogger(__name__)


class RelationshipResolver:
    """Maps embed ids, hyperlink ids and anchors to Markdown targets.

    The relationship table and image map are only read, never modified.
    """

    def __init__(
        self,
        relationships: RelationshipTable,
        image_map: Optional[ImageMap] = None,
        config: Optional[RenderConfig] = None
    ):
        """Initialize the resolver.

        Args:
            relationships: Relationship id -> raw target.
            image_map: Original asset reference -> output-relative path.
            config: Render configuration.
        """
        self.relationships = relationships
        self.image_map = image_map or {}
        self.config = config or RenderConfig()

    def resolve_media(self, embed_id: str) -> Optional[str]:
        """Resolve an embedded image to the path used in the output.

        Args:
            embed_id: Relationship id of the image.

        Returns:
            Output path, or None when the id has no relationship entry.
        """
        target = self.relationships.get(embed_id)
        if target is None:
            logger.debug(f"No relationship for image {embed_id!r}")
            return None

        if target in self.image_map:
            return self.image_map[target]

        # Relationship targets are relative to the document part
        prefixed = f"{self.config.media_prefix}{target}"
        if prefixed in self.image_map:
            return self.image_map[prefixed]

        filename = target.rsplit("/", 1)[-1]
        return f"{self.config.fallback_image_dir}/{filename}"

    def resolve_hyperlink(
        self,
        anchor: Optional[str] = None,
        relationship_id: Optional[str] = None
    ) -> Optional[str]:
        """Resolve a hyperlink target.

        Args:
            anchor: Bookmark name inside the document.
            relationship_id: Relationship id of an external target.

        Returns:
            ``#anchor``, the raw relationship target, or None.
        """
        if anchor is not None:
            return f"#{anchor}"

        if relationship_id is None:
            return None

        target = self.relationships.get(relationship_id)
        if target is None:
            logger.debug(f"No relationship for hyperlink {relationship_id!r}")
        return target
