"""Abstract base class for document readers.

This module defines the interface that all input formats must implement,
allowing the pipeline to treat DOCX documents and EPUB books alike.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .models import Chapter, DocumentMetadata, ImageMap, ImageResource


class BookReaderBase(ABC):
    """Abstract base class for document to Markdown readers.

    Implement this interface to add new input formats.
    """

    # File extensions handled by this reader, lower case with leading dot
    extensions: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this reader."""
        pass

    @abstractmethod
    def chapters(self, image_map: Optional[ImageMap] = None) -> list[Chapter]:
        """Convert the document into markdown chapters.

        Args:
            image_map: Original image reference -> output-relative path.

        Returns:
            Chapters in reading order.
        """
        pass

    @abstractmethod
    def images(self) -> list[ImageResource]:
        """Return the embedded images of the document.

        Returns:
            List of ImageResource with the original reference and bytes.
        """
        pass

    @abstractmethod
    def metadata(self) -> DocumentMetadata:
        """Extract metadata from the document.

        Returns:
            DocumentMetadata with title, authors, language, etc.
        """
        pass

    @classmethod
    def validate_path(cls, path: Union[str, Path]) -> bool:
        """Check if a file exists and has an extension this reader handles.

        Args:
            path: Path to the input file.

        Returns:
            True if the file can be read, False otherwise.
        """
        path = Path(path)
        if not path.exists():
            return False
        if path.suffix.lower() not in cls.extensions:
            return False
        return True
