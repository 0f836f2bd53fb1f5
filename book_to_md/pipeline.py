"""Main conversion pipeline orchestrating DOCX/EPUB to Markdown conversion."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .processing import (
    BookReaderBase,
    Chapter,
    ConversionResult,
    ConvertedChapter,
    DocxReader,
    EpubReader,
    ImageMap,
    ImageResource,
    build_image_map,
    write_images,
)
from .post_processing import format_metadata


logger = logging.getLogger(__name__)

# Input extension -> reader class
READERS: dict[str, type[BookReaderBase]] = {
    ".docx": DocxReader,
    ".epub": EpubReader,
}

CHAPTER_SEPARATOR = "\n---\n\n"


@dataclass
class PipelineConfig:
    """Configuration for the conversion pipeline."""
    # Write one combined markdown file instead of a folder of chapters
    single: bool = False
    # Extract embedded images next to the output
    extract_images: bool = True


class ConversionPipeline:
    """Orchestrates the document to Markdown conversion process.

    Pipeline stages:
    1. Reader selection - Pick the reader for the input extension
    2. Image mapping - Read images and plan their output paths
    3. Chapter conversion - Render markdown with the planned image paths
    4. Output - Write images, then a single file or a folder with a README
       index

    Nothing is written until every chapter has been rendered.
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        """Initialize the pipeline.

        Args:
            config: Pipeline configuration.
        """
        self.config = config or PipelineConfig()

    def reader_for(self, input_path: Union[str, Path]) -> BookReaderBase:
        """Open the input with the reader for its extension.

        Args:
            input_path: Path to a DOCX or EPUB file.

        Returns:
            An opened reader.

        Raises:
            ValueError: If the extension is not supported.
        """
        path = Path(input_path)
        ext = path.suffix.lower()
        reader_class = READERS.get(ext)
        if reader_class is None:
            supported = ", ".join(sorted(READERS))
            raise ValueError(
                f"Unsupported file format: {ext or path.name}. "
                f"Supported formats: {supported}"
            )
        return reader_class(path)

    def resolve_output_path(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None
    ) -> Path:
        """Determine where output goes.

        Args:
            input_path: Path to the input file.
            output_path: Explicit output path, if given.

        Returns:
            The output file (single mode) or directory (folder mode).
        """
        if output_path is not None:
            return Path(output_path)

        stem = Path(input_path).stem
        if self.config.single:
            return Path(f"{stem}.md")
        return Path(stem)

    def convert(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None
    ) -> ConversionResult:
        """Run the full conversion pipeline and write the output.

        Args:
            input_path: Path to a DOCX or EPUB file.
            output_path: Output file or directory; derived from the input
                name when omitted.

        Returns:
            ConversionResult with chapters, metadata and image map.
        """
        path = Path(input_path)
        output = self.resolve_output_path(path, output_path)
        logger.info(f"Starting conversion of {path.name}")

        # Stage 1: Reader selection
        reader = self.reader_for(path)
        metadata = reader.metadata()
        metadata_header = format_metadata(metadata)

        # Stage 2: Image mapping
        images: list[ImageResource] = []
        image_map: ImageMap = {}
        if self.config.extract_images:
            logger.info("Stage 2: Mapping images")
            images = reader.images()
            image_map = build_image_map(images)

        # Stage 3: Chapter conversion
        logger.info(f"Stage 3: Converting {reader.name} content to markdown")
        chapters = build_converted_chapters(reader.chapters(image_map))

        # Stage 4: Output
        logger.info("Stage 4: Writing output")
        write_images(images, output.parent if self.config.single else output)
        if self.config.single:
            write_single_file(output, metadata_header, chapters)
        else:
            write_folder(output, metadata_header, chapters)

        logger.info(summarize(chapters, image_map, output))
        return ConversionResult(
            chapters=chapters,
            metadata=metadata,
            image_map=image_map,
            output_path=output
        )

    def convert_directory(
        self,
        input_dir: Union[str, Path],
        output_dir: Union[str, Path]
    ) -> list[Path]:
        """Convert all supported documents in a directory.

        Args:
            input_dir: Directory containing DOCX/EPUB files.
            output_dir: Directory for output files.

        Returns:
            List of created output paths.
        """
        input_dir = Path(input_dir)
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        output_paths = []
        for input_file in sorted(input_dir.iterdir()):
            if input_file.suffix.lower() not in READERS:
                continue
            name = f"{input_file.stem}.md" if self.config.single else input_file.stem
            try:
                result = self.convert(input_file, output_dir / name)
                output_paths.append(result.output_path)
            except Exception as e:
                logger.error(f"Failed to convert {input_file}: {e}")

        return output_paths


def build_converted_chapters(chapters: list[Chapter]) -> list[ConvertedChapter]:
    """Assign titles and file names to converted chapters.

    Args:
        chapters: Chapters in reading order.

    Returns:
        Chapters titled from the reader, their first level-1 heading, or
        their position.
    """
    converted = []
    for i, chapter in enumerate(chapters, start=1):
        title = (
            chapter.title
            or extract_title_from_markdown(chapter.content)
            or f"Chapter {i}"
        )
        converted.append(ConvertedChapter(
            title=title,
            filename=f"chapter-{i:02d}.md",
            content=chapter.content
        ))
    return converted


def extract_title_from_markdown(markdown: str) -> Optional[str]:
    """Return the text of the first non-empty ``# `` heading."""
    for line in markdown.split('\n'):
        stripped = line.strip()
        if stripped.startswith("# "):
            title = stripped[2:].strip()
            if title:
                return title
    return None


def write_single_file(
    output_path: Path,
    metadata_header: str,
    chapters: list[ConvertedChapter]
) -> None:
    """Write the header and all chapters into one markdown file."""
    parts = [metadata_header]
    for i, chapter in enumerate(chapters):
        if i > 0:
            parts.append(CHAPTER_SEPARATOR)
        parts.append(chapter.content)
        parts.append("\n")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("".join(parts), encoding='utf-8')


def write_folder(
    output_dir: Path,
    metadata_header: str,
    chapters: list[ConvertedChapter]
) -> None:
    """Write one file per chapter plus a README with a table of contents."""
    output_dir.mkdir(parents=True, exist_ok=True)

    for chapter in chapters:
        (output_dir / chapter.filename).write_text(chapter.content, encoding='utf-8')

    readme = [metadata_header, "## Table of Contents\n\n"]
    for i, chapter in enumerate(chapters, start=1):
        readme.append(f"{i}. [{chapter.title}]({chapter.filename})\n")
    readme.append("\n")

    (output_dir / "README.md").write_text("".join(readme), encoding='utf-8')


def summarize(
    chapters: list[ConvertedChapter],
    image_map: ImageMap,
    output_path: Path
) -> str:
    """Describe a finished conversion in one line."""
    chapter_count = len(chapters)
    image_count = len(image_map)
    message = f"Converted {chapter_count} chapter{'' if chapter_count == 1 else 's'}"
    if image_count > 0:
        message += f" and {image_count} image{'' if image_count == 1 else 's'}"
    return f"{message} to {output_path}"


def quick_convert(input_path: Union[str, Path]) -> str:
    """Quick conversion function for simple use cases.

    Converts without writing any files or extracting images.

    Args:
        input_path: Path to a DOCX or EPUB file.

    Returns:
        Markdown of all chapters joined by horizontal rules.
    """
    reader = ConversionPipeline().reader_for(input_path)
    return CHAPTER_SEPARATOR.join(chapter.content for chapter in reader.chapters())
