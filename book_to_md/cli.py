"""Command-line interface for book-to-md converter."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .pipeline import READERS, ConversionPipeline, PipelineConfig


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def _pipeline_config(args: argparse.Namespace) -> PipelineConfig:
    return PipelineConfig(
        single=args.single,
        extract_images=not args.no_images,
    )


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle the convert command."""
    input_path = Path(args.input)

    if not input_path.exists():
        logger.error(f"Error: File not found: {input_path}")
        return 1

    pipeline = ConversionPipeline(_pipeline_config(args))

    try:
        result = pipeline.convert(input_path, args.output)
        logger.info(f"[OK] Converted: {input_path.name} -> {result.output_path}")
        return 0
    except Exception as e:
        logger.error(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def cmd_batch(args: argparse.Namespace) -> int:
    """Handle the batch command for directory processing."""
    input_dir = Path(args.input_dir)
    output_dir = Path(args.output_dir) if args.output_dir else input_dir / "converted"

    if not input_dir.exists():
        logger.error(f"Error: Directory not found: {input_dir}")
        return 1

    input_files = [p for p in input_dir.iterdir() if p.suffix.lower() in READERS]
    if not input_files:
        logger.error(f"No DOCX or EPUB files found in {input_dir}")
        return 0

    logger.info(f"Found {len(input_files)} documents")

    pipeline = ConversionPipeline(_pipeline_config(args))
    output_paths = pipeline.convert_directory(input_dir, output_dir)

    logger.info(f"Converted {len(output_paths)}/{len(input_files)} files")
    return 0 if len(output_paths) == len(input_files) else 1


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command to show document metadata."""
    input_path = Path(args.input)

    if not input_path.exists():
        logger.error(f"Error: File not found: {input_path}")
        return 1

    try:
        reader = ConversionPipeline().reader_for(input_path)
        metadata = reader.metadata()
        image_count = len(reader.images())
        chapter_count = len(reader.chapters())
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1

    if args.json:
        info = metadata.to_dict()
        info["chapter_count"] = chapter_count
        info["image_count"] = image_count
        print(json.dumps(info, indent=2))
        return 0

    logger.info(f"\n[FILE] {input_path.name}")
    logger.info("=" * 50)
    logger.info(f"Title:     {metadata.title or 'N/A'}")
    logger.info(f"Authors:   {', '.join(metadata.authors) or 'N/A'}")
    logger.info(f"Publisher: {metadata.publisher or 'N/A'}")
    logger.info(f"Language:  {metadata.language or 'N/A'}")
    logger.info(f"Chapters:  {chapter_count}")
    logger.info(f"Images:    {image_count}")

    return 0


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '-s', '--single',
        action='store_true',
        help='Write one combined markdown file instead of a folder of chapters'
    )
    parser.add_argument(
        '--no-images',
        action='store_true',
        help='Do not extract images (only convert text content)'
    )


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog='book-to-md',
        description='Convert DOCX documents and EPUB books to clean Markdown'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Convert command
    convert_parser = subparsers.add_parser(
        'convert',
        help='Convert a single DOCX or EPUB file'
    )
    convert_parser.add_argument(
        'input',
        help='Path to input DOCX or EPUB file'
    )
    convert_parser.add_argument(
        '-o', '--output',
        help='Output path: a directory, or a file with --single '
             '(default: named after the input in the current directory)'
    )
    _add_output_arguments(convert_parser)
    convert_parser.set_defaults(func=cmd_convert)

    # Batch command
    batch_parser = subparsers.add_parser(
        'batch',
        help='Convert all DOCX and EPUB files in a directory'
    )
    batch_parser.add_argument(
        'input_dir',
        help='Directory containing DOCX/EPUB files'
    )
    batch_parser.add_argument(
        '-o', '--output-dir',
        help='Output directory (default: input_dir/converted)'
    )
    _add_output_arguments(batch_parser)
    batch_parser.set_defaults(func=cmd_batch)

    # Info command
    info_parser = subparsers.add_parser(
        'info',
        help='Show document metadata and chapter/image counts'
    )
    info_parser.add_argument(
        'input',
        help='Path to DOCX or EPUB file'
    )
    info_parser.add_argument(
        '--json',
        action='store_true',
        help='Print the information as JSON'
    )
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
