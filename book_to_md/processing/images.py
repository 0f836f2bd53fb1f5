"""Extraction of embedded images to the output directory."""

import logging
from pathlib import Path, PurePosixPath
from typing import Union

from .models import ImageMap, ImageResource


logger = logging.getLogger(__name__)

IMAGES_DIR = "images"


def image_filename(href: str) -> str:
    """Return the file name part of an image reference."""
    return PurePosixPath(href).name or "image.bin"


def build_image_map(images: list[ImageResource]) -> ImageMap:
    """Map each original image reference to its path below ``images/``.

    Args:
        images: Images of the source document.

    Returns:
        Map of original image reference -> path relative to the output
        directory.
    """
    return {
        image.original_href: f"{IMAGES_DIR}/{image_filename(image.original_href)}"
        for image in images
    }


def write_images(images: list[ImageResource], output_dir: Union[str, Path]) -> None:
    """Write images to ``output_dir/images`` under the names of ``build_image_map``.

    Args:
        images: Images of the source document.
        output_dir: Directory the markdown output is written to.
    """
    if not images:
        return

    images_dir = Path(output_dir) / IMAGES_DIR
    images_dir.mkdir(parents=True, exist_ok=True)

    for image in images:
        filename = image_filename(image.original_href)
        (images_dir / filename).write_bytes(image.data)
        logger.debug(f"Extracted {image.original_href} -> {IMAGES_DIR}/{filename}")

    logger.info(f"Extracted {len(images)} images to {images_dir}")
