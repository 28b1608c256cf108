"""Scanning of the stock seed directory."""

from pathlib import Path

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".bmp"})


def is_image_file(path: Path) -> bool:
    """Return True for files whose extension is an allowed image type."""
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def scan_images(directory: Path) -> list[Path]:
    """Return image files directly inside ``directory``, sorted by name."""
    if not directory.is_dir():
        return []
    return sorted(
        (entry for entry in directory.iterdir() if is_image_file(entry)),
        key=lambda entry: entry.name,
    )
