from pathlib import Path

from emojicache.config import (
    CONTENT_TYPE_EXTENSIONS,
    SUPPORTED_EXTENSIONS,
    is_safe_name,
    sanitize_name,
)
from emojicache.errors import ImageNotFound

EXTENSION_CONTENT_TYPES = {ext: mime for mime, ext in CONTENT_TYPE_EXTENSIONS.items()}
EXTENSION_CONTENT_TYPES["jpeg"] = "image/jpeg"


def lookup(item_name: str, emoji_dir) -> Path:
    """First existing <sanitized>.<ext>, probing extensions in priority order."""
    stem = sanitize_name(item_name)
    if not is_safe_name(stem):
        raise ImageNotFound(item_name)
    emoji_dir = Path(emoji_dir)

    for ext in SUPPORTED_EXTENSIONS:
        path = emoji_dir / f"{stem}.{ext}"
        if path.is_file():
            return path

    raise ImageNotFound(item_name)


def content_type_for(path: Path) -> str:
    return EXTENSION_CONTENT_TYPES.get(
        path.suffix.lstrip(".").lower(), "application/octet-stream"
    )
