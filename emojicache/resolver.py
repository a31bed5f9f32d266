from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from emojicache.catalog import CatalogDocument, ItemIndex
from emojicache.config import SUPPORTED_EXTENSIONS, is_safe_name, sanitize_name


@dataclass(frozen=True)
class ResolvedTarget:
    item_name: str
    sanitized_name: str
    asset_id: str


def already_stored(sanitized_name: str, local_files: Iterable[str]) -> bool:
    """Any supported extension counts, even one a fresh download wouldn't use."""
    return any(
        f"{sanitized_name}.{ext}" in local_files for ext in SUPPORTED_EXTENSIONS
    )


def resolve_targets(
    catalog: CatalogDocument,
    item_index: ItemIndex,
    local_files: set[str],
) -> list[ResolvedTarget]:
    """
    Work out which items still need downloading, and from which asset id.

    No I/O beyond warnings on stdout; local_files is the snapshot of
    the output directory taken at the start of the cycle.
    """
    targets = []
    claimed = set()

    for item_name, emoji_hash in item_index.items():
        entry = catalog.get(emoji_hash)
        if entry is None:
            print(f"⚠️  No emoji entry found for hash {emoji_hash} (item: {item_name})")
            continue

        sanitized = sanitize_name(item_name)
        if not is_safe_name(sanitized):
            print(f"⚠️  Unsafe item name, not a plain filename: {item_name!r}")
            continue
        if sanitized in claimed or already_stored(sanitized, local_files):
            continue

        asset_id = entry.asset_id
        if not asset_id:
            print(f"⚠️  No valid emoji ID found for {item_name}")
            continue

        claimed.add(sanitized)
        targets.append(ResolvedTarget(item_name, sanitized, asset_id))

    return targets
