from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

import requests

from emojicache.config import MirrorConfig
from emojicache.errors import FetchError


@dataclass(frozen=True)
class EmojiEntry:
    normal_id: Optional[str] = None
    enchanted_id: Optional[str] = None

    @property
    def asset_id(self) -> Optional[str]:
        # prefer the normal variant, fall back to enchanted
        return self.normal_id or self.enchanted_id


CatalogDocument = dict[str, EmojiEntry]
ItemIndex = dict[str, str]


def _variant_id(data, variant):
    value = data.get(variant)
    if not isinstance(value, dict):
        return None
    asset_id = value.get("id")
    if asset_id is None or asset_id == "":
        return None
    return str(asset_id)


def parse_catalog(raw) -> CatalogDocument:
    """
    emojis.json looks like:
    {"<hash>": {"normal": {"id": "123"}, "enchanted": {"id": "456"}}, ...}
    """
    if not isinstance(raw, dict):
        raise FetchError("emojis.json is not a JSON object")

    catalog = {}
    for emoji_hash, data in raw.items():
        if not isinstance(data, dict):
            continue
        catalog[emoji_hash] = EmojiEntry(
            normal_id=_variant_id(data, "normal"),
            enchanted_id=_variant_id(data, "enchanted"),
        )
    return catalog


def parse_item_index(raw) -> ItemIndex:
    if not isinstance(raw, dict):
        raise FetchError("itemHash.json is not a JSON object")

    return {name: value for name, value in raw.items() if isinstance(value, str)}


def get_json(url, config: MirrorConfig):
    try:
        resp = requests.get(url, **config.requests_kwargs())
        resp.raise_for_status()
        return resp.json()
    except requests.RequestException as e:
        # JSON decode errors are RequestExceptions too (requests >= 2.27)
        raise FetchError(f"Could not fetch {url}: {e}") from e
    except ValueError as e:
        raise FetchError(f"Malformed JSON from {url}: {e}") from e


def fetch_catalog(config: MirrorConfig) -> tuple[CatalogDocument, ItemIndex]:
    """Fetch both documents concurrently; either failing fails the whole fetch."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        emojis_future = executor.submit(get_json, config.emojis_url, config)
        items_future = executor.submit(get_json, config.item_hash_url, config)
        emojis_raw = emojis_future.result()
        items_raw = items_future.result()

    catalog = parse_catalog(emojis_raw)
    item_index = parse_item_index(items_raw)
    print("✅ Successfully fetched emojis.json and itemHash.json")
    return catalog, item_index
