from pathlib import Path

import requests

from emojicache.config import CONTENT_TYPE_EXTENSIONS, MirrorConfig
from emojicache.errors import DownloadError, UnknownContentType
from emojicache.resolver import ResolvedTarget


def extension_for(content_type):
    mime = (content_type or "").split(";")[0].strip().lower()
    ext = CONTENT_TYPE_EXTENSIONS.get(mime)
    if ext is None:
        raise UnknownContentType(content_type)
    return ext


def fetch_asset(target: ResolvedTarget, config: MirrorConfig) -> Path:
    url = config.asset_url(target.asset_id)
    try:
        resp = requests.get(url, **config.requests_kwargs())
        resp.raise_for_status()
    except requests.RequestException as e:
        raise DownloadError(f"Could not fetch {url}: {e}") from e

    ext = extension_for(resp.headers.get("Content-Type"))

    # resolver already filtered out existing names, so nothing is overwritten
    dest_path = config.emoji_dir / f"{target.sanitized_name}.{ext}"
    if dest_path.resolve().parent != config.emoji_dir.resolve():
        raise DownloadError(
            f"Refusing to write outside {config.emoji_dir}: {dest_path}"
        )
    try:
        with open(dest_path, "wb") as f:
            f.write(resp.content)
    except OSError as e:
        raise DownloadError(f"Could not write {dest_path}: {e}") from e

    return dest_path


def download_asset(target: ResolvedTarget, config: MirrorConfig) -> bool:
    """Download one emoji; never raises, so siblings are unaffected."""
    try:
        dest_path = fetch_asset(target, config)
    except UnknownContentType as e:
        print(f"⚠️  Unknown content-type for {target.item_name}: {e.content_type}")
        return False
    except DownloadError as e:
        print(f"❌ Failed to download emoji for {target.item_name}: {e}")
        return False

    print(f"✅ Downloaded: {target.asset_id} ➤ {dest_path.name}")
    return True
