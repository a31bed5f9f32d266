from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from django.conf import settings

SUPPORTED_EXTENSIONS = ("gif", "png", "jpg", "jpeg", "webp", "apng", "svg")

CONTENT_TYPE_EXTENSIONS = {
    "image/gif": "gif",
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/svg+xml": "svg",
    "image/apng": "apng",
}


def sanitize_name(item_name: str) -> str:
    """Item names may be namespaced (``category:item``); colons become hyphens."""
    return item_name.replace(":", "-")


def is_safe_name(sanitized_name: str) -> bool:
    """A plain file stem that stays inside the emoji directory."""
    if sanitized_name in ("", ".", ".."):
        return False
    return not any(c in sanitized_name for c in ("/", "\\", "\0"))


@dataclass(frozen=True)
class MirrorConfig:
    emoji_dir: Path
    emojis_url: str
    item_hash_url: str
    cdn_url_template: str
    proxy_host: str
    proxy_port: int
    timeout_ms: int
    download_workers: int = 16

    @classmethod
    def from_settings(cls) -> MirrorConfig:
        return cls(
            emoji_dir=Path(settings.EMOJI_DIR),
            emojis_url=settings.EMOJIS_URL,
            item_hash_url=settings.ITEM_HASH_URL,
            cdn_url_template=settings.CDN_URL_TEMPLATE,
            proxy_host=settings.PROXY,
            proxy_port=settings.PROXY_PORT,
            timeout_ms=settings.TIMEOUT,
            download_workers=settings.DOWNLOAD_WORKERS,
        )

    @property
    def proxy_url(self) -> str:
        return f"http://{self.proxy_host}:{self.proxy_port}"

    def requests_kwargs(self) -> dict:
        proxy = self.proxy_url
        return {
            "proxies": {"http": proxy, "https": proxy},
            "timeout": self.timeout_ms / 1000,
        }

    def asset_url(self, asset_id: str) -> str:
        return self.cdn_url_template.format(asset_id=asset_id)
