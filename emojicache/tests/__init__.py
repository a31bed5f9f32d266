from unittest import mock

import requests

from emojicache.config import MirrorConfig

EMOJIS_URL = "https://example.test/v3/emojis.json"
ITEM_HASH_URL = "https://example.test/v3/itemHash.json"
CDN_URL_TEMPLATE = "https://cdn.example.test/emojis/{asset_id}"


def make_config(emoji_dir, **overrides):
    values = {
        "emoji_dir": emoji_dir,
        "emojis_url": EMOJIS_URL,
        "item_hash_url": ITEM_HASH_URL,
        "cdn_url_template": CDN_URL_TEMPLATE,
        "proxy_host": "10.0.0.1",
        "proxy_port": 3128,
        "timeout_ms": 2500,
        "download_workers": 4,
    }
    values.update(overrides)
    return MirrorConfig(**values)


def fake_response(json_data=None, content=b"", content_type=None, status=200):
    resp = mock.Mock()
    resp.status_code = status
    resp.content = content
    resp.headers = {"Content-Type": content_type} if content_type else {}
    resp.json.return_value = json_data
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        resp.raise_for_status.return_value = None
    return resp


def fake_remote(emojis, item_hash, assets=None):
    """
    side_effect for requests.get that serves the two catalog documents and
    CDN assets keyed by asset id: {"123": (b"bytes", "image/png")}.
    A value that is an exception instance is raised instead.
    """
    assets = assets or {}

    def _get(url, **kwargs):
        for doc_url, doc in ((EMOJIS_URL, emojis), (ITEM_HASH_URL, item_hash)):
            if url != doc_url:
                continue
            if isinstance(doc, Exception):
                raise doc
            return fake_response(doc)

        asset_id = url.rsplit("/", 1)[-1]
        asset = assets.get(asset_id)
        if asset is None:
            return fake_response(status=404)
        if isinstance(asset, Exception):
            raise asset
        content, content_type = asset
        return fake_response(content=content, content_type=content_type)

    return _get
