class EmojiCacheError(Exception):
    pass


class FetchError(EmojiCacheError):
    """A catalog document could not be retrieved or decoded."""


class DownloadError(EmojiCacheError):
    """A single asset failed to download or be written."""


class UnknownContentType(DownloadError):
    def __init__(self, content_type):
        self.content_type = content_type
        super().__init__(f"Unknown content-type: {content_type}")


class ImageNotFound(EmojiCacheError):
    def __init__(self, item_name):
        self.item_name = item_name
        super().__init__(f"Image Not Found: {item_name}")
