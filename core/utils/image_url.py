"""
Image URL normalization for member/game pictures.

Admins paste whatever they have: a full URL, an Imgur page link, a bare Imgur
id, a Discord CDN link copied without scheme. The public API hands browsers
something they can load.
"""

import re
from urllib.parse import urlparse

from core.domain.constants import IMGUR_DIRECT_HOST, IMGUR_DEFAULT_EXT, PLACEHOLDER_IMAGE

# Bare Imgur id, e.g. "aBc12De"
_IMGUR_ID_RE = re.compile(r"^[a-zA-Z0-9]{5,10}$")


def is_absolute_url(url: str) -> bool:
    parsed = urlparse(url)
    if parsed.scheme in ("data", "blob"):
        return True
    return bool(parsed.scheme and parsed.netloc)


def _imgur_direct(url: str) -> str:
    imgur_id = url.rstrip("/").split("/")[-1].split(".")[0]
    return f"https://{IMGUR_DIRECT_HOST}/{imgur_id}.{IMGUR_DEFAULT_EXT}"


def normalize_image_url(url: str) -> str:
    """
    Best-effort fix-up of an image reference. Rules are applied in order:

    1. empty stays empty
    2. absolute URLs are returned untouched
    3. bare 5-10 char alphanumeric id -> https://i.imgur.com/<id>.jpg
    4. imgur.com link without scheme -> https:// prepended
    5. imgur gallery/album/page link -> https://i.imgur.com/<last segment>.jpg
    6. discord CDN link without scheme -> https:// prepended
    7. anything else (e.g. site-relative "/assets/x.png") is returned as is
    """
    if not url:
        return ""
    url = url.strip()

    if is_absolute_url(url):
        return url

    if _IMGUR_ID_RE.match(url):
        return f"https://{IMGUR_DIRECT_HOST}/{url}.{IMGUR_DEFAULT_EXT}"

    if "imgur.com" in url and not url.startswith("http"):
        return f"https://{url}"

    if "imgur.com/" in url:
        if "/gallery/" in url or "/a/" in url:
            return _imgur_direct(url)
        if f"{IMGUR_DIRECT_HOST}/" not in url:
            return _imgur_direct(url)

    if "discord" in url and "cdn" in url and not url.startswith("http"):
        return f"https://{url}"

    return url


def image_or_placeholder(url: str) -> str:
    return normalize_image_url(url) or PLACEHOLDER_IMAGE
