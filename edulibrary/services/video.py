"""
Video URL normalization.

Maps video page URLs from the two supported providers to the URL their
inline player loads:

    https://youtu.be/<id>                    → https://www.youtube.com/embed/<id>
    https://www.youtube.com/watch?v=<id>     → https://www.youtube.com/embed/<id>
    https://www.youtube.com/shorts/<id>      → https://www.youtube.com/embed/<id>
    https://www.youtube.com/embed/<id>       → https://www.youtube.com/embed/<id>
    https://vimeo.com/<numeric id>           → https://player.vimeo.com/video/<id>
    https://player.vimeo.com/video/<id>      → https://player.vimeo.com/video/<id>

Nothing here raises: unknown hosts, missing ids and malformed strings all
come back as None (get_embed_url) or False (is_supported_video_url).
"""

import re
from enum import Enum
from typing import Optional
from urllib.parse import parse_qs, urlsplit

YOUTUBE_EMBED = "https://www.youtube.com/embed/{}"
VIMEO_EMBED = "https://player.vimeo.com/video/{}"

_YOUTUBE_ID = re.compile(r"^[A-Za-z0-9_-]+$")
_VIMEO_ID = re.compile(r"^\d+$")


class VideoProvider(str, Enum):
    YOUTUBE = "youtube"
    VIMEO = "vimeo"


# Short-link and canonical hosts per provider
_HOSTS = {
    "youtu.be": VideoProvider.YOUTUBE,
    "youtube.com": VideoProvider.YOUTUBE,
    "www.youtube.com": VideoProvider.YOUTUBE,
    "m.youtube.com": VideoProvider.YOUTUBE,
    "vimeo.com": VideoProvider.VIMEO,
    "www.vimeo.com": VideoProvider.VIMEO,
    "player.vimeo.com": VideoProvider.VIMEO,
}


def _split(url: Optional[str]):
    if not url or not isinstance(url, str):
        return None
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        # e.g. unbalanced brackets in an IPv6 netloc
        return None
    if not host:
        return None
    return host, parts


def detect_provider(url: Optional[str]) -> Optional[VideoProvider]:
    """Provider whose host matches `url`, or None."""
    split = _split(url)
    if split is None:
        return None
    host, _ = split
    return _HOSTS.get(host)


def is_supported_video_url(url: Optional[str]) -> bool:
    """True if the host belongs to a known provider, whether or not an id is present."""
    return detect_provider(url) is not None


def _path_segments(path: str):
    return [segment for segment in path.split("/") if segment]


def _youtube_id(host: str, parts) -> Optional[str]:
    segments = _path_segments(parts.path)
    if host == "youtu.be":
        candidate = segments[0] if segments else None
    elif parts.path.rstrip("/") == "/watch":
        candidate = (parse_qs(parts.query).get("v") or [None])[0]
    elif len(segments) >= 2 and segments[0] in ("embed", "shorts"):
        candidate = segments[1]
    else:
        candidate = None
    if candidate and _YOUTUBE_ID.match(candidate):
        return candidate
    return None


def _vimeo_id(host: str, parts) -> Optional[str]:
    segments = _path_segments(parts.path)
    if host == "player.vimeo.com":
        candidate = segments[1] if len(segments) >= 2 and segments[0] == "video" else None
    else:
        candidate = segments[0] if segments else None
    if candidate and _VIMEO_ID.match(candidate):
        return candidate
    return None


def get_embed_url(url: Optional[str]) -> Optional[str]:
    """
    Embeddable player URL for a YouTube or Vimeo page URL.

    Returns None for unknown hosts, URLs without a usable video id, and
    strings that do not parse as URLs.
    """
    split = _split(url)
    if split is None:
        return None
    host, parts = split
    provider = _HOSTS.get(host)

    if provider is VideoProvider.YOUTUBE:
        video_id = _youtube_id(host, parts)
        return YOUTUBE_EMBED.format(video_id) if video_id else None
    if provider is VideoProvider.VIMEO:
        video_id = _vimeo_id(host, parts)
        return VIMEO_EMBED.format(video_id) if video_id else None
    return None
