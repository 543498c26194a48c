"""
Minimal M3U8 reader used by the nested preview resolution.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import PlaylistError


@dataclass
class StreamVariant:
    bandwidth: int
    resolution: str
    uri: str


def _parse_attributes(line: str) -> dict[str, str]:
    _, _, payload = line.partition(":")
    attributes: dict[str, str] = {}
    key = []
    value = []
    in_key = True
    quoted = False
    for char in payload:
        if in_key:
            if char == "=":
                in_key = False
            else:
                key.append(char)
            continue
        if char == '"':
            quoted = not quoted
            continue
        if char == "," and not quoted:
            attributes["".join(key).strip()] = "".join(value)
            key, value, in_key = [], [], True
            continue
        value.append(char)
    if key:
        attributes["".join(key).strip()] = "".join(value)
    return attributes


def parse_master_playlist(content: str) -> List[StreamVariant]:
    """Return the variants listed by ``#EXT-X-STREAM-INF`` tags in order."""

    lines = [line.strip() for line in content.strip().splitlines()]
    variants: List[StreamVariant] = []

    for idx, line in enumerate(lines):
        if not line.startswith("#EXT-X-STREAM-INF"):
            continue

        attributes = _parse_attributes(line)
        try:
            bandwidth = int(attributes.get("BANDWIDTH", "0"))
        except ValueError:
            bandwidth = 0

        uri: Optional[str] = None
        for candidate in lines[idx + 1:]:
            if not candidate:
                continue
            if candidate.startswith("#"):
                if candidate.startswith("#EXT-X-STREAM-INF"):
                    break
                continue
            uri = candidate
            break
        if uri is None:
            continue

        variants.append(
            StreamVariant(
                bandwidth=bandwidth,
                resolution=attributes.get("RESOLUTION", ""),
                uri=uri,
            )
        )

    return variants


def parse_media_uri(content: str) -> Tuple[str, int]:
    """Pick the single media URI a playlist points at.

    Master playlists yield the highest-bandwidth variant (the first one on
    ties) together with its bandwidth. Media playlists yield their first
    segment URI and a bandwidth of ``0``.
    """

    if not content or not content.lstrip().startswith("#EXTM3U"):
        raise PlaylistError("Playlist does not start with #EXTM3U")

    variants = parse_master_playlist(content)
    if variants:
        best = variants[0]
        for variant in variants[1:]:
            if variant.bandwidth > best.bandwidth:
                best = variant
        return best.uri, best.bandwidth

    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            return line, 0

    raise PlaylistError("Playlist does not reference any media URI")
