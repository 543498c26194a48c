"""
HEYZO movie provider.
"""
from __future__ import annotations

import logging
import posixpath
import re
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from ..document import FetchResult, Node
from ..errors import DecodeError
from ..m3u8 import parse_media_uri
from ..models import MovieInfo
from ..parser import parse_date, parse_runtime, parse_score
from ..pipeline import ExtractionPipeline, ResolutionRequest, Rule
from ..scripts import decode_json, decode_json_island, json_str, search_group, substitute_tokens
from .base import MovieProvider

logger = logging.getLogger(__name__)

NAME = "HEYZO"
PRIORITY = 1000

MOVIE_URL = "https://www.heyzo.com/moviepages/{id}/index.html"
SAMPLE_URL = "https://www.heyzo.com/contents/{0}/{1}/{2}"

ID_RE = re.compile(r"^(?:heyzo-)?(\d+)$", re.IGNORECASE)
EMVIDEO_RE = re.compile(r'emvideo = "(.+?)";')
RUNTIME_ISLAND_RE = re.compile(r"o = (\{.+?});")
MOVIE_ID_RE = re.compile(r"movieId\s*=\s*'(\d+?)';")
SITE_ID_RE = re.compile(r"siteID\s*=\s*'(\d+?)';")
STREAM_TEMPLATE_RE = re.compile(r"stream\s*=\s*'(.+?)'\+siteID\+'(.+?)'\+movieId\+'(.+?)';")
SAMPLE_PATH_RE = re.compile(r"/sample/(\d+)/(\d+)/ts\.(.+?)\.m3u8")
SAMPLE_IMAGE_RE = re.compile(r'"(/contents/[^"]+/\d+?\.\w+?)"')

# Priorities: lower runs first. The details table and the runtime object are
# more precise than JSON-LD for the fields they share.
STRUCTURED = 10
TABLE = 5
HEADING = 20
META = 30


def _extract_json_ld(node: Node) -> Dict[str, Any]:
    data = decode_json(node.text)
    if not isinstance(data, dict):
        raise DecodeError("JSON-LD payload is not an object")

    cover = node.absolute_url(json_str(data, "image"))
    values: Dict[str, Any] = {
        "title": json_str(data, "name"),
        "summary": json_str(data, "description"),
        "cover_url": cover,
        "thumb_url": cover,
        "release_date": parse_date(json_str(data, "releasedEvent", "startDate")),
        "runtime": parse_runtime(json_str(data, "video", "duration")),
        "score": parse_score(json_str(data, "aggregateRating", "ratingValue")),
        "maker": json_str(data, "video", "provider"),
    }
    actor = json_str(data, "video", "actor")
    if actor:
        values["actors"] = [actor]
    return values


def _extract_heading(node: Node) -> Dict[str, Any]:
    words = node.text.split()
    return {"title": words[0]} if words else {}


def _extract_memo(node: Node) -> Dict[str, Any]:
    return {"summary": node.text.strip()}


def _extract_og_image(node: Node) -> Dict[str, Any]:
    cover = node.absolute_url(node.attr("content"))
    return {"cover_url": cover, "thumb_url": cover}


def _extract_details_row(node: Node) -> Optional[Dict[str, Any]]:
    label = node.child_text(".//td[1]")
    if label == "公開日":
        return {"release_date": parse_date(node.child_text(".//td[2]"))}
    if label == "出演":
        return {"actors": node.child_texts(".//td[2]/a/span")}
    if label == "シリーズ":
        return {"series": node.child_text(".//td[2]").strip("-").strip()}
    if label == "評価":
        return {"score": parse_score(node.child_text('.//span[@itemprop="ratingValue"]'))}
    return None


def _extract_tags(node: Node) -> Dict[str, Any]:
    return {"tags": node.child_texts(".//li/a")}


def _extract_inline_script(node: Node) -> Dict[str, Any]:
    text = node.text
    values: Dict[str, Any] = {}
    if "emvideo" in text:
        video = search_group(EMVIDEO_RE, text)
        if video:
            values["preview_video_url"] = node.absolute_url(video)
    if "o = {" in text:
        try:
            data = decode_json_island(RUNTIME_ISLAND_RE, text)
        except DecodeError as exc:
            logger.debug("[heyzo] runtime object skipped: %s", exc)
            data = None
        if data is not None:
            values["runtime"] = parse_runtime(json_str(data, "full"))
    return values


def _apply_sample_manifest(record: MovieInfo, response: FetchResult) -> None:
    record.preview_video_hls_url = response.url

    uri, _ = parse_media_uri(response.text)
    match = SAMPLE_PATH_RE.search(uri)
    if match:
        record.preview_video_url = SAMPLE_URL.format(*match.groups())
    else:
        logger.debug("[heyzo] manifest media URI %s does not match the sample layout", uri)


def _extract_player_script(node: Node) -> Optional[ResolutionRequest]:
    text = node.text
    if "movieId" not in text:
        return None

    movie_id = search_group(MOVIE_ID_RE, text)
    site_id = search_group(SITE_ID_RE, text)
    if not movie_id or not site_id:
        return None

    template = STREAM_TEMPLATE_RE.search(text)
    if not template:
        return None

    manifest_path = substitute_tokens(template, site_id=site_id, movie_id=movie_id)
    return ResolutionRequest(
        url=node.absolute_url(manifest_path),
        apply=_apply_sample_manifest,
        description=f"HEYZO sample manifest for movie {movie_id}",
    )


def _extract_sample_images(node: Node) -> Dict[str, Any]:
    return {
        "preview_images": [node.absolute_url(path) for path in SAMPLE_IMAGE_RE.findall(node.text)]
    }


MOVIE_RULES = (
    Rule("json-ld", '//script[@type="application/ld+json"]', _extract_json_ld, priority=STRUCTURED),
    Rule("heading", '//*[@id="movie"]/h1', _extract_heading, priority=HEADING),
    Rule("memo", '//p[@class="memo"]', _extract_memo, priority=HEADING),
    Rule("og-image", '//meta[@property="og:image"]', _extract_og_image, priority=META),
    Rule("details", '//table[@class="movieInfo"]//tr', _extract_details_row, priority=TABLE),
    Rule("tags", '//ul[@class="tag-keyword-list"]', _extract_tags, priority=HEADING),
    Rule("inline-script", '//script[@type="text/javascript"]', _extract_inline_script, priority=TABLE),
    Rule("player", '//*[@id="playerContainer"]/script', _extract_player_script),
    Rule("sample-images", '//div[@class="sample-images yoxview"]/script', _extract_sample_images),
)


class HeyzoProvider(MovieProvider):
    """Movie provider for heyzo.com pages."""

    name = NAME
    priority = PRIORITY

    pipeline = ExtractionPipeline(MOVIE_RULES, accumulate=("preview_images",))

    def normalize_id(self, raw_id: str) -> Optional[str]:
        match = ID_RE.match((raw_id or "").strip())
        if not match:
            return None
        return match.group(1)

    def parse_id_from_url(self, url: str) -> str:
        # Not validated against ID_RE: any /<id>/index.html layout is accepted.
        path = urlparse(url).path
        return posixpath.basename(posixpath.dirname(path))

    def movie_url(self, movie_id: str) -> str:
        return MOVIE_URL.format(id=movie_id.zfill(4))

    def get_movie_info_by_id(self, movie_id: str) -> MovieInfo:
        return self.get_movie_info_by_url(self.movie_url(movie_id))

    def get_movie_info_by_url(self, url: str) -> MovieInfo:
        movie_id = self.parse_id_from_url(url)
        info = MovieInfo(
            id=movie_id,
            number=f"HEYZO-{movie_id}",
            provider=self.name,
            homepage=url,
            maker="HEYZO",
        )
        return self.assemble(info, url, self.pipeline)
