"""
xslist.org actor provider.
"""
from __future__ import annotations

import logging
import posixpath
import re
from datetime import date
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus, urlparse

from ..document import Node
from ..models import ActorInfo, ActorSearchResult
from ..parser import parse_date, parse_int
from ..pipeline import ExtractionPipeline, Rule
from .base import ActorProvider, ActorSearcher

logger = logging.getLogger(__name__)

NAME = "xslist"
PRIORITY = 100

ACTOR_URL = "https://xslist.org/zh/model/{id}.html"
SEARCH_URL = "https://xslist.org/search?query={keyword}&lg=zh"

ID_RE = re.compile(r"^(?:xslist-)?(\d+)$", re.IGNORECASE)
DEBUT_RE = re.compile(r"^([\s\d]+)年([\s\d]+)月$")
NOT_APPLICABLE = "n/a"

# The itemprop spans are more reliable than the free-text profile lines.
MICRODATA = 10
PROFILE = 20


def _strip_extension(name: str) -> str:
    stem, ext = posixpath.splitext(name)
    return stem if ext else name


def parse_debut_date(value: str) -> Optional[date]:
    match = DEBUT_RE.match(value)
    if match:
        try:
            return date(parse_int(match.group(1)), parse_int(match.group(2)), 1)
        except ValueError:
            return None
    return parse_date(value)


def _profile_value(label: str, value: str) -> Optional[Dict[str, Any]]:
    if label == "出生":
        return {"birthday": parse_date(value)}
    if label == "三围":
        return {"measurements": value.replace(" ", "")}
    if label == "罩杯":
        return {"cup_size": value.removesuffix("Cup").strip()}
    if label == "出道日期":
        return {"debut_date": parse_debut_date(value)}
    if label == "血型":
        return {"blood_type": value}
    if label == "身高":
        return {"height": parse_int(value.rstrip("cm"))}
    if label == "国籍":
        return {"nationality": value}
    return None


def _extract_name(node: Node) -> Dict[str, Any]:
    return {"name": node.text.strip()}


def _extract_alias(node: Node) -> Dict[str, Any]:
    alias = node.text.strip()
    return {"aliases": [alias]} if alias else {}


def _extract_gallery_image(node: Node) -> Optional[Dict[str, Any]]:
    if node.attr("class") == "profile_img":
        return None  # low resolution
    if parse_int(node.attr("data-width")) == 0 or parse_int(node.attr("data-height")) == 0:
        return None
    href = node.absolute_url(node.attr("href"))
    return {"images": [href]} if href else None


def _extract_profile(node: Node) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for line in node.text_lines():
        label, sep, value = line.partition(":")
        if not sep:
            continue
        label, value = label.strip(), value.strip()
        if not value or value == NOT_APPLICABLE:
            continue
        mapped = _profile_value(label, value)
        if mapped:
            for key, item in mapped.items():
                values.setdefault(key, item)
    return values


def _extract_height(node: Node) -> Dict[str, Any]:
    return {"height": parse_int(node.text.strip().rstrip("cm"))}


def _extract_nationality(node: Node) -> Dict[str, Any]:
    return {"nationality": node.text.replace(NOT_APPLICABLE, "").strip()}


ACTOR_RULES = (
    Rule("name", '//*[@id="sss1"]/header/h1/span', _extract_name),
    Rule("aliases", '//*[@id="sss1"]/p/span', _extract_alias),
    Rule("gallery", '//*[@id="gallery"]/a', _extract_gallery_image),
    Rule("profile", '//*[@id="layout"]/div/p[1]', _extract_profile, priority=PROFILE),
    Rule("height", '//span[@itemprop="height"]', _extract_height, priority=MICRODATA),
    Rule("nationality", '//span[@itemprop="nationality"]', _extract_nationality, priority=MICRODATA),
)


class XsListProvider(ActorProvider, ActorSearcher):
    """Actor profiles and search from xslist.org."""

    name = NAME
    priority = PRIORITY

    pipeline = ExtractionPipeline(ACTOR_RULES, accumulate=("aliases", "images"))

    def normalize_id(self, raw_id: str) -> Optional[str]:
        match = ID_RE.match((raw_id or "").strip())
        if not match:
            return None
        return match.group(1)

    def parse_id_from_url(self, url: str) -> str:
        # Derived from the path only; never re-checked against ID_RE.
        return _strip_extension(posixpath.basename(urlparse(url).path))

    def actor_url(self, actor_id: str) -> str:
        return ACTOR_URL.format(id=actor_id)

    def get_actor_info_by_id(self, actor_id: str) -> ActorInfo:
        return self.get_actor_info_by_url(self.actor_url(actor_id))

    def get_actor_info_by_url(self, url: str) -> ActorInfo:
        info = ActorInfo(
            id=self.parse_id_from_url(url),
            provider=self.name,
            homepage=url,
        )
        return self.assemble(info, url, self.pipeline)

    def _search_result(self, node: Node) -> ActorSearchResult:
        homepage = ""
        actor_id = ""
        href = node.child_attr(".//h3/a", "href")
        if href:
            try:
                homepage = node.absolute_url(href)
                actor_id = self.parse_id_from_url(homepage)
            except ValueError as exc:
                logger.debug("[%s] search hit with unusable link %r: %s", self.name, href, exc)
                homepage = ""

        name = node.child_attr(".//h3/a", "title")
        _, sep, rest = name.partition("-")
        if sep:
            name = rest.strip()

        images: List[str] = []
        thumbnail = node.child_attr(".//div[1]/img", "src")
        if thumbnail:
            try:
                images.append(node.absolute_url(thumbnail))
            except ValueError as exc:
                logger.debug("[%s] search hit with unusable thumbnail %r: %s", self.name, thumbnail, exc)

        return ActorSearchResult(
            id=actor_id,
            name=name,
            provider=self.name,
            homepage=homepage,
            images=images,
        )

    def search_actor(self, keyword: str) -> List[ActorSearchResult]:
        url = SEARCH_URL.format(keyword=quote_plus(keyword))
        document = self.clone_source().fetch(url)
        results = [self._search_result(node) for node in document.select("//ul/li")]
        logger.info("[%s] search %r returned %d results", self.name, keyword, len(results))
        return results
