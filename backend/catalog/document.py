"""
Document source used by the providers.

``DocumentSource`` fetches pages over HTTP with httpx and parses them with
lxml so extractors can address nodes with XPath. Each top-level call works
on its own ``clone()`` so headers and transports never leak between calls.
"""
from __future__ import annotations

import codecs
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional
from urllib.parse import urljoin

import httpx
from lxml import etree, html

from .errors import FetchError
from .settings import ScraperSettings

logger = logging.getLogger(__name__)

_META_CHARSET_RE = re.compile(rb"""<meta[^>]+charset\s*=\s*["']?\s*([A-Za-z0-9_.:-]+)""", re.IGNORECASE)
_SNIFF_BYTES = 2048


def detect_encoding(content: bytes, declared: Optional[str] = None) -> str:
    """Pick the charset for ``content``: BOM, then header, then ``<meta>``, then UTF-8."""

    if content.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    match = _META_CHARSET_RE.search(content[:_SNIFF_BYTES])
    sniffed = match.group(1).decode("ascii") if match else None
    for candidate in (declared, sniffed):
        if not candidate:
            continue
        try:
            return codecs.lookup(candidate).name
        except LookupError:
            logger.debug("[fetch] ignoring unknown charset %r", candidate)
    return "utf-8"


@dataclass
class FetchResult:
    """Raw response body together with the final (post-redirect) URL.

    ``encoding`` is the charset declared by the response headers, if any.
    """

    url: str
    status_code: int
    content: bytes
    encoding: Optional[str] = None

    @property
    def text(self) -> str:
        return self.content.decode(detect_encoding(self.content, self.encoding), errors="replace")


class Node:
    """Thin wrapper around an lxml element bound to its document."""

    def __init__(self, element: html.HtmlElement, document: "Document") -> None:
        self.element = element
        self.document = document

    def __repr__(self) -> str:
        return f"<Node {self.element.tag}>"

    def _wrap(self, result: object) -> List["Node"]:
        if not isinstance(result, list):
            return []
        return [Node(item, self.document) for item in result if isinstance(item, etree._Element)]

    @property
    def text(self) -> str:
        return self.element.text_content()

    def select(self, path: str) -> List["Node"]:
        return self._wrap(self.element.xpath(path))

    def attr(self, name: str) -> str:
        return self.element.get(name) or ""

    def child_text(self, path: str) -> str:
        """Concatenated, trimmed text of every node matching ``path``."""
        return "".join(node.text for node in self.select(path)).strip()

    def child_texts(self, path: str) -> List[str]:
        return [node.text.strip() for node in self.select(path)]

    def child_attr(self, path: str, name: str) -> str:
        for node in self.select(path):
            value = node.attr(name)
            if value:
                return value
        return ""

    def text_lines(self) -> List[str]:
        """Direct text children of the element, split into trimmed lines."""

        chunks: List[str] = []
        if self.element.text:
            chunks.append(self.element.text)
        for child in self.element:
            if child.tail:
                chunks.append(child.tail)
        lines: List[str] = []
        for chunk in chunks:
            lines.extend(line.strip() for line in chunk.splitlines() if line.strip())
        return lines

    def absolute_url(self, ref: str) -> str:
        return self.document.absolute_url(ref)


class Document(Node):
    """Parsed HTML tree plus the URL it was fetched from."""

    def __init__(self, root: html.HtmlElement, url: str) -> None:
        super().__init__(root, self)
        self.url = url
        base_href = ""
        for base in root.xpath("//base[@href]"):
            base_href = base.get("href") or ""
            break
        self.base_url = urljoin(url, base_href) if base_href else url

    @classmethod
    def from_text(cls, content: str | bytes, url: str) -> "Document":
        if isinstance(content, bytes):
            content = content.decode(detect_encoding(content), errors="replace")
        if not content.strip():
            raise FetchError(f"Empty document returned for {url}", url=url)
        try:
            # Already decoded; declared charsets in the markup are ignored.
            parser = html.HTMLParser(encoding="utf-8")
            root = html.document_fromstring(content.encode("utf-8"), parser=parser)
        except (etree.ParserError, ValueError) as exc:
            raise FetchError(f"Unable to parse document from {url}: {exc}", url=url) from exc
        return cls(root, url)

    def absolute_url(self, ref: str) -> str:
        ref = (ref or "").strip()
        if not ref:
            return ""
        if ref.startswith("//"):
            scheme = self.base_url.split(":", 1)[0] or "https"
            return f"{scheme}:{ref}"
        return urljoin(self.base_url, ref)


class DocumentSource:
    """Fetches and parses documents; clone it once per top-level call."""

    def __init__(
        self,
        settings: Optional[ScraperSettings] = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.settings = settings or ScraperSettings()
        self.transport = transport
        self.headers: Dict[str, str] = {
            "User-Agent": self.settings.user_agent,
            "Accept-Language": self.settings.accept_language,
        }
        if headers:
            self.headers.update(headers)

    def clone(self) -> "DocumentSource":
        return DocumentSource(self.settings, headers=dict(self.headers), transport=self.transport)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            headers=self.headers,
            timeout=self.settings.timeout,
            follow_redirects=self.settings.follow_redirects,
            transport=self.transport,
        )

    def fetch_raw(self, url: str) -> FetchResult:
        logger.debug("[fetch] GET %s", url)
        try:
            with self._client() as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"{url} responded with HTTP {exc.response.status_code}",
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc

        return FetchResult(
            url=str(response.url),
            status_code=response.status_code,
            content=response.content,
            encoding=response.charset_encoding,
        )

    def fetch(self, url: str) -> Document:
        result = self.fetch_raw(url)
        return Document.from_text(result.text, result.url)
