"""
Rule-driven extraction pipeline.

A provider describes a page as an ordered table of ``Rule`` objects. Each
rule pairs an XPath selector with a pure handler that turns one matching
node into candidate field values (or into a ``ResolutionRequest``). The
pipeline runs in two phases:

1. Traversal: every rule is evaluated against the document, candidates are
   collected per field and folded with ``merge_field`` in priority order, so
   the first non-empty value wins. Seeded record values only survive when no
   rule produced a non-empty candidate.
2. Resolution: requests emitted during traversal are fetched with a cloned
   document source and patch the record. Failures here never fail the call.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .document import Document, DocumentSource, FetchResult, Node
from .errors import DecodeError, FetchError

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 100


@dataclass(frozen=True)
class ResolutionRequest:
    """Deferred sub-fetch emitted by a handler during traversal."""

    url: str
    apply: Callable[[Any, FetchResult], None]
    description: str = ""


HandlerResult = Union[Mapping[str, Any], ResolutionRequest, None]
Handler = Callable[[Node], HandlerResult]


@dataclass(frozen=True)
class Rule:
    name: str
    selector: str
    handler: Handler
    priority: int = DEFAULT_PRIORITY
    field_priority: Mapping[str, int] = field(default_factory=dict)

    def priority_for(self, field_name: str) -> int:
        return self.field_priority.get(field_name, self.priority)


@dataclass
class Extraction:
    """Outcome of the traversal phase, before it touches the record."""

    candidates: Dict[str, List[Tuple[int, int, Any]]] = field(default_factory=lambda: defaultdict(list))
    requests: List[ResolutionRequest] = field(default_factory=list)
    _sequence: int = 0

    def add(self, field_name: str, priority: int, value: Any) -> None:
        self.candidates[field_name].append((priority, self._sequence, value))
        self._sequence += 1

    def values(self, accumulate: Sequence[str] = ()) -> Dict[str, Any]:
        """Fold every field's candidates into its winning value.

        Fields named in ``accumulate`` are list fields whose candidates are
        concatenated in priority order instead of competing.
        """

        merged: Dict[str, Any] = {}
        for field_name, entries in self.candidates.items():
            ordered = [value for _, _, value in sorted(entries, key=lambda entry: (entry[0], entry[1]))]
            if field_name in accumulate:
                current: Any = [item for value in ordered for item in (value or [])]
            else:
                current = None
                for value in ordered:
                    current = merge_field(current, value)
            if not is_empty(current):
                merged[field_name] = current
        return merged


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def merge_field(current: Any, candidate: Any) -> Any:
    """First non-empty value wins; later candidates never overwrite it."""

    if is_empty(current):
        return candidate
    return current


class ExtractionPipeline:
    def __init__(self, rules: Sequence[Rule], *, accumulate: Sequence[str] = ()) -> None:
        self.rules: Tuple[Rule, ...] = tuple(rules)
        self.accumulate: Tuple[str, ...] = tuple(accumulate)

    def extract(self, document: Document) -> Extraction:
        extraction = Extraction()
        for rule in self.rules:
            for node in document.select(rule.selector):
                try:
                    result = rule.handler(node)
                except (DecodeError, ValueError) as exc:
                    logger.debug("[pipeline] rule %s skipped a node: %s", rule.name, exc)
                    continue

                if result is None:
                    continue
                if isinstance(result, ResolutionRequest):
                    extraction.requests.append(result)
                    continue
                for field_name, value in result.items():
                    extraction.add(field_name, rule.priority_for(field_name), value)
        return extraction

    def apply(self, record: Any, extraction: Extraction) -> None:
        for field_name, value in extraction.values(self.accumulate).items():
            if not hasattr(record, field_name):
                raise AttributeError(
                    f"{type(record).__name__} has no field named {field_name!r}"
                )
            setattr(record, field_name, value)

    def resolve(self, record: Any, requests: Sequence[ResolutionRequest], source: DocumentSource) -> None:
        for request in requests:
            nested = source.clone()
            try:
                response = nested.fetch_raw(request.url)
            except FetchError as exc:
                logger.warning(
                    "[pipeline] nested fetch failed for %s: %s", request.description or request.url, exc
                )
                continue
            try:
                request.apply(record, response)
            except (DecodeError, ValueError) as exc:
                logger.warning(
                    "[pipeline] nested document rejected for %s: %s", request.description or request.url, exc
                )

    def run(self, document: Document, record: Any, source: Optional[DocumentSource] = None) -> Any:
        extraction = self.extract(document)
        self.apply(record, extraction)
        if extraction.requests:
            self.resolve(record, extraction.requests, source or DocumentSource())
        return record
