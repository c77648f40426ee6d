from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError as SchemaError

from rfp_gateway.core.errors import ResponseFormatError, ValidationError
from rfp_gateway.schemas.catalog import CatalogEntry
from rfp_gateway.schemas.responses import MatchResult, MatchStats
from rfp_gateway.services.catalog import catalog_skus, catalog_to_json
from rfp_gateway.services.llm_client import ChatLLM
from rfp_gateway.services.prompts import match_prompt

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\n?")
_FENCE_CLOSE = re.compile(r"\n?[ \t]*```$")


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markers wrapping a model reply."""
    cleaned = (text or "").strip()
    while True:
        stripped = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", cleaned, count=1), count=1).strip()
        if stripped == cleaned:
            return cleaned
        cleaned = stripped


def parse_match_reply(text: str, known_skus: frozenset[str]) -> list[MatchResult]:
    """
    Fence-strip -> JSON array -> validated MatchResults, best score first.
    Entries that break the schema or name an SKU outside the catalog are dropped.
    """
    cleaned = strip_code_fences(text)
    try:
        raw: Any = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Product match reply is not valid JSON: %s. First 400 chars: %r", e, cleaned[:400])
        raise ResponseFormatError(f"AI response was not valid JSON: {e.msg}") from e

    if not isinstance(raw, list):
        logger.error("Product match reply is %s, expected a JSON array", type(raw).__name__)
        raise ResponseFormatError("AI response was not a JSON array of matches")

    matches: list[MatchResult] = []
    for idx, item in enumerate(raw):
        try:
            match = MatchResult.model_validate(item)
        except SchemaError as e:
            logger.warning("Dropping match #%d: %s", idx, e.errors()[0].get("msg", "invalid entry"))
            continue
        if match.sku not in known_skus:
            logger.warning("Dropping match #%d: unknown SKU %r", idx, match.sku)
            continue
        matches.append(match)

    matches.sort(key=lambda m: m.match_score, reverse=True)
    return matches


def match_stats(matches: list[MatchResult]) -> MatchStats:
    if not matches:
        return MatchStats()
    scores = [m.match_score for m in matches]
    return MatchStats(
        excellent=sum(1 for s in scores if s >= 90),
        good=sum(1 for s in scores if 75 <= s < 90),
        average_score=int(round(sum(scores) / len(scores))),
    )


class ProductMatcher:
    """Matches RFP requirements against a fixed catalog via the LLM."""

    def __init__(self, llm: ChatLLM, catalog: tuple[CatalogEntry, ...]):
        self.llm = llm
        self.catalog = catalog
        self._skus = catalog_skus(catalog)
        self._catalog_json = catalog_to_json(catalog)

    def match(self, requirements: str, sensitivity: float = 0.7) -> list[MatchResult]:
        if not (requirements or "").strip():
            raise ValidationError("Requirements are required")

        logger.info("Processing product matching with sensitivity: %s", sensitivity)
        system, user = match_prompt(requirements, sensitivity, self._catalog_json)
        reply = self.llm.complete(system, user)

        matches = parse_match_reply(reply, self._skus)
        logger.info("Product matching completed, found %d matches", len(matches))
        return matches
