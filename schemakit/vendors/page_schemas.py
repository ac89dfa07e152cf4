"""Fetch live pages and pull out their JSON-LD blocks."""

import json
import logging
from typing import Any, Iterable, List, Optional

import requests
from bs4 import BeautifulSoup

from schemakit.core.config import Settings, get_settings
from schemakit.errors import PageFetchError

logger = logging.getLogger(__name__)
_SESSION = requests.Session()

JSON_LD_TYPE = "application/ld+json"


def extract_schema_blocks(html: str) -> List[Any]:
    """Return the parsed JSON of every JSON-LD script tag in ``html``."""
    soup = BeautifulSoup(html or "", "html.parser")
    blocks: List[Any] = []
    for index, tag in enumerate(soup.find_all("script", type=JSON_LD_TYPE)):
        text = tag.string or tag.get_text() or ""
        if not text.strip():
            continue
        try:
            blocks.append(json.loads(text))
        except json.JSONDecodeError as exc:
            logger.warning("Skipping invalid JSON-LD block #%d: %s", index, exc)
    return blocks


def schema_types(blocks: Iterable[Any]) -> List[str]:
    """List ``@type`` values in document order, descending into lists and ``@graph``."""
    found: List[str] = []

    def _walk(node: Any) -> None:
        if isinstance(node, list):
            for child in node:
                _walk(child)
            return
        if not isinstance(node, dict):
            return
        node_type = node.get("@type")
        if isinstance(node_type, str):
            found.append(node_type)
        elif isinstance(node_type, list):
            found.extend(str(item) for item in node_type)
        if "@graph" in node:
            _walk(node["@graph"])

    for block in blocks:
        _walk(block)
    return found


def fetch_page_schemas(url: str, settings: Optional[Settings] = None) -> List[Any]:
    settings = settings or get_settings()
    try:
        response = _SESSION.get(
            url,
            timeout=settings.fetch_timeout,
            headers={"User-Agent": settings.user_agent},
            allow_redirects=True,
        )
    except requests.RequestException as exc:
        logger.error("Failed to fetch %s: %s", url, exc)
        raise PageFetchError(f"could not fetch {url}: {exc}") from exc

    if not 200 <= response.status_code < 300:
        logger.error("Fetching %s returned status %s", url, response.status_code)
        raise PageFetchError(f"{url} returned HTTP {response.status_code}")

    blocks = extract_schema_blocks(response.text)
    logger.info("Found %d JSON-LD blocks at %s", len(blocks), url)
    return blocks
