"""Extraction of language-tagged fenced blocks embedded in section text."""
from __future__ import annotations

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

JSON_TAG = "json"
MARKDOWN_TAG = "markdown"


def _block_pattern(tag: str) -> re.Pattern[str]:
    return re.compile(r"```" + re.escape(tag) + r"\s*\n(.*?)\n```", re.DOTALL)


def extract_fenced_block(content: str, tag: str) -> str | None:
    """Return the interior of the first ```<tag> block in ``content``, or None."""
    match = _block_pattern(tag).search(content)
    if match is None:
        return None
    return match.group(1)


def extract_json_block(content: str) -> Any | None:
    """Parse the first ```json block; None when absent, invalid or too deeply nested."""
    raw = extract_fenced_block(content, JSON_TAG)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as exc:
        logger.debug("Ignoring invalid JSON block: %s", exc)
        return None
