"""Heading scanning and section extraction for template bodies."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Dict
from typing import Iterator

from .blocks import MARKDOWN_TAG
from .blocks import extract_fenced_block
from .blocks import extract_json_block
from .fence import FenceState
from .fence import fence_states

logger = logging.getLogger(__name__)


class HeadingLevel(str, Enum):
    SECTION = "## "
    SUBSECTION = "### "

    @property
    def lowercase_names(self) -> bool:
        # Subsection names are skill/agent identifiers and keep their case.
        return self is HeadingLevel.SECTION


@dataclass(frozen=True)
class SectionBoundary:
    name: str
    start: int
    heading_length: int

    @property
    def content_start(self) -> int:
        return self.start + self.heading_length


@dataclass
class ExtractedSections:
    claude_md: str = ""
    hooks: Any = field(default_factory=dict)
    skills: Dict[str, str] = field(default_factory=dict)
    agents: Dict[str, str] = field(default_factory=dict)
    mcp_servers: Any = field(default_factory=dict)


def find_headings(text: str, level: HeadingLevel) -> list[SectionBoundary]:
    """Locate headings of ``level`` outside fenced blocks, in source order.

    Offsets index into ``text`` as split on ``\\n``.
    """
    lines = text.split("\n")
    boundaries: list[SectionBoundary] = []
    pos = 0
    for line, state in zip(lines, fence_states(lines)):
        if state is FenceState.OUTSIDE:
            name = _heading_name(line, level)
            if name is not None:
                boundaries.append(SectionBoundary(name=name, start=pos, heading_length=len(line)))
        pos += len(line) + 1
    return boundaries


def _heading_name(line: str, level: HeadingLevel) -> str | None:
    trimmed = line.strip()
    if not trimmed.startswith(level.value):
        return None
    name = trimmed[len(level.value) :].strip()
    if not name:
        return None
    return name.lower() if level.lowercase_names else name


def iter_spans(text: str, boundaries: list[SectionBoundary]) -> Iterator[tuple[SectionBoundary, str]]:
    """Yield ``(boundary, trimmed content)`` for every boundary."""
    for idx, boundary in enumerate(boundaries):
        end = boundaries[idx + 1].start if idx + 1 < len(boundaries) else len(text)
        yield boundary, text[boundary.content_start : end].strip()


def extract_sections(body: str) -> ExtractedSections:
    sections = ExtractedSections()
    for boundary, content in iter_spans(body, find_headings(body, HeadingLevel.SECTION)):
        if boundary.name == "claude_md":
            sections.claude_md = content
        elif boundary.name in ("hooks", "mcp_servers"):
            value = extract_json_block(content)
            setattr(sections, boundary.name, {} if value is None else value)
        elif boundary.name in ("skills", "agents"):
            setattr(sections, boundary.name, extract_named_subsections(content))
        else:
            logger.debug("Skipping unknown section %r", boundary.name)
    return sections


def extract_named_subsections(content: str) -> dict[str, str]:
    """Map every ``###`` heading in ``content`` to its entry text.

    The entry text is the first ```markdown block of the subsection when one
    exists, otherwise the whole subsection. Repeated names keep the last entry.
    """
    entries: dict[str, str] = {}
    for boundary, text in iter_spans(content, find_headings(content, HeadingLevel.SUBSECTION)):
        block = extract_fenced_block(text, MARKDOWN_TAG)
        entries[boundary.name] = block.strip() if block is not None else text
    return entries
