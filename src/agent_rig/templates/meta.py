"""Restricted YAML parsing for template front matter.

Only this subset is understood::

    key: value          scalar, quotes stripped, all-digit values become int
    key:                opens a nested block at greater indentation, holding
      - item            either a list of strings
      child: value      or a one level mapping
      child:            whose entries may open a list of strings
        - item

Blank lines and ``#`` comments are skipped. Anything else is dropped,
including a list item inside a mapping block, a key inside a list block and
indented lines with no open block. The parser never raises.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any
from typing import Dict
from typing import List
from typing import Union

logger = logging.getLogger(__name__)

Scalar = Union[str, int]
MetaValue = Union[Scalar, List[str], Dict[str, Union[Scalar, List[str]]]]

# Blocks opened at this depth hold list items only.
MAX_DEPTH = 2

_KEY_RE = re.compile(r"(?P<key>[^:\s][^:]*?)\s*:(?P<value>.*)")
_QUOTE_RE = re.compile(r"^[\"']|[\"']$")
_INT_RE = re.compile(r"[0-9]+")


@dataclass
class _Frame:
    """An open block: ``key`` inside ``owner``, entered from a line at ``indent``.

    ``container`` stays ``None`` until the first child line decides whether
    the block is a list or a mapping.
    """

    key: str | None
    container: dict[str, Any] | list[str] | None
    owner: dict[str, Any] | None
    indent: int

    def mapping(self) -> dict[str, Any] | None:
        if self.container is None:
            self.container = self.owner[self.key]
        return self.container if isinstance(self.container, dict) else None

    def sequence(self) -> list[str] | None:
        if self.container is None:
            self.container = []
            self.owner[self.key] = self.container
        return self.container if isinstance(self.container, list) else None


def strip_quotes(value: str) -> str:
    return _QUOTE_RE.sub("", value)


def coerce_scalar(value: str) -> Scalar:
    value = strip_quotes(value)
    if _INT_RE.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # Past the interpreter's digit limit for int().
            logger.debug("Keeping oversized integer as text (%d digits)", len(value))
    return value


def parse_metadata(text: str) -> dict[str, MetaValue]:
    result: dict[str, Any] = {}
    if not text.strip():
        return result

    stack = [_Frame(key=None, container=result, owner=None, indent=-1)]
    for lineno, line in enumerate(text.split("\n"), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        indent = len(line) - len(line.lstrip())
        while len(stack) > 1 and indent <= stack[-1].indent:
            stack.pop()
        if not _apply_line(stack, trimmed, indent):
            logger.debug("Dropped front matter line %d: %r", lineno, line)
    return result


def _apply_line(stack: list[_Frame], trimmed: str, indent: int) -> bool:
    frame = stack[-1]
    if frame.key is None and indent > 0:
        return False

    if trimmed.startswith("- "):
        items = frame.sequence()
        if items is None:
            return False
        items.append(strip_quotes(trimmed[2:].strip()))
        return True

    match = _KEY_RE.fullmatch(trimmed)
    if match is None:
        return False
    entries = frame.mapping()
    if entries is None:
        return False

    key = match.group("key").strip()
    value = match.group("value").strip()
    if value:
        entries[key] = coerce_scalar(value)
    else:
        _open_block(stack, entries, key, indent)
    return True


def _open_block(stack: list[_Frame], owner: dict[str, Any], key: str, indent: int) -> None:
    if len(stack) >= MAX_DEPTH:
        owner[key] = []
        stack.append(_Frame(key=key, container=owner[key], owner=owner, indent=indent))
        return
    owner[key] = {}
    stack.append(_Frame(key=key, container=None, owner=owner, indent=indent))
