"""Parsing of the ``_index.md`` template catalog table."""
from __future__ import annotations

from dataclasses import dataclass

INDEX_FILE = "_index.md"


@dataclass(frozen=True)
class IndexEntry:
    id: str
    name: str
    description: str
    file: str


def _split_row(line: str) -> list[str]:
    cells = [cell.strip() for cell in line.split("|")]
    while cells and not cells[0]:
        cells.pop(0)
    while cells and not cells[-1]:
        cells.pop()
    return cells


def parse_index_text(text: str) -> list[IndexEntry]:
    """Read catalog rows from a markdown table.

    Rows count only after the ``| ID | ...`` header row. Separator rows and
    rows with fewer than four cells are skipped.
    """
    entries: list[IndexEntry] = []
    in_table = False
    for line in text.split("\n"):
        trimmed = line.strip()
        if not trimmed.startswith("|"):
            continue
        cells = _split_row(trimmed)
        if not cells:
            continue
        if cells[0].lower() == "id":
            in_table = True
            continue
        if cells[0].startswith("-") or not in_table or len(cells) < 4:
            continue
        entries.append(IndexEntry(id=cells[0], name=cells[1], description=cells[2], file=cells[3]))
    return entries
