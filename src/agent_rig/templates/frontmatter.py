"""Front matter splitting for template documents."""
from __future__ import annotations

from dataclasses import dataclass

DELIMITER = "---"


@dataclass(frozen=True)
class FrontMatterSplit:
    metadata_text: str
    body: str

    @classmethod
    def without_metadata(cls, text: str) -> "FrontMatterSplit":
        return cls(metadata_text="", body=text)


def _is_delimiter(line: str) -> bool:
    return line.strip() == DELIMITER


def split_front_matter(text: str) -> FrontMatterSplit:
    """Separate the ``---`` delimited metadata block from the body.

    Missing or unterminated front matter leaves ``text`` untouched as the
    body, opening delimiter included.
    """
    opening, sep, rest = text.partition("\n")
    if not _is_delimiter(opening):
        return FrontMatterSplit.without_metadata(text)
    lines = rest.split("\n") if sep else []
    closing = next((idx for idx, line in enumerate(lines) if _is_delimiter(line)), None)
    if closing is None:
        return FrontMatterSplit.without_metadata(text)
    return FrontMatterSplit(
        metadata_text="\n".join(lines[:closing]),
        body="\n".join(lines[closing + 1 :]),
    )
