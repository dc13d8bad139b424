"""Template lookup through the ``_index.md`` catalog."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .document import TemplateDocument
from .document import parse_template_text
from .index import INDEX_FILE
from .index import IndexEntry
from .index import parse_index_text

logger = logging.getLogger(__name__)

Reader = Callable[[Path], str]
FileLoader = Callable[[str], str]

_READ_ERRORS = (OSError, UnicodeDecodeError)


class TemplateLoadError(Exception):
    """A template listed in the catalog could not be read."""

    def __init__(self, path: Path | str, cause: Exception) -> None:
        super().__init__(f"Cannot read template file {path}: {cause}")
        self.path = path


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def bundled_templates_dir() -> Path:
    """Catalog shipped inside the package."""
    return Path(__file__).resolve().parent.parent / "bundled" / "templates"


def _first_match(entries: list[IndexEntry], template_id: str) -> IndexEntry | None:
    for entry in entries:
        if entry.id == template_id:
            return entry
    return None


def find_template(
    template_id: str,
    index_text: str | None,
    file_loader: FileLoader,
) -> TemplateDocument | None:
    """Resolve ``template_id`` through the catalog and parse its file.

    ``index_text`` is ``None`` when the catalog could not be read; that case
    and an unknown id both return ``None``. ``file_loader`` receives the
    entry's relative file name. A failure to read a listed file raises
    :class:`TemplateLoadError`.
    """
    if index_text is None:
        logger.warning("Template index unavailable, cannot resolve %r", template_id)
        return None
    entry = _first_match(parse_index_text(index_text), template_id)
    if entry is None:
        logger.info("Template %r is not listed in the index", template_id)
        return None
    try:
        text = file_loader(entry.file)
    except _READ_ERRORS as exc:
        raise TemplateLoadError(entry.file, exc) from exc
    return parse_template_text(text)


class TemplateRegistry:
    """Catalog-backed access to the templates stored in one directory."""

    def __init__(self, templates_dir: Path, reader: Reader = read_text) -> None:
        self.templates_dir = Path(templates_dir)
        self._reader = reader

    @property
    def index_path(self) -> Path:
        return self.templates_dir / INDEX_FILE

    def index_text(self) -> str | None:
        try:
            return self._reader(self.index_path)
        except _READ_ERRORS as exc:
            logger.warning("Cannot read template index %s: %s", self.index_path, exc)
            return None

    def entries(self) -> list[IndexEntry]:
        text = self.index_text()
        if text is None:
            return []
        return parse_index_text(text)

    def get_entry(self, template_id: str) -> IndexEntry | None:
        return _first_match(self.entries(), template_id)

    def path_for(self, entry: IndexEntry) -> Path:
        return self.templates_dir / entry.file

    def load(self, entry: IndexEntry) -> TemplateDocument:
        return parse_template_text(self._read_listed_file(entry.file))

    def _read_listed_file(self, file: str) -> str:
        path = self.templates_dir / file
        try:
            return self._reader(path)
        except _READ_ERRORS as exc:
            raise TemplateLoadError(path, exc) from exc

    def find(self, template_id: str) -> TemplateDocument | None:
        return find_template(template_id, self.index_text(), self._read_listed_file)


def list_templates(templates_dir: Path) -> list[IndexEntry]:
    return TemplateRegistry(templates_dir).entries()
