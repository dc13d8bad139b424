"""Template parsing: front matter, typed sections and the template catalog."""

from .document import TemplateDocument, parse_template, parse_template_text
from .index import IndexEntry, parse_index_text
from .registry import (
    TemplateLoadError,
    TemplateRegistry,
    bundled_templates_dir,
    find_template,
    list_templates,
)

__all__ = [
    "TemplateDocument",
    "parse_template",
    "parse_template_text",
    "IndexEntry",
    "parse_index_text",
    "TemplateLoadError",
    "TemplateRegistry",
    "bundled_templates_dir",
    "find_template",
    "list_templates",
]
