"""Assembly of parsed template documents."""
from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any
from typing import Dict

from .frontmatter import split_front_matter
from .meta import MetaValue
from .meta import parse_metadata
from .sections import extract_sections


@dataclass(frozen=True)
class TemplateDocument:
    meta: Dict[str, MetaValue] = field(default_factory=dict)
    claude_md: str = ""
    hooks: Any = field(default_factory=dict)
    skills: Dict[str, str] = field(default_factory=dict)
    agents: Dict[str, str] = field(default_factory=dict)
    mcp_servers: Any = field(default_factory=dict)

    @property
    def template_id(self) -> str | None:
        value = self.meta.get("id")
        return str(value) if value is not None else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta,
            "claude_md": self.claude_md,
            "hooks": self.hooks,
            "skills": dict(self.skills),
            "agents": dict(self.agents),
            "mcp_servers": self.mcp_servers,
        }


def parse_template_text(text: str) -> TemplateDocument:
    split = split_front_matter(text)
    sections = extract_sections(split.body)
    return TemplateDocument(
        meta=parse_metadata(split.metadata_text),
        claude_md=sections.claude_md,
        hooks=sections.hooks,
        skills=sections.skills,
        agents=sections.agents,
        mcp_servers=sections.mcp_servers,
    )


def parse_template(path: Path) -> TemplateDocument:
    """Read ``path`` as UTF-8 and parse it; read errors propagate."""
    return parse_template_text(path.read_text(encoding="utf-8"))
