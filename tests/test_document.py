from pathlib import Path

from agent_rig.templates import TemplateDocument
from agent_rig.templates import parse_template
from agent_rig.templates import parse_template_text


def test_parse_full_template(sample_template: str) -> None:
    document = parse_template_text(sample_template)
    assert document.meta == {
        "id": "web-app",
        "name": "Web App",
        "description": "Frontend project with lint hooks",
        "version": 2,
        "detection": {"files_any": ["package.json", "vite.config.ts"], "min_files": 3},
        "tags": ["web", "typescript"],
    }
    assert document.template_id == "web-app"
    assert document.claude_md == "# Web App\n\nUse `npm test` before pushing."
    assert document.hooks == {"PostToolUse": [{"matcher": "Edit", "hooks": []}]}
    assert document.skills == {
        "lint": "Run the linter and fix what it reports.",
        "Deploy-Check": "Check the deploy preview manually.",
    }
    assert document.agents == {"reviewer": "Review the diff."}
    assert document.mcp_servers == {"github": {"command": "gh-mcp"}}


def test_metadata_only_template() -> None:
    document = parse_template_text("---\nid: foo\nversion: 2\n---\n")
    assert document.meta == {"id": "foo", "version": 2}
    assert document == TemplateDocument(meta={"id": "foo", "version": 2})


def test_no_front_matter_parses_body() -> None:
    document = parse_template_text("## claude_md\nHello")
    assert document.meta == {}
    assert document.claude_md == "Hello"


def test_empty_text_yields_defaults() -> None:
    document = parse_template_text("")
    assert document == TemplateDocument()
    assert document.template_id is None


def test_parsing_is_repeatable(sample_template: str) -> None:
    assert parse_template_text(sample_template) == parse_template_text(sample_template)


def test_to_dict(sample_template: str) -> None:
    data = parse_template_text(sample_template).to_dict()
    assert list(data) == ["meta", "claude_md", "hooks", "skills", "agents", "mcp_servers"]
    assert data["agents"] == {"reviewer": "Review the diff."}


def test_parse_template_reads_file(tmp_path: Path, sample_template: str) -> None:
    path = tmp_path / "web.md"
    path.write_text(sample_template, encoding="utf-8")
    assert parse_template(path) == parse_template_text(sample_template)


def test_pathological_template_does_not_raise() -> None:
    text = (
        "---\nversion: " + "9" * 5000 + "\n---\n"
        "## hooks\n```json\n" + "{\"a\":" * 50_000 + "1" + "}" * 50_000 + "\n```\n"
        "## claude_md\n" + "```\n" * 3 + "## agents\n### never\nhidden"
    )
    document = parse_template_text(text)
    assert document.meta == {"version": "9" * 5000}
    assert document.hooks == {}
    assert document.agents == {}
