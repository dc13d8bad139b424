import textwrap
from pathlib import Path

import pytest

SAMPLE_TEMPLATE = textwrap.dedent(
    """\
    ---
    id: web-app
    name: "Web App"
    description: Frontend project with lint hooks
    version: 2
    detection:
      files_any:
        - package.json
        - 'vite.config.ts'
      min_files: 3
    tags:
      - web
      - typescript
    ---
    ## claude_md
    # Web App

    Use `npm test` before pushing.

    ## hooks
    ```json
    {"PostToolUse": [{"matcher": "Edit", "hooks": []}]}
    ```

    ## skills
    ### lint
    ```markdown
    Run the linter and fix what it reports.
    ```

    ### Deploy-Check
    Check the deploy preview manually.

    ## agents
    ### reviewer
    ```markdown
    Review the diff.
    ```

    ## mcp_servers
    ```json
    {"github": {"command": "gh-mcp"}}
    ```
    """
)

SAMPLE_INDEX = textwrap.dedent(
    """\
    # Templates

    | ID | Name | Description | File |
    |----|------|-------------|------|
    | web-app | Web App | Frontend project | web-app.md |
    | missing | Missing | Listed without a file | missing.md |
    """
)


@pytest.fixture()
def sample_template() -> str:
    return SAMPLE_TEMPLATE


@pytest.fixture()
def templates_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "_index.md").write_text(SAMPLE_INDEX, encoding="utf-8")
    (directory / "web-app.md").write_text(SAMPLE_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("AGENT_RIG_CONFIG", str(tmp_path / "no-config.yaml"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
