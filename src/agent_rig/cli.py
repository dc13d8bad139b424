"""agent-rig command line entry point."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import RigConfig
from .config import load_rig_config
from .templates import TemplateDocument
from .templates import TemplateLoadError
from .templates import TemplateRegistry

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agent-rig", description="Inspect project-setup templates for agentic coding")
    parser.add_argument("--version", action="version", version=f"agent-rig v{__version__}")
    parser.add_argument("--config", type=Path, default=None, help="Path to agent-rig config YAML")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    templates_cmd = sub.add_parser("templates", help="List templates in the catalog")
    templates_cmd.add_argument("--templates-dir", type=Path, default=None, help="Directory holding _index.md")
    templates_cmd.add_argument("--installed", action="store_true", help="List the catalog installed for the coding agent instead")

    show_cmd = sub.add_parser("show", help="Parse a template and print its contents")
    show_cmd.add_argument("template_id", help="Template id from the catalog")
    show_cmd.add_argument("--templates-dir", type=Path, default=None, help="Directory holding _index.md")
    show_cmd.add_argument("--json", action="store_true", help="Print the parsed document as JSON")

    return parser


def configure_logging(level_name: str | None) -> None:
    level_name = level_name or os.getenv("LOG_LEVEL", "WARNING")
    logging.basicConfig(level=getattr(logging, level_name.upper(), logging.WARNING), format=LOG_FORMAT)


def _registry(args: argparse.Namespace, config: RigConfig) -> TemplateRegistry:
    if getattr(args, "installed", False):
        return TemplateRegistry(config.installed_templates_dir())
    templates_dir = args.templates_dir or config.resolved_templates_dir()
    return TemplateRegistry(templates_dir)


def cmd_templates(args: argparse.Namespace, config: RigConfig) -> int:
    registry = _registry(args, config)
    entries = registry.entries()
    if not entries:
        print(f"No templates found in {registry.templates_dir}")
        return 0
    for entry in entries:
        print(f"- {entry.id}: {entry.name}\n  {entry.description}\n  {registry.path_for(entry)}")
    return 0


def cmd_show(args: argparse.Namespace, config: RigConfig) -> int:
    registry = _registry(args, config)
    document = registry.find(args.template_id)
    if document is None:
        available = ", ".join(entry.id for entry in registry.entries()) or "none"
        print(f"Template not found: {args.template_id} (available: {available})", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(document.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_summary(document))
    return 0


def format_summary(document: TemplateDocument) -> str:
    meta = document.meta
    lines = [
        f"{meta.get('name', document.template_id or '(unnamed)')} (id={document.template_id or '-'}, version={meta.get('version', '-')})",
    ]
    if meta.get("description"):
        lines.append(f"  {meta['description']}")
    lines.append(f"  CLAUDE.md: {len(document.claude_md.splitlines())} lines")
    hook_events = sorted(document.hooks) if isinstance(document.hooks, dict) else []
    lines.append(f"  Hooks: {', '.join(hook_events) or 'none'}")
    lines.append(f"  Skills: {', '.join(document.skills) or 'none'}")
    lines.append(f"  Agents: {', '.join(document.agents) or 'none'}")
    servers = sorted(document.mcp_servers) if isinstance(document.mcp_servers, dict) else []
    lines.append(f"  MCP servers: {', '.join(servers) or 'none'}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_rig_config(args.config)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    configure_logging(args.log_level or config.log_level)

    try:
        if args.command == "templates":
            return cmd_templates(args, config)
        if args.command == "show":
            return cmd_show(args, config)
        parser.print_help()  # pragma: no cover - argparse restricts commands
        return 1
    except TemplateLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
