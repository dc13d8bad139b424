"""agent-rig: template parsing for agentic-coding configuration bundles."""

__version__ = "0.3.0"
