"""describe_action.

Render the inputs and outputs of a GitHub-Actions-style manifest (action.yml)
as Markdown tables for documentation.

Public API for use from scripts and tests.
"""

__version__ = "0.1.0"

from describe_action.describe import describe
from describe_action.manifest_loader import load_manifest, parse_manifest
from describe_action.render.markdown_writer import MarkdownTableWriter

__all__ = [
    "MarkdownTableWriter",
    "describe",
    "load_manifest",
    "parse_manifest",
]
