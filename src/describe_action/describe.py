from __future__ import annotations

from typing import Optional, TextIO

from describe_action.core.contracts import TypeSelector
from describe_action.core.logger import get_logger
from describe_action.manifest_loader import load_manifest
from describe_action.models.run_config import RunConfig
from describe_action.prompts.console_selector import ConsoleSelector
from describe_action.prompts.type_collector import collect_missing_types
from describe_action.render.markdown_writer import MarkdownTableWriter

logger = get_logger(__name__)


def describe(
    config: RunConfig,
    *,
    stream: TextIO,
    selector: Optional[TypeSelector] = None,
) -> None:
    """
    Load the manifest and write its tables to ``stream``.

    ``only_input`` wins when both ``only_input`` and ``only_output`` are set.

    Raises:
        ManifestNotFoundError: If the manifest can't be read
        ManifestParseError: If the manifest is malformed
    """
    manifest = load_manifest(config.yaml_path)

    if config.prompt_types:
        collect_missing_types(
            manifest,
            selector or ConsoleSelector(),
            only_input=config.only_input,
            only_output=config.only_output,
        )

    writer = MarkdownTableWriter(stream, max_column_width=config.max_column_width)

    if config.only_input:
        writer.write_inputs(manifest.inputs)
    elif config.only_output:
        writer.write_outputs(manifest.outputs)
    else:
        writer.write_inputs(manifest.inputs)
        stream.write("\n")
        writer.write_outputs(manifest.outputs)
    logger.debug(f"Rendered tables for {config.yaml_path}")
