"""
Loading of action manifests (action.yml) into the Manifest model.

Both failure kinds (file and document) surface as ManifestError subclasses;
callers decide whether they are fatal.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml
from pydantic import ValidationError

from describe_action.core.exceptions import ManifestNotFoundError, ManifestParseError
from describe_action.core.logger import get_logger
from describe_action.models.manifest import Manifest

logger = get_logger(__name__)


class ManifestYamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps numbers and timestamps as their source text.

    ``default: 0755`` stays ``"0755"`` and ``default: 2024-01-01`` stays
    ``"2024-01-01"``; booleans and nulls still resolve so ``required: true``
    works.
    """


def _construct_source_text(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


for _tag in ("int", "float", "timestamp"):
    ManifestYamlLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _construct_source_text)


def parse_manifest(text: str, *, source: Union[str, Path, None] = None) -> Manifest:
    """
    Parse manifest YAML text.

    Args:
        text: YAML document
        source: Where the text came from, used in error messages

    Raises:
        ManifestParseError: If the YAML is invalid or does not match the model
    """
    try:
        document = yaml.load(text, Loader=ManifestYamlLoader)
    except yaml.YAMLError as e:
        raise ManifestParseError(reason=f"invalid YAML: {e}", path=source) from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ManifestParseError(
            reason=f"expected a mapping at the top level, got {type(document).__name__}",
            path=source,
        )

    try:
        manifest = Manifest.model_validate(document)
    except ValidationError as e:
        raise ManifestParseError(reason=f"invalid manifest: {e}", path=source) from e

    logger.debug(
        f"Parsed manifest {source or '<string>'}: "
        f"{len(manifest.inputs)} inputs, {len(manifest.outputs)} outputs"
    )
    return manifest


def load_manifest(path: Union[str, Path]) -> Manifest:
    """
    Read and parse the manifest at ``path``.

    Raises:
        ManifestNotFoundError: If the file doesn't exist or can't be read
        ManifestParseError: If the document is malformed

    Example:
        >>> manifest = load_manifest("action.yml")
        >>> sorted(manifest.inputs)
        ['github_token', 'repo']
    """
    manifest_file = Path(path)
    try:
        with open(manifest_file, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ManifestNotFoundError(reason=f"cannot read manifest: {e}", path=manifest_file) from e
    except UnicodeDecodeError as e:
        raise ManifestParseError(reason=f"manifest is not UTF-8 text: {e}", path=manifest_file) from e

    logger.debug(f"Loaded manifest from {manifest_file}")
    return parse_manifest(text, source=manifest_file)
