from __future__ import annotations

from typing import Mapping, Union

from describe_action.core.contracts import TypeSelector
from describe_action.core.logger import get_logger
from describe_action.models.manifest import VALUE_TYPES, Input, Manifest, Output

logger = get_logger(__name__)


def _collect_section(
    section: str,
    entries: Mapping[str, Union[Input, Output]],
    selector: TypeSelector,
) -> int:
    filled = 0
    for name in sorted(entries):
        entry = entries[name]
        if entry.type:
            continue
        choice = selector.select_one(f'Type of "{section}.{name}":', list(VALUE_TYPES))
        if choice is None:
            logger.info(f"No type chosen for {section}.{name}; leaving it unset")
            continue
        entry.type = choice
        filled += 1
    return filled


def collect_missing_types(
    manifest: Manifest,
    selector: TypeSelector,
    *,
    only_input: bool = False,
    only_output: bool = False,
) -> int:
    """Prompt for the type of every untyped entry, in place.

    Inputs are skipped when ``only_output`` is set and outputs are skipped when
    ``only_input`` is set, so with both flags nothing is asked.

    Returns:
        Number of entries whose type was filled in
    """
    filled = 0
    if not only_output:
        filled += _collect_section("inputs", manifest.inputs, selector)
    if not only_input:
        filled += _collect_section("outputs", manifest.outputs, selector)
    logger.debug(f"Collected {filled} entry types")
    return filled
