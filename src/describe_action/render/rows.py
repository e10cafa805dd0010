from __future__ import annotations

from typing import List, Mapping, Tuple, Union

from describe_action.models.manifest import Input, Output

NOT_AVAILABLE = "N/A"

Table = Tuple[List[str], List[List[str]]]


def backtick_string(s: str) -> str:
    return f"`{s}`"


def backtick_bool(b: bool) -> str:
    return backtick_string("true" if b else "false")


def all_typed(entries: Mapping[str, Union[Input, Output]]) -> bool:
    """True when every entry has a type; the Type column is all-or-nothing."""
    return all(entry.type for entry in entries.values())


def input_table(inputs: Mapping[str, Input]) -> Table:
    """Header and name-sorted rows for the inputs table."""
    with_types = all_typed(inputs)
    header = ["Name", "Description"]
    if with_types:
        header.append("Type")
    header.extend(["Required", "Default"])

    rows: List[List[str]] = []
    for name in sorted(inputs):
        entry = inputs[name]
        row = [backtick_string(name), entry.description]
        if with_types:
            row.append(backtick_string(entry.type))
        row.append(backtick_bool(entry.required))
        row.append(backtick_string(entry.default or NOT_AVAILABLE))
        rows.append(row)
    return header, rows


def output_table(outputs: Mapping[str, Output]) -> Table:
    """Header and name-sorted rows for the outputs table."""
    with_types = all_typed(outputs)
    header = ["Name", "Description"]
    if with_types:
        header.append("Type")

    rows: List[List[str]] = []
    for name in sorted(outputs):
        entry = outputs[name]
        row = [backtick_string(name), entry.description]
        if with_types:
            row.append(backtick_string(entry.type))
        rows.append(row)
    return header, rows
