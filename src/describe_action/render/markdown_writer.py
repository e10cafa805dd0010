from __future__ import annotations

from typing import Mapping, TextIO

from describe_action.models.manifest import Input, Output
from describe_action.models.run_config import MAX_COLUMN_WIDTH
from describe_action.render.grid import render_grid
from describe_action.render.rows import input_table, output_table


class MarkdownTableWriter:
    """Writes inputs/outputs tables to a text stream."""

    def __init__(self, out: TextIO, *, max_column_width: int = MAX_COLUMN_WIDTH):
        self.out = out
        self.max_column_width = max_column_width

    def write_inputs(self, inputs: Mapping[str, Input]) -> None:
        header, rows = input_table(inputs)
        self.out.write(render_grid(header, rows, max_column_width=self.max_column_width))

    def write_outputs(self, outputs: Mapping[str, Output]) -> None:
        header, rows = output_table(outputs)
        self.out.write(render_grid(header, rows, max_column_width=self.max_column_width))
