from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from pydantic import BaseModel, PositiveInt

DEFAULT_MANIFEST_PATH = "action.yml"
MAX_COLUMN_WIDTH = 256


class RunConfig(BaseModel):
    """Options for a single describe-action invocation."""

    yaml_path: Path = Path(DEFAULT_MANIFEST_PATH)
    only_input: bool = False                    # Print only the inputs table
    only_output: bool = False                   # Print only the outputs table
    prompt_types: bool = False                  # Ask for types of untyped entries
    verbose: bool = False
    max_column_width: PositiveInt = MAX_COLUMN_WIDTH

    @classmethod
    def from_args(cls, args: Namespace) -> "RunConfig":
        return cls(
            yaml_path=args.yaml,
            only_input=args.input,
            only_output=args.output,
            prompt_types=args.type,
            verbose=args.verbose,
        )

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.verbose else "WARNING"
