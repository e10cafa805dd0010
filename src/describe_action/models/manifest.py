from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ValueType = Literal["string", "number", "bool"]

VALUE_TYPE_STRING = "string"
VALUE_TYPE_NUMBER = "number"
VALUE_TYPE_BOOL = "bool"

VALUE_TYPES: List[str] = [VALUE_TYPE_STRING, VALUE_TYPE_NUMBER, VALUE_TYPE_BOOL]


def _scalar_to_str(value: Any) -> Any:
    # YAML scalars decoded into a text field keep their YAML spelling
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class Input(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    description: str = ""
    # Not part of action.yml itself; filled in for the Markdown table.
    type: Optional[ValueType] = None
    required: bool = False
    default: str = ""

    @field_validator("description", "default", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _blank_type_is_unset(cls, value: Any) -> Any:
        return value or None


class Output(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    description: str = ""
    type: Optional[ValueType] = None

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_scalars(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    @field_validator("type", mode="before")
    @classmethod
    def _blank_type_is_unset(cls, value: Any) -> Any:
        return value or None


Inputs = Dict[str, Input]
Outputs = Dict[str, Output]


class Manifest(BaseModel):
    """The inputs/outputs part of an action manifest; everything else is ignored."""

    model_config = ConfigDict(extra="ignore")

    inputs: Inputs = Field(default_factory=dict)
    outputs: Outputs = Field(default_factory=dict)

    @field_validator("inputs", "outputs", mode="before")
    @classmethod
    def _null_section_is_empty(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            # A bare `name:` key decodes to None; treat it as an entry with defaults.
            return {str(k): ({} if v is None else v) for k, v in value.items()}
        return value
