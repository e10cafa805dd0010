from typing import List, Optional, Sequence

import pytest
from pydantic import ValidationError

from describe_action.core.contracts import TypeSelector
from describe_action.models.manifest import VALUE_TYPES, Input, Manifest, Output
from describe_action.prompts.type_collector import collect_missing_types


class FakeSelector:
    def __init__(self, answer: Optional[str] = "string"):
        self.answer = answer
        self.messages: List[str] = []
        self.options: List[List[str]] = []

    def select_one(self, message: str, options: Sequence[str]) -> Optional[str]:
        self.messages.append(message)
        self.options.append(list(options))
        return self.answer


def _manifest() -> Manifest:
    return Manifest(
        inputs={"b_in": Input(), "a_in": Input(), "typed": Input(type="bool")},
        outputs={"out": Output()},
    )


def test_fake_selector_satisfies_contract():
    assert isinstance(FakeSelector(), TypeSelector)


def test_collects_untyped_entries_in_name_order():
    manifest = _manifest()
    selector = FakeSelector("number")

    filled = collect_missing_types(manifest, selector)

    assert filled == 3
    assert selector.messages == [
        'Type of "inputs.a_in":',
        'Type of "inputs.b_in":',
        'Type of "outputs.out":',
    ]
    assert all(options == VALUE_TYPES for options in selector.options)
    assert manifest.inputs["a_in"].type == "number"
    assert manifest.inputs["typed"].type == "bool"
    assert manifest.outputs["out"].type == "number"


def test_only_input_skips_outputs():
    manifest = _manifest()
    selector = FakeSelector()

    collect_missing_types(manifest, selector, only_input=True)

    assert all(m.startswith('Type of "inputs.') for m in selector.messages)
    assert manifest.outputs["out"].type is None


def test_only_output_skips_inputs():
    manifest = _manifest()
    selector = FakeSelector()

    collect_missing_types(manifest, selector, only_output=True)

    assert selector.messages == ['Type of "outputs.out":']
    assert manifest.inputs["a_in"].type is None


def test_both_flags_prompt_nothing():
    selector = FakeSelector()
    assert collect_missing_types(_manifest(), selector, only_input=True, only_output=True) == 0
    assert selector.messages == []


def test_cancel_leaves_type_unset():
    manifest = _manifest()

    filled = collect_missing_types(manifest, FakeSelector(answer=None))

    assert filled == 0
    assert manifest.inputs["a_in"].type is None
    assert manifest.outputs["out"].type is None


def test_selector_answer_outside_allowed_types_is_rejected():
    with pytest.raises(ValidationError):
        collect_missing_types(_manifest(), FakeSelector(answer="integer"))
