from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class TypeSelector(Protocol):
    """Single-choice prompt used to fill in missing entry types.

    Returns the chosen option, or None when the user cancels.
    """

    def select_one(self, message: str, options: Sequence[str]) -> Optional[str]:
        ...
