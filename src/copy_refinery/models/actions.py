"""Transformation actions and the prompt template each one uses."""

from __future__ import annotations

from enum import Enum


class PromptKind(str, Enum):
    """Which system prompt template a request is rendered with."""

    ARTICULATE = "articulate"
    REFINE = "refine"
    EDIT = "edit"
    GENERIC = "generic"


class Action(str, Enum):
    ARTICULATE = "ARTICULATE"
    REFINE = "REFINE"
    EDIT = "EDIT"
    CUSTOM = "CUSTOM"
    SHORTEN = "SHORTEN"
    ELONGATE = "ELONGATE"
    SIMPLIFY = "SIMPLIFY"

    @property
    def requires_instruction(self) -> bool:
        return self in (Action.EDIT, Action.CUSTOM)

    @property
    def prompt_kind(self) -> PromptKind:
        return _PROMPT_KINDS.get(self, PromptKind.GENERIC)

    @classmethod
    def names(cls) -> list[str]:
        return [a.value for a in cls]


_PROMPT_KINDS: dict[Action, PromptKind] = {
    Action.ARTICULATE: PromptKind.ARTICULATE,
    Action.REFINE: PromptKind.REFINE,
    Action.EDIT: PromptKind.EDIT,
}
