"""Exception types raised across the relay."""

from __future__ import annotations


class CopyRefineryError(Exception):
    """Base class for all copy refinery errors."""


class MissingInstructionError(CopyRefineryError, ValueError):
    """An action that needs an explicit instruction was called without one."""


class UnknownActionError(CopyRefineryError, ValueError):
    """The requested action name is not one of the supported actions."""

    def __init__(self, action: str, supported: list[str]):
        self.action = action
        self.supported = supported
        super().__init__(
            f"Unknown action: {action}. Supported actions: {', '.join(supported)}."
        )


class MalformedResponseError(CopyRefineryError):
    """The provider answered, but without a usable text content block."""


class NotInitializedError(CopyRefineryError, RuntimeError):
    """A module-level API function was used before initialize_api()."""

    def __init__(self) -> None:
        super().__init__("API not initialized. Call initialize_api() first.")
