from __future__ import annotations


class InvalidVersionError(ValueError):
    def __init__(self, text: str, *, message: str | None = None) -> None:
        self.text = text
        super().__init__(message or f"invalid version string: {text}")


class AlphaWithoutDecimalError(InvalidVersionError):
    """A lax decimal version such as ``1_0``: alpha suffix, no fraction."""

    def __init__(self, text: str) -> None:
        super().__init__(text, message="invalid version format: alpha without decimal")


class GrammarMismatchError(RuntimeError):
    """A grammar matched but no reconstruction branch accepts its fragments.

    This is a bug in the patterns or the reconstructor, never bad user input.
    """


class VersionContractError(RuntimeError):
    """Raised by entry points whose callers promised pre-validated input."""
