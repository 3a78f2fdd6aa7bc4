"""Data models for jokecard.

Every joke source normalizes its upstream response into a ``JokeResult``,
and the acquisition routine folds that result into the ``AcquisitionOutcome``
the presentation layer reads.
"""

from __future__ import annotations

import msgspec

from jokecard.errors.types import FailureKind


class JokeSuccess(msgspec.Struct, frozen=True, tag="success"):
    """A joke accepted from a source."""

    text: str
    source_label: str


class JokeFailure(msgspec.Struct, frozen=True, tag="failure"):
    """A terminal failure from a source."""

    source_label: str
    message: str  # User-facing, e.g. "Failed to load a joke from JokeAPI."
    kind: FailureKind
    detail: str | None = None  # Underlying cause, for logs and tests


JokeResult = JokeSuccess | JokeFailure


class AcquisitionOutcome(msgspec.Struct, frozen=True):
    """State of the outcome slot consumed by the display layer."""

    joke: str | None = None
    is_loading: bool = False
    error_message: str | None = None

    @classmethod
    def loading(cls) -> AcquisitionOutcome:
        """Outcome while an acquisition call is in flight."""
        return cls(joke=None, is_loading=True, error_message=None)

    @classmethod
    def from_result(cls, result: JokeResult) -> AcquisitionOutcome:
        """Terminal outcome for a finished acquisition call."""
        match result:
            case JokeSuccess(text=text):
                return cls(joke=text, is_loading=False, error_message=None)
            case JokeFailure(message=message):
                return cls(joke=None, is_loading=False, error_message=message)
        raise TypeError(f"Unexpected joke result: {result!r}")

    @property
    def succeeded(self) -> bool:
        return not self.is_loading and self.joke is not None
