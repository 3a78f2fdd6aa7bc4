"""JSON output utilities for jokecard."""

from __future__ import annotations

import json
import sys

import msgspec

from jokecard.models import AcquisitionOutcome, JokeFailure, JokeResult


def outcome_to_dict(
    outcome: AcquisitionOutcome,
    result: JokeResult | None = None,
) -> dict:
    """Convert an outcome (and the result behind it) to a JSON-ready dict."""
    data = msgspec.to_builtins(outcome)
    if result is not None:
        data["source"] = result.source_label
        if isinstance(result, JokeFailure):
            data["failure_kind"] = result.kind.value
            data["detail"] = result.detail
    return data


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout.

    Args:
        data: Any msgspec-serializable object
        indent: Number of spaces for indentation
    """
    python_obj = msgspec.json.decode(msgspec.json.encode(data))
    sys.stdout.write(json.dumps(python_obj, indent=indent))
    sys.stdout.write("\n")
