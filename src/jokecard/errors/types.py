"""Failure classifications."""

from __future__ import annotations

from enum import StrEnum


class FailureKind(StrEnum):
    """Why a joke could not be acquired."""

    TRANSPORT = "transport"  # Network or status errors, backoff exhausted
    MALFORMED_PAYLOAD = "malformed_payload"  # Valid JSON, unexpected shape
    APPLICATION_ERROR = "application_error"  # Upstream flagged an error

