from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """
    Message codes carried by Response.messages.

    The wrappers only ever produce VALIDATION_ERROR. The remaining codes are for
    wrapped actions and are passed through untouched.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
