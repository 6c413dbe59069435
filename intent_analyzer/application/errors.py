"""Errors raised below the HTTP boundary.

Every failure in the analysis pipeline is an IntentAnalysisError; the API
layer turns them into a generic internal error without echoing the detail.
"""

from __future__ import annotations


class IntentAnalysisError(Exception):
    """Base class for analysis pipeline failures."""


class ConfigurationError(IntentAnalysisError):
    """The model gateway cannot be built from the current settings."""


class ModelCallError(IntentAnalysisError):
    """The generate-content call itself failed."""


class EmptyReplyError(IntentAnalysisError):
    """The model answered, but with nothing usable."""

    NO_CANDIDATES = "no candidates in response"
    NO_CONTENT_PARTS = "no content parts in response"
    EMPTY_TEXT = "empty response text"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class PayloadNotFoundError(IntentAnalysisError):
    """No '{' ... '}' span in the model reply."""


class PayloadParseError(IntentAnalysisError):
    """The extracted span is not valid JSON for the reply schema."""

    def __init__(self, message: str, payload: str):
        super().__init__(message)
        self.payload = payload
