"""Failure kinds surfaced to clients as ``{"success": false, "error": ...}``."""
from __future__ import annotations

GENERIC_CALL_ERROR = "AI Error: Could not generate names."
GENERIC_FORMAT_ERROR = "AI returned unexpected response format."
GENERIC_UNKNOWN_ERROR = "AI Error: Could not generate names. Check your API key or description."


class SuggestionError(Exception):
    """Base class for every failure the suggestion endpoint reports.

    ``detail`` is the internal message. It is only shown to clients when the
    subclass allows it and the service runs with ``expose_error_detail``.
    """
    status_code = 500
    generic_message = GENERIC_UNKNOWN_ERROR
    detail_exposable = False

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.generic_message)
        self.detail = detail or self.generic_message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def client_message(self, expose_detail: bool) -> str:
        if expose_detail and self.detail_exposable:
            return self.detail
        return self.generic_message


class ServerMisconfigured(SuggestionError):
    generic_message = "Server misconfiguration: missing API key."


class InvalidRequest(SuggestionError):
    status_code = 400
    generic_message = "Invalid request: description is required."

    def client_message(self, expose_detail: bool) -> str:
        return self.detail


class ProviderCallFailed(SuggestionError):
    generic_message = GENERIC_CALL_ERROR
    detail_exposable = True


class UnparseableResponse(SuggestionError):
    generic_message = GENERIC_FORMAT_ERROR
    detail_exposable = True


class UnexpectedResponseShape(SuggestionError):
    generic_message = GENERIC_FORMAT_ERROR
    detail_exposable = True


class UnknownFailure(SuggestionError):
    pass
