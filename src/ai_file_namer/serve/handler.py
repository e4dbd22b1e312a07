"""Suggestion pipeline: config check, validation, provider call, parse.

The handler holds no per-request state; one instance serves every request.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Callable, Mapping

from ai_file_namer.common.config import Settings
from ai_file_namer.common.errors import (
    InvalidRequest,
    ProviderCallFailed,
    ServerMisconfigured,
    SuggestionError,
    UnexpectedResponseShape,
    UnknownFailure,
    UnparseableResponse,
)
from ai_file_namer.common.schema import ErrorOut, SuggestionOut
from ai_file_namer.common.templates import build_request
from ai_file_namer.common.validation import DescriptionError, validate_description
from ai_file_namer.provider.gemini_client import GeminiClient, Provider
from ai_file_namer.serve.normalize import extract_raw_text

LOGGER = logging.getLogger("ai_file_namer.serve.handler")

ProviderFactory = Callable[[Settings], Provider]


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not valid JSON
    raise ValueError(f"invalid JSON constant {name}")


class SuggestionHandler:
    """Runs one suggestion request end to end.

    Args:
        settings: Process-wide settings.
        provider_factory: Builds the provider once the API key is known to exist.
    """

    def __init__(self, settings: Settings, provider_factory: ProviderFactory = GeminiClient) -> None:
        self.settings = settings
        self.provider_factory = provider_factory

    def suggest(self, payload: Any) -> list[Any]:
        """Return the parsed name list, or raise a ``SuggestionError``."""
        if not self.settings.has_api_key:
            LOGGER.error("Missing GEMINI_API_KEY in configuration")
            raise ServerMisconfigured()

        description = payload.get("description") if isinstance(payload, Mapping) else None
        if not isinstance(description, str) or not description.strip():
            raise InvalidRequest()
        try:
            description = validate_description(description)
        except DescriptionError as e:
            raise InvalidRequest(e.message) from e

        request = build_request(description, self.settings)
        try:
            response = self.provider_factory(self.settings).generate(request)
        except Exception as e:
            LOGGER.exception("Gemini API call failed")
            raise ProviderCallFailed(f"AI call error: {e}") from e

        raw = extract_raw_text(response)
        try:
            names = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as e:
            LOGGER.error("Could not parse AI response as JSON: %s raw: %s", e, raw)
            raise UnparseableResponse(f"AI parse error: {e} -- raw: {raw}") from e

        if not isinstance(names, list):
            LOGGER.error("AI returned non-array result: %r", names)
            raise UnexpectedResponseShape(f"AI returned non-array result: {json.dumps(names)}")
        return names

    def handle(self, payload: Any) -> tuple[int, dict[str, Any]]:
        """Return ``(status_code, envelope)``; never raises."""
        try:
            names = self.suggest(payload)
        except SuggestionError as e:
            LOGGER.warning("%s: %s", e.kind, e.detail)
            return self.error_envelope(e)
        except Exception as e:
            LOGGER.exception("Unhandled error while generating names")
            return self.error_envelope(UnknownFailure(str(e)))
        return 200, SuggestionOut(names=names).model_dump()

    def error_envelope(self, error: SuggestionError) -> tuple[int, dict[str, Any]]:
        message = error.client_message(self.settings.expose_error_detail)
        return error.status_code, ErrorOut(error=message).model_dump()
