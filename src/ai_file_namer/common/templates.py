"""Prompt constants and request building for filename generation."""
from __future__ import annotations

from ai_file_namer.common.config import Settings
from ai_file_namer.common.schema import GenerationRequest

TEMPERATURE = 0.3  # low temperature for predictable output

SYSTEM_INSTRUCTION = (
    "You are a professional file naming expert.\n"
    "Your sole task is to take a document description and provide 5 suggested filenames.\n"
    "The output MUST be a JSON array of strings, with NO other commentary, markdown ticks, or text.\n"
    "Filenames must be lowercase, use hyphens instead of spaces, and have appropriate "
    "file extensions (like .pdf, .doc, .jpg, etc.)"
)

NAME_LIST_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "STRING",
        "description": "A clean, hyphenated, lowercase filename including an extension.",
    },
}

def build_request(description: str, settings: Settings) -> GenerationRequest:
    """
    Build the generation request for a validated description.

    Args:
        description: Trimmed user description.
        settings: Runtime settings (model id).

    Returns:
        Immutable request for the provider.
    """
    return GenerationRequest(
        model_id=settings.model_id,
        system_instruction=SYSTEM_INSTRUCTION,
        description=description,
        temperature=TEMPERATURE,
        response_schema=NAME_LIST_SCHEMA,
    )
