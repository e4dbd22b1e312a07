"""Generate filename suggestions from the terminal."""
from __future__ import annotations
import argparse
import logging
import sys

from ai_file_namer.common.config import load_settings
from ai_file_namer.common.errors import SuggestionError
from ai_file_namer.common.logging_setup import setup_logging
from ai_file_namer.common.validation import validate_form
from ai_file_namer.provider.gemini_client import GeminiClient
from ai_file_namer.serve.handler import SuggestionHandler

def main(argv: list[str] | None = None) -> int:
    setup_logging(logging.WARNING)
    ap = argparse.ArgumentParser(description="Suggest filenames for a document description")
    ap.add_argument("--text", required=True, help="Document description")
    ap.add_argument("--cfg", default=None, help="Optional YAML config path")
    args = ap.parse_args(argv)

    form = validate_form({"description": args.text})
    if not form.ok:
        for msg in form.errors:
            print(msg, file=sys.stderr)
        return 1

    settings = load_settings(cfg_path=args.cfg)
    handler = SuggestionHandler(settings, GeminiClient)
    try:
        names = handler.suggest({"description": form.value})
    except SuggestionError as e:
        print(e.client_message(settings.expose_error_detail), file=sys.stderr)
        return 1

    for name in names:
        print(name)
    return 0

if __name__ == "__main__":
    sys.exit(main())
