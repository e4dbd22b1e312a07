"""Turn a provider response of unknown shape into raw text.

Each matcher returns the extracted text or None; ``extract_raw_text`` applies
them in order and the first hit wins.
"""
from __future__ import annotations
import json
from collections.abc import Mapping
from typing import Any, Callable, Optional

Matcher = Callable[[Any], Optional[str]]


def _get(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _jsonable(obj: Any) -> Any:
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    if hasattr(obj, "__dict__"):
        return vars(obj)
    return str(obj)


def to_json_text(obj: Any) -> str:
    return json.dumps(obj, default=_jsonable)


def _first(obj: Any, name: str) -> Any:
    items = _get(obj, name)
    if isinstance(items, (list, tuple)) and items and items[0]:
        return items[0]
    return None


def match_text(response: Any) -> str | None:
    text = _get(response, "text")
    if isinstance(text, str):
        return text.strip()
    return None


def match_candidates(response: Any) -> str | None:
    candidate = _first(response, "candidates")
    if candidate is None:
        return None
    content = _get(candidate, "content")
    if isinstance(content, str):
        return content.strip()
    return to_json_text(content)


def _part_text(part: Any) -> str:
    text = _get(part, "text") if not isinstance(part, str) else None
    if text:
        return str(text)
    return part if isinstance(part, str) else ""


def match_output(response: Any) -> str | None:
    out = _first(response, "output")
    if out is None:
        return None
    content = _get(out, "content")
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, (list, tuple)):
        return " ".join(_part_text(p) for p in content).strip()
    return to_json_text(content)


def match_anything(response: Any) -> str:
    return to_json_text(response)


MATCHERS: list[Matcher] = [match_text, match_candidates, match_output, match_anything]


def extract_raw_text(response: Any, matchers: list[Matcher] | None = None) -> str:
    for matcher in matchers or MATCHERS:
        raw = matcher(response)
        if raw is not None:
            return raw
    return to_json_text(response)
