# -*- coding: utf-8 -*-
"""
Helpers for the JSON-in-TEXT columns.

Nothing enforces a shape on these columns, so reads are tolerant:
lists fall back to [], objects to None, and "loose" fields (experience,
education) hand back the raw string when it is not JSON.
"""
import json
from typing import Any, Dict, List, Optional


def dump_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def dump_list(value: Any) -> str:
    if value is None:
        return "[]"
    if isinstance(value, (list, tuple)):
        return dump_json(list(value))
    return dump_json([value])


def dump_object(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        # already serialized by the client
        return value
    return dump_json(value)


def dump_loose(value: Any) -> str:
    """Strings are stored verbatim, anything structured is JSON-dumped."""
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return dump_json(value)
    return str(value)


def _try_load(raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    try:
        return json.loads(raw)
    except (ValueError, TypeError):
        return raw


def parse_list(raw: Any) -> List[Any]:
    if not raw:
        return []
    val = _try_load(raw)
    return val if isinstance(val, list) else []


def parse_object(raw: Any) -> Optional[Dict[str, Any]]:
    if not raw:
        return None
    val = _try_load(raw)
    return val if isinstance(val, dict) else None


def parse_loose(raw: Any) -> Any:
    if not raw:
        return raw
    return _try_load(raw)


def load_llm_json(content: Optional[str]) -> Any:
    """Strict parse for LLM output; an empty reply counts as {}."""
    return json.loads(content or "{}")
