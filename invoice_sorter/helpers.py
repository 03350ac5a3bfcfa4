"""
Helper utility functions for MIME lookup, pulling JSON out of model replies,
and cleaning values before they go into file names.
"""

import json
import os
import re

from invoice_sorter.config import MIME_TYPES

_NOT_ALNUM = re.compile(r"[^A-Za-z0-9]")
_NOT_DATE_CHAR = re.compile(r"[^A-Za-z0-9-]")
_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")


def mime_type_for(file_path):
    """Return the MIME type for a supported extension (case-insensitive)."""
    ext = os.path.splitext(file_path)[1].lower()
    try:
        return MIME_TYPES[ext]
    except KeyError:
        raise ValueError(f"Unsupported file type: {ext or file_path}") from None


def extract_json_object(text):
    """
    Locate and decode the JSON object embedded in a model reply.

    The greedy first-'{' to last-'}' span is tried first. When that span does
    not decode (for example two objects in one reply), the first position
    from which a complete object decodes wins.
    """
    match = _GREEDY_OBJECT.search(text or "")
    if not match:
        raise ValueError("Invalid response format from Gemini")

    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError:
        pass

    decoder = json.JSONDecoder()
    start = text.find("{")
    while start != -1:
        try:
            obj, _ = decoder.raw_decode(text, start)
            if isinstance(obj, dict):
                return obj
        except json.JSONDecodeError:
            pass
        start = text.find("{", start + 1)
    raise ValueError("Invalid response format from Gemini")


def sanitize_name_part(value, default):
    """Strip everything outside [A-Za-z0-9]; only None falls back to default."""
    if value is None:
        return default
    return _NOT_ALNUM.sub("", value)


def sanitize_date(value, default="UnknownDate"):
    """Like sanitize_name_part, but hyphens survive so YYYY-MM-DD stays readable."""
    if value is None:
        return default
    return _NOT_DATE_CHAR.sub("", value)


def display_name(name):
    """Decode undecodable filename bytes lossily (U+FFFD) for output and reports."""
    return os.fsencode(name).decode("utf-8", errors="replace")
