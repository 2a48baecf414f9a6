"""Parser for the whitespace-separated tabular catalog format.

The first non-empty line names the columns::

    service name url method headers body
    httpbin get https://httpbin.org/get GET {}
    openai chat https://api.openai.com/v1/chat/completions POST "BEARER $!API_KEY" "{""model"": ""$!MODEL""}"

Fields are separated by single spaces. A double quote toggles quoted mode, in
which spaces are kept and ``""`` stands for one literal quote.
"""

from __future__ import annotations
import json
from typing import Any, Dict, List, Optional

NULL_TOKEN = "null"
RAW_COLUMNS = frozenset({"body"})


def try_parse_json(text: str) -> Any:
    """Return the decoded JSON value of ``text``, or ``text`` itself.

    Catalog authors write header tables as inline JSON but are not required
    to; a field that merely starts with ``{`` stays a plain string when it
    does not decode.
    """
    try:
        return json.loads(text)
    except ValueError:
        return text


def split_row(line: str) -> List[str]:
    """Tokenize one data line into raw field values."""
    values: List[str] = []
    current: List[str] = []
    quoted = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if quoted and line[i + 1:i + 2] == '"':
                current.append('"')
                i += 1
            else:
                quoted = not quoted
        elif char == " " and not quoted:
            values.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    values.append("".join(current))
    return values


def decode_field(key: str, raw: str) -> Any:
    """Apply the ``null`` and inline-JSON conventions to one field."""
    if raw == NULL_TOKEN:
        return None
    if key not in RAW_COLUMNS and raw.startswith("{"):
        return try_parse_json(raw)
    return raw


def parse_row(keys: List[str], line: str) -> Dict[str, Any]:
    """Zip a data line with the header keys.

    Extra values are dropped; missing trailing values leave the key absent.
    """
    return {key: decode_field(key, raw) for key, raw in zip(keys, split_row(line))}


def parse_txt(content: str) -> List[Dict[str, Any]]:
    """Parse a whole tabular catalog into one dictionary per row."""
    keys: Optional[List[str]] = None
    rows: List[Dict[str, Any]] = []

    for line in content.split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        if keys is None:
            keys = line.split()
            continue
        rows.append(parse_row(keys, line))

    return rows
