"""Payload transforms applied to request bodies before dispatch."""

import json
import re
from typing import Any, Optional
from urllib.parse import urlencode

_QUOTED_SEGMENT = re.compile(r'"[^"]*"')
_LINE_BREAK = re.compile(r"[\n\r]\s*")


def escape_quoted_newlines(data: str) -> str:
    r"""Replace line breaks inside double-quoted segments with a literal ``\n``.

    A line break together with any whitespace that follows it collapses into
    the two characters backslash and ``n``. Text outside of quotes is kept
    as is, so a payload with multi-line values stays valid JSON.

    Args:
        data: The raw request body.

    Returns:
        The body with quoted line breaks escaped.

    Examples:
        >>> escape_quoted_newlines('{"a":"x\ny"}\n')
        '{"a":"x\\ny"}\n'
    """
    return _QUOTED_SEGMENT.sub(
        lambda match: _LINE_BREAK.sub(r"\\n", match.group(0)), data
    )


def parse_json(data: Optional[str]) -> Any:
    """Parse a body as JSON, returning ``None`` when it is not valid JSON."""
    if data is None:
        return None
    try:
        return json.loads(data)
    except ValueError:
        return None


def _form_value(value: Any, nested: bool = False) -> str:
    """Stringify a JSON value the way a browser form field would.

    Lists become their items joined by ``,`` with ``null`` items left empty.
    Objects are kept as compact JSON.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "" if nested else "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(_form_value(item, nested=True) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def to_form_urlencoded(data: Optional[str]) -> Optional[str]:
    """Re-encode a JSON object body as ``application/x-www-form-urlencoded``.

    Key order follows the JSON object. Bodies that are not a non-empty JSON
    object are returned unchanged.
    """
    parsed = parse_json(data)
    if not isinstance(parsed, dict) or not parsed:
        return data

    return urlencode([(key, _form_value(value)) for key, value in parsed.items()])
