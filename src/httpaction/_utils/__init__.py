from ._payload import escape_quoted_newlines, parse_json, to_form_urlencoded

__all__ = [
    "escape_quoted_newlines",
    "parse_json",
    "to_form_urlencoded",
]
