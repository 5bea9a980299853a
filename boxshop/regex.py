"""Regular-expression helpers used by the template and request layers.

Every helper works with patterns holding zero or one capturing group: when
the group took part in the match, it is the part that counts; otherwise the
whole match does.
"""

from __future__ import annotations

import re
from functools import lru_cache

MATCH = True

EMPTY_STRING = r"^([ \t\n\r\f\v]*)\Z"
AFTER_TAG = r"<[^>]+>(.*)"
GENERIC_TAG = r"([ \t\n\r\f\v]*<[^>]+>[ \t\n\r\f\v]*)"
VOID_TAG = r"(<[^>]+/>)"
DOCTYPE = r"(<!DOCTYPE[^>]+>)"
TAG_BODY = r"([^<>]*)<[^>]+>"
END_TAG = r"(</[^>]+>)"
TAG_NAME = r"<([a-zA-Z0-9]+).*>"
TAG_CLASS = r'<.*[ \t\n\r\f\v]class="([a-zA-Z0-9_]+)".*>'
TAG_ID = r'<.*[ \t\n\r\f\v]id="([a-zA-Z0-9_]+)".*>'
ENDS_WITH_TAG = r"<[^<]*>[ \t\n\f\v]*\Z"
VARIABLE_NAME = r"\$\((.*)\)"
VAR_NAME = r"([^=&]*)=[^=&]*"
VAR_VALUE = r"[^=&]*=([^=&]*)"
IF_LOGGED = r"(<!--[ \t\r\f\v]*@iflogged[ \t\r\f\v]*-->[ \t\n\r\f\v]*)"
AFTER_LOGGED = r"<!--[ \t\r\f\v]*@iflogged[ \t\r\f\v]*-->(.*)"
IF_NOT_LOGGED = r"(<!--[ \t\r\f\v]*@ifnlogged[ \t\r\f\v]*-->[ \t\n\r\f\v]*)"
AFTER_N_LOGGED = r"<!--[ \t\r\f\v]*@ifnlogged[ \t\r\f\v]*-->(.*)"
COMPONENT = r'<!--[ \t\r\f\v]*@component="([^"]*)"[ \t\r\f\v]*-->'
# A comment body may not hold any of ( ) * + , - >
AFTER_COMMENT = r"<!--[^()*+,\->]*-->(.*)"
ALPHA_NUMERIC = r"^([a-zA-Z0-9 ]+)\Z"
NUMERIC = r"^([0-9]+)\Z"
COOKIE_ID = r"^ID=(.*)\Z"
VALID_ENTRY = r'^[^(;")]*\Z'


@lru_cache(maxsize=256)
def _compile(expr: str) -> re.Pattern[str]:
    return re.compile(expr, re.DOTALL)


def _span(string: str, expr: str) -> tuple[int, int] | None:
    found = _compile(expr).search(string)
    if found is None:
        return None
    if found.re.groups >= 1 and found.start(1) != -1:
        return found.span(1)
    return found.span(0)


def get_match(string: str, expr: str) -> str | None:
    """Return the matched text (the group if present), or None."""
    span = _span(string, expr)
    if span is None:
        return None
    start, end = span
    return string[start:end]


def move_to_match(string: str, expr: str) -> str | None:
    """Return the tail of ``string`` starting where the match starts, or None."""
    span = _span(string, expr)
    if span is None:
        return None
    return string[span[0]:]


def has_match(string: str, expr: str) -> bool:
    """Tell whether ``expr`` matches anywhere in ``string``."""
    return _compile(expr).search(string) is not None


def replace_variable(variables: str, target: str) -> str | None:
    """Replace the first ``$(name)`` of the first ``name=value`` pair.

    Returns the new text, or None when there is no pair or no placeholder.
    """
    name = get_match(variables, VAR_NAME)
    if name is None:
        return None
    value = get_match(variables, VAR_VALUE) or ""
    placeholder = _compile(r"([$][(]" + re.escape(name) + r"[)])").search(target)
    if placeholder is None:
        return None
    start, end = placeholder.span(1)
    return target[:start] + value + target[end:]


def replace_variables(variables: str, target: str) -> str:
    """Replace every ``$(name)`` for each pair in ``name1=v1&name2=v2...``."""
    text = target
    remaining: str | None = variables
    while remaining is not None:
        while (replaced := replace_variable(remaining, text)) is not None:
            text = replaced
        remaining = move_to_match(remaining, VAR_VALUE)
    return text


def replace_string(text: str, pattern: str, replacement: str) -> str:
    """Replace every occurrence of ``pattern``, scanning left to right."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    return text.replace(pattern, replacement)