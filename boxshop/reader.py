"""Reading HTML templates into documents.

A template is read in chunks that end with a tag. Within a chunk, tags,
text, ``<!-- @component="file" -->`` includes and the ``@iflogged`` /
``@ifnlogged`` markers are handled from left to right.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from os import PathLike

from .html import CheckUser, Document, UserState
from .regex import (
    AFTER_COMMENT,
    AFTER_LOGGED,
    AFTER_N_LOGGED,
    AFTER_TAG,
    COMPONENT,
    DOCTYPE,
    EMPTY_STRING,
    END_TAG,
    ENDS_WITH_TAG,
    GENERIC_TAG,
    IF_LOGGED,
    IF_NOT_LOGGED,
    TAG_BODY,
    VOID_TAG,
    get_match,
    has_match,
    move_to_match,
)

_log = logging.getLogger(__name__)


def open_document(login: int = UserState.VISIT) -> Document:
    """Create an empty document for a visitor in the given state."""
    return Document(login)


def read_document(document: Document, filename: str | PathLike[str]) -> Document:
    """Read a template file into ``document`` and index its classes."""
    _read(document, filename, CheckUser.NOTHING)
    document.map_classes()
    return document


def _chunks(lines: Iterable[str]) -> Iterator[str]:
    buffer = ""
    for line in lines:
        buffer += line
        if has_match(buffer, ENDS_WITH_TAG):
            yield buffer
            buffer = ""
    if buffer:
        yield buffer


def _read(document: Document, filename: str | PathLike[str], check: CheckUser) -> None:
    with open(filename, encoding="utf-8", newline="") as stream:
        for chunk in _chunks(stream):
            check = _read_chunk(document, chunk, check)


def _read_chunk(document: Document, chunk: str, check: CheckUser) -> CheckUser:
    rest: str | None = chunk
    while rest is not None:
        component = get_match(rest, COMPONENT)
        if component is not None:
            rest = move_to_match(rest, AFTER_COMMENT)
            _read(document, component, check)
            if rest is None:
                break

        if has_match(rest, IF_LOGGED):
            rest = move_to_match(rest, AFTER_LOGGED) or ""
            check = CheckUser.LOGGED

        if has_match(rest, IF_NOT_LOGGED):
            rest = move_to_match(rest, AFTER_N_LOGGED) or ""
            check = CheckUser.VISIT

        if has_match(rest, GENERIC_TAG):
            rest = _handle_tag(document, rest, check)
            check = CheckUser.NOTHING
            continue

        if not has_match(rest, EMPTY_STRING):
            _add_content(document, rest)
        break
    return check


def _add_content(document: Document, text: str) -> None:
    document.add_content(text)
    document.element_up()


def _handle_tag(document: Document, rest: str, check: CheckUser) -> str:
    tag = get_match(rest, GENERIC_TAG) or ""
    body = get_match(rest, TAG_BODY)

    if body is not None and not has_match(body, EMPTY_STRING):
        _add_content(document, body)

    if has_match(tag, VOID_TAG) or has_match(tag, DOCTYPE):
        document.add_tag(tag, None, check)
        document.element_up()
    elif has_match(tag, END_TAG):
        try:
            document.set_close_tag(document.last_element(), tag)
        except ValueError:
            _log.warning("closing tag %r has no open tag", tag.strip())
        document.element_up()
    else:
        document.add_tag(tag, None, check)

    return move_to_match(rest, AFTER_TAG) or ""