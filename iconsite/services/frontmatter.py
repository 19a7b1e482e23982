"""Front-matter handling: split a YAML metadata header from a page body."""

import re
from typing import Any, Dict, Optional, Tuple

import yaml

from iconsite.errors import ParseError

_OPEN_RE = re.compile(r"\A---[ \t]*\r?\n")
_CLOSE_RE = re.compile(r"^---[ \t]*(?:\r?\n|\Z)", re.MULTILINE)


def parse_front_matter(text: str, source: Optional[str] = None) -> Tuple[Dict[str, Any], str]:
    """Return ``(metadata, body)`` for *text*.

    Text that does not open with a ``---`` line has no metadata and is returned
    whole as the body.

    Raises:
        ParseError: if the block is never closed, is not valid YAML, or does
            not hold a mapping.
    """
    opening = _OPEN_RE.match(text)
    if not opening:
        return {}, text

    closing = _CLOSE_RE.search(text, opening.end())
    if not closing:
        raise ParseError(f"{_label(source)}: front matter is not closed with '---'.")

    block = text[opening.end():closing.start()]
    try:
        metadata = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise ParseError(f"{_label(source)}: invalid YAML front matter: {exc}") from exc

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ParseError(
            f"{_label(source)}: front matter must be a mapping, got {type(metadata).__name__}."
        )
    return metadata, text[closing.end():]


def _label(source: Optional[str]) -> str:
    return source or "<string>"
