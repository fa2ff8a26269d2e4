"""Minimal frontmatter parser.

Recognizes a `---` delimited block of `key: value` lines at the very start
of a document. No nesting, lists or multi-line values. One block is
stripped per call; a second block directly after it stays in the body.
"""

import re
from dataclasses import dataclass, field

_BLOCK_RE = re.compile(r"---\n(.+?)\n---\n?", re.DOTALL)
_LINE_RE = re.compile(r"\s*([A-Za-z0-9_-]+)\s*:(.*)")

_QUOTE_PAIRS = {
    '"': '"',
    "'": "'",
    "“": "”",
    "‘": "’",
}


@dataclass(frozen=True)
class ParsedDocument:
    """Frontmatter mapping and the remaining document body."""

    body: str
    frontmatter: dict[str, str] = field(default_factory=dict)


def parse_frontmatter(raw: str) -> ParsedDocument:
    """Split a leading frontmatter block from document text.

    Never raises: text without a block (or with a block anywhere but the
    start) comes back unchanged with an empty mapping.

    Args:
        raw: Raw document text

    Returns:
        ParsedDocument with the parsed mapping and the body after the block
    """
    match = _BLOCK_RE.match(raw)
    if match is None:
        return ParsedDocument(body=raw)

    return ParsedDocument(
        body=raw[match.end() :],
        frontmatter=_parse_block(match.group(1)),
    )


def _parse_block(block: str) -> dict[str, str]:
    result: dict[str, str] = {}
    for line in block.split("\n"):
        match = _LINE_RE.fullmatch(line)
        if match is None:
            continue
        value = match.group(2).strip()
        if not value:
            continue
        result[match.group(1)] = _strip_quotes(value)
    return result


def _strip_quotes(value: str) -> str:
    """Remove exactly one matching pair of outer quotes."""
    if len(value) < 2:
        return value
    closing = _QUOTE_PAIRS.get(value[0])
    if closing is not None and value[-1] == closing:
        return value[1:-1]
    return value
