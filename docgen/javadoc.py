"""
Javadoc comment parsing.

Splits a ``/** ... */`` comment into its free-text description and its
block tags (``@param``, ``@return``, ``@type`` ...). Inline tags such as
``{@link Foo}`` are part of the description and are kept verbatim.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from docgen.config import JAVADOC_PREFIX

logger = logging.getLogger(__name__)

_ASTERISK_PREFIX_RE = re.compile(r"^[ \t]*\*[ \t]?")
_BLOCK_TAG_LINE_RE = re.compile(r"^\s*@", re.MULTILINE)
_BLOCK_TAG_RE = re.compile(r"^\s*@(\S+)(.*)$", re.DOTALL)


@dataclass(frozen=True)
class BlockTag:
    """A named block tag and its text payload."""

    name: str
    content: str


@dataclass(frozen=True)
class Javadoc:
    """Parsed Javadoc comment."""

    description: str
    block_tags: List[BlockTag] = field(default_factory=list)

    def first_tag(self, name: str) -> Optional[str]:
        """Return the payload of the first block tag called ``name``.

        Later tags with the same name are ignored.
        """
        for tag in self.block_tags:
            if tag.name == name:
                return tag.content
        return None

    def description_or_none(self) -> Optional[str]:
        return self.description or None


def is_javadoc_comment(comment_text: str) -> bool:
    """Check if a comment is a Javadoc comment.

    ``/**/`` is an empty block comment, not Javadoc.
    """
    stripped = comment_text.strip()
    return stripped.startswith(JAVADOC_PREFIX) and stripped != "/**/"


def comment_content(comment_text: str) -> str:
    """Strip the ``/**`` and ``*/`` delimiters from a Javadoc comment."""
    content = comment_text.strip()
    if content.startswith(JAVADOC_PREFIX):
        content = content[len(JAVADOC_PREFIX):]
    if content.endswith("*/"):
        content = content[:-2]
    return content


def clean_lines(content: str) -> str:
    """Remove leading asterisks and surrounding empty lines from comment content."""
    lines = []
    for line in content.splitlines():
        match = _ASTERISK_PREFIX_RE.match(line)
        if match:
            line = line[match.end():]
        if not line.strip():
            line = ""
        lines.append(line)

    if lines and lines[0][:1] in (" ", "\t"):
        lines[0] = lines[0][1:]

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def _parse_block_tag(text: str) -> Optional[BlockTag]:
    match = _BLOCK_TAG_RE.match(text)
    if not match:
        return None
    return BlockTag(name=match.group(1), content=match.group(2).strip())


def parse_javadoc_content(content: str) -> Javadoc:
    """Parse the body of a Javadoc comment (delimiters already removed).

    Args:
        content: Comment text between ``/**`` and ``*/``.

    Returns:
        A Javadoc with the description and block tags in source order.
    """
    cleaned = clean_lines(content)

    starts = [m.start() for m in _BLOCK_TAG_LINE_RE.finditer(cleaned)]
    if not starts:
        return Javadoc(description=cleaned.rstrip())

    description = cleaned[:starts[0]].rstrip()
    tags = []
    bounds = starts + [len(cleaned)]
    for begin, end in zip(bounds, bounds[1:]):
        tag = _parse_block_tag(cleaned[begin:end])
        if tag is not None:
            tags.append(tag)
    return Javadoc(description=description, block_tags=tags)


def parse_javadoc(comment_text: str) -> Optional[Javadoc]:
    """Parse a raw comment, returning None when it is not Javadoc."""
    if not is_javadoc_comment(comment_text):
        return None
    return parse_javadoc_content(comment_content(comment_text))
