"""
Java parsing on top of tree-sitter.

One tree-sitter ``Parser`` is shared by the module; parsing is synchronous
and a run processes one unit at a time. Syntax errors never raise: the
tree still carries ERROR and missing nodes, which callers count with
``count_error_nodes`` and report once per file.
"""

import logging
from typing import Optional, Tuple

import tree_sitter_java as tsjava
from tree_sitter import Language, Parser, Tree

logger = logging.getLogger(__name__)

JAVA_LANGUAGE = Language(tsjava.language())

_shared_parser: Optional[Parser] = None


def create_parser() -> Parser:
    """Return a new parser bound to the Java grammar."""
    return Parser(JAVA_LANGUAGE)


def _parser() -> Parser:
    global _shared_parser
    if _shared_parser is None:
        _shared_parser = create_parser()
        logger.debug("Loaded tree-sitter Java grammar")
    return _shared_parser


def parse_bytes(source: bytes) -> Tree:
    """Parse a Java compilation unit held in memory.

    >>> parse_bytes(b"class A {}").root_node.type
    'program'

    Raises:
        TypeError: If ``source`` is not bytes.
    """
    if not isinstance(source, bytes):
        raise TypeError(f"Source must be bytes, got {type(source).__name__}")
    return _parser().parse(source)


def parse_file(file_path: str) -> Tuple[Tree, bytes]:
    """Read and parse one ``.java`` file.

    Returns:
        The tree and the raw bytes it was parsed from.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(file_path, "rb") as f:
        source_bytes = f.read()
    logger.debug("Parsing %s (%d bytes)", file_path, len(source_bytes))
    return parse_bytes(source_bytes), source_bytes


def count_error_nodes(tree: Tree) -> int:
    """Number of ERROR and missing nodes in ``tree``."""
    if not tree.root_node.has_error:
        return 0
    count = 0
    stack = [tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            count += 1
        if node.has_error:
            stack.extend(node.children)
    return count
