"""
Java documentation extraction engine.

Tree-sitter-based traversal of Java source units that builds class,
method and parameter documentation for classes deriving from the
framework's base types.
"""

from docgen.models import ClassDoc, MethodDoc, ParameterDoc
from docgen.parser import create_parser, parse_file, parse_bytes, count_error_nodes
from docgen.javadoc import BlockTag, Javadoc, parse_javadoc
from docgen.context import ContextStackError, TraversalContext
from docgen.selection import is_interesting, select_interesting
from docgen.traversal import UnitExtraction, extract_classes_from_tree
from docgen.extractor import (
    DocgenResult,
    ExtractionStats,
    build_type_index,
    discover_java_files,
    extract_directory,
    extract_to_dict_list,
    parse_source_root,
)

__all__ = [
    # Data models
    "ClassDoc",
    "MethodDoc",
    "ParameterDoc",
    "DocgenResult",
    "ExtractionStats",
    "UnitExtraction",
    # Low-level parsing
    "create_parser",
    "parse_file",
    "parse_bytes",
    "count_error_nodes",
    "BlockTag",
    "Javadoc",
    "parse_javadoc",
    # Mid-level extraction
    "ContextStackError",
    "TraversalContext",
    "extract_classes_from_tree",
    "is_interesting",
    "select_interesting",
    # High-level orchestration
    "build_type_index",
    "discover_java_files",
    "extract_directory",
    "extract_to_dict_list",
    "parse_source_root",
]
