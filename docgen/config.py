"""
Configuration constants for Java documentation extraction.

Defines the tree-sitter node type strings used for traversal and the
defaults for class selection and output.
"""

from typing import FrozenSet, Set

# Class bodies reached outside a declaration belong to anonymous classes
CLASS_BODY_NODE: str = "class_body"

METHOD_NODE: str = "method_declaration"
LAMBDA_NODE: str = "lambda_expression"
PACKAGE_NODE: str = "package_declaration"
IMPORT_NODE: str = "import_declaration"
MODIFIERS_NODE: str = "modifiers"

# Parameter node types
FORMAL_PARAMETER_NODE: str = "formal_parameter"
SPREAD_PARAMETER_NODE: str = "spread_parameter"
INFERRED_PARAMETERS_NODE: str = "inferred_parameters"
CATCH_PARAMETER_NODE: str = "catch_formal_parameter"
CATCH_TYPE_NODE: str = "catch_type"

# Comment node types (older grammars emit a single "comment" type)
COMMENT_NODES: Set[str] = {
    "block_comment",
    "line_comment",
    "comment",
}

JAVADOC_PREFIX: str = "/**"

# Keyword modifiers recorded on methods; annotations are not modifiers
MODIFIER_KEYWORDS: Set[str] = {
    "public",
    "protected",
    "private",
    "abstract",
    "static",
    "final",
    "strictfp",
    "default",
    "synchronized",
    "native",
    "transient",
    "volatile",
    "sealed",
    "non-sealed",
}

# Placeholder type spelled in source when the type is inferred
VAR_TYPE_NAME: str = "var"

JAVA_EXTENSIONS: Set[str] = {
    ".java",
}

# Directories never descended into while discovering sources
SKIPPED_DIRECTORIES: Set[str] = {
    "build",
    "target",
    "out",
    "bin",
    "node_modules",
    "__pycache__",
}

# Framework root types whose descendants are documented
DEFAULT_INTERESTING_BASE_TYPES: FrozenSet[str] = frozenset({
    "com.berray.GameObject",
    "com.berray.components.core.Component",
    "com.berray.components.core.Action",
})

DEFAULT_OUTPUT_PATH: str = "doc/doc.json"

# Whether implements clauses contribute ancestors
DEFAULT_INCLUDE_INTERFACES: bool = True

# Tag name carrying an explicit type for dynamically typed accessors
EXPLICIT_TYPE_TAG: str = "type"
