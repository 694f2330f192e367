"""
Symbol layer: type catalog and type reference resolution.

Indexes the class-like declarations of every source root on the lookup
path and resolves type references (supertypes, parameter types) to
fully-qualified names.
"""

from symbols.jdk_types import BOXED_PRIMITIVES, JDK_TYPES, OBJECT_TYPE
from symbols.type_index import ImportScope, TypeEntry, TypeIndex
from symbols.resolver import (
    LexicalScope,
    OtherType,
    PrimitiveType,
    ReferenceType,
    ResolutionFailure,
    TypeResolver,
    display_name,
)

__all__ = [
    "BOXED_PRIMITIVES",
    "JDK_TYPES",
    "OBJECT_TYPE",
    "ImportScope",
    "TypeEntry",
    "TypeIndex",
    "LexicalScope",
    "OtherType",
    "PrimitiveType",
    "ReferenceType",
    "ResolutionFailure",
    "TypeResolver",
    "display_name",
]
