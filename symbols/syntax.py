"""
Tree-sitter Java syntax helpers shared by indexing and traversal.

These functions read names, imports and type references off declaration
nodes without resolving anything.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from tree_sitter import Node

CLASS_DECLARATION_TYPES = frozenset({
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
})

# Node types that spell a (possibly generic) class or interface name
TYPE_NAME_NODES = frozenset({
    "type_identifier",
    "scoped_type_identifier",
    "generic_type",
})

PRIMITIVE_TYPE_NODES = frozenset({
    "integral_type",
    "floating_point_type",
    "boolean_type",
    "void_type",
})

ANNOTATION_NODES = frozenset({
    "annotation",
    "marker_annotation",
})

# Parents under which a class-like declaration is a top-level or member type
MEMBER_CONTAINER_NODES = frozenset({
    "program",
    "class_body",
    "interface_body",
    "enum_body",
    "enum_body_declarations",
})

EXTENDS_CLAUSE = "extends"
IMPLEMENTS_CLAUSE = "implements"


@dataclass(frozen=True)
class ImportDecl:
    """A single ``import`` statement."""

    path: str
    is_static: bool = False
    is_wildcard: bool = False

    @property
    def simple_name(self) -> str:
        return self.path.rsplit(".", 1)[-1]


def node_text(node: Optional[Node]) -> str:
    """Decode the source text covered by a node."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _compact(text: str) -> str:
    return "".join(text.split())


def line_of(node: Node) -> int:
    """1-indexed start line of a node."""
    return node.start_point.row + 1


def parse_package_declaration(node: Node) -> str:
    """Return the dotted package name of a ``package_declaration``."""
    for child in node.named_children:
        if child.type in ("scoped_identifier", "identifier"):
            return _compact(node_text(child))
    return ""


def parse_import_declaration(node: Node) -> Optional[ImportDecl]:
    """Return the import described by an ``import_declaration``."""
    path = None
    is_static = False
    is_wildcard = False
    for child in node.children:
        if child.type in ("scoped_identifier", "identifier"):
            path = _compact(node_text(child))
        elif child.type == "static":
            is_static = True
        elif child.type == "asterisk":
            is_wildcard = True
    if not path:
        return None
    return ImportDecl(path=path, is_static=is_static, is_wildcard=is_wildcard)


def declaration_name(node: Node) -> Optional[str]:
    """Simple name of a class, interface, enum, record or method declaration."""
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None
    name = node_text(name_node).strip()
    return name or None


def type_name(node: Node) -> str:
    """Dotted name spelled by a type node, with generic arguments dropped.

    ``List<String>`` -> ``List``; ``Map.Entry<K, V>`` -> ``Map.Entry``;
    ``Outer<T>.Inner`` -> ``Outer.Inner``.
    """
    if node.type == "type_identifier":
        return node_text(node).strip()
    if node.type == "scoped_type_identifier":
        parts = [type_name(c) for c in node.named_children if c.type in TYPE_NAME_NODES]
        return ".".join(p for p in parts if p)
    if node.type == "generic_type":
        for child in node.named_children:
            if child.type in ("type_identifier", "scoped_type_identifier"):
                return type_name(child)
    if node.type == "annotated_type":
        inner = unannotated(node)
        if inner is not node:
            return type_name(inner)
    return _compact(node_text(node))


def unannotated(node: Node) -> Node:
    """Strip type annotations: ``@NonNull String`` -> ``String``."""
    if node.type != "annotated_type":
        return node
    for child in reversed(node.named_children):
        if child.type not in ANNOTATION_NODES:
            return child
    return node


def type_parameter_names(node: Node) -> Tuple[str, ...]:
    """Names of the type parameters declared on a class or method."""
    params = node.child_by_field_name("type_parameters")
    if params is None:
        return ()
    names = []
    for param in params.named_children:
        if param.type != "type_parameter":
            continue
        for child in param.named_children:
            if child.type in ("type_identifier", "identifier"):
                names.append(node_text(child))
                break
    return tuple(names)


def _clause_types(clause: Node) -> List[Node]:
    type_list = None
    for child in clause.named_children:
        if child.type == "type_list":
            type_list = child
            break
    holder = type_list if type_list is not None else clause
    return [c for c in holder.named_children if c.type not in ANNOTATION_NODES]


def supertype_clauses(node: Node) -> List[Tuple[str, Node]]:
    """Declared supertype references of a class-like declaration.

    Returns ``(clause, type_node)`` pairs in declaration order, where
    ``clause`` is ``"extends"`` or ``"implements"``. An interface's
    ``extends`` list is reported as ``"extends"``.
    """
    clauses = []
    for child in node.named_children:
        if child.type == "superclass":
            clauses.extend((EXTENDS_CLAUSE, t) for t in _clause_types(child))
        elif child.type == "extends_interfaces":
            clauses.extend((EXTENDS_CLAUSE, t) for t in _clause_types(child))
        elif child.type == "super_interfaces":
            clauses.extend((IMPLEMENTS_CLAUSE, t) for t in _clause_types(child))
    return clauses


def is_local_declaration(node: Node) -> bool:
    """True for a class-like declaration inside a block (a local class)."""
    parent = node.parent
    return parent is not None and parent.type not in MEMBER_CONTAINER_NODES


def declaration_body(node: Node) -> Optional[Node]:
    """Body node of a class-like declaration."""
    return node.child_by_field_name("body")
