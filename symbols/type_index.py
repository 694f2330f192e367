"""Catalog of every type known to a documentation run.

The index is the lookup path of the run: JDK types, externally declared
type stubs, and every class-like declaration found in the indexed source
roots. Source declarations keep their raw supertype references together
with the lexical scope needed to resolve them later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from tree_sitter import Node, Tree

from symbols.jdk_types import JDK_TYPES
from symbols.syntax import (
    CLASS_DECLARATION_TYPES,
    EXTENDS_CLAUSE,
    ImportDecl,
    declaration_body,
    declaration_name,
    line_of,
    parse_import_declaration,
    parse_package_declaration,
    supertype_clauses,
    type_name,
    type_parameter_names,
    unannotated,
)

logger = logging.getLogger(__name__)

KIND_CLASS = "class"
KIND_INTERFACE = "interface"
KIND_ENUM = "enum"
KIND_RECORD = "record"
KIND_EXTERNAL = "external"

_KIND_BY_NODE = {
    "class_declaration": KIND_CLASS,
    "interface_declaration": KIND_INTERFACE,
    "enum_declaration": KIND_ENUM,
    "record_declaration": KIND_RECORD,
}


@dataclass
class ImportScope:
    """Package and import table of one source unit."""

    package: str = ""
    single_imports: Dict[str, str] = field(default_factory=dict)
    on_demand_imports: List[str] = field(default_factory=list)

    def add_import(self, decl: ImportDecl) -> None:
        # Static imports name members, not types
        if decl.is_static:
            return
        if decl.is_wildcard:
            if decl.path not in self.on_demand_imports:
                self.on_demand_imports.append(decl.path)
        else:
            self.single_imports[decl.simple_name] = decl.path

    def qualify(self, simple_name: str) -> str:
        """Name ``simple_name`` would have as a top-level type of this package."""
        return f"{self.package}.{simple_name}" if self.package else simple_name


@dataclass(frozen=True)
class TypeEntry:
    """A single known type.

    For source declarations ``superclass`` and ``interfaces`` are raw
    references resolved in ``scope``; for JDK and external entries they
    are already fully qualified and ``scope`` is None.
    """

    qualified_name: str
    kind: str
    superclass: Optional[str] = None
    interfaces: Tuple[str, ...] = ()
    scope: Optional[ImportScope] = None
    enclosing: Tuple[str, ...] = ()
    type_parameters: Tuple[str, ...] = ()
    file_path: Optional[str] = None
    line: int = 0

    @property
    def is_source(self) -> bool:
        return self.scope is not None


class TypeIndex:
    """Fully-qualified name -> TypeEntry catalog."""

    def __init__(self) -> None:
        self._entries: Dict[str, TypeEntry] = {}

    def __contains__(self, qualified_name: object) -> bool:
        return qualified_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, qualified_name: str) -> Optional[TypeEntry]:
        return self._entries.get(qualified_name)

    def add(self, entry: TypeEntry) -> bool:
        """Register an entry; the first registration of a name wins."""
        existing = self._entries.get(entry.qualified_name)
        if existing is not None:
            logger.debug(
                "Type %s already indexed from %s; ignoring duplicate from %s",
                entry.qualified_name,
                existing.file_path or existing.kind,
                entry.file_path or entry.kind,
            )
            return False
        self._entries[entry.qualified_name] = entry
        return True

    def add_jdk_types(self) -> None:
        for qualified_name, supertypes in JDK_TYPES.items():
            self.add(_stub_entry(qualified_name, supertypes))

    def add_external_types(self, external_types: Mapping[str, Iterable[str]]) -> None:
        """Register configured type stubs ``fqn -> [supertype fqns]``."""
        for qualified_name in sorted(external_types):
            self.add(_stub_entry(qualified_name, tuple(external_types[qualified_name])))

    def index_tree(self, tree: Tree, file_path: Optional[str] = None) -> int:
        """Register every member type declared in a parsed source unit.

        Local classes (declared inside method bodies) are not nameable from
        other units; the traversal registers them with ``add_declaration``.

        Returns:
            Number of new entries.
        """
        root = tree.root_node
        scope = ImportScope()
        for child in root.named_children:
            if child.type == "package_declaration":
                scope.package = parse_package_declaration(child)
            elif child.type == "import_declaration":
                decl = parse_import_declaration(child)
                if decl is not None:
                    scope.add_import(decl)

        added = 0
        for entry in _iter_declarations(root, scope, (), (), file_path):
            if self.add(entry):
                added += 1
        logger.debug("Indexed %d types from %s", added, file_path or "<memory>")
        return added

    def add_declaration(
        self,
        node: Node,
        scope: ImportScope,
        enclosing: Tuple[str, ...],
        type_parameters: Tuple[str, ...] = (),
        file_path: Optional[str] = None,
    ) -> int:
        """Register one declaration and its member types.

        Used for local classes, which only become nameable once the walk
        reaches the enclosing method body.

        Returns:
            Number of new entries.
        """
        added = 0
        for entry in _declaration_entries(node, scope, enclosing, type_parameters, file_path):
            if self.add(entry):
                added += 1
        return added


def _stub_entry(qualified_name: str, supertypes: Tuple[str, ...]) -> TypeEntry:
    return TypeEntry(
        qualified_name=qualified_name,
        kind=KIND_EXTERNAL,
        interfaces=tuple(supertypes),
    )


def _iter_declarations(
    container: Node,
    scope: ImportScope,
    enclosing: Tuple[str, ...],
    outer_type_parameters: Tuple[str, ...],
    file_path: Optional[str],
) -> Iterator[TypeEntry]:
    for child in container.named_children:
        if child.type == "enum_body_declarations":
            yield from _iter_declarations(child, scope, enclosing, outer_type_parameters, file_path)
        elif child.type in CLASS_DECLARATION_TYPES:
            yield from _declaration_entries(child, scope, enclosing, outer_type_parameters, file_path)


def _declaration_entries(
    node: Node,
    scope: ImportScope,
    enclosing: Tuple[str, ...],
    outer_type_parameters: Tuple[str, ...],
    file_path: Optional[str],
) -> Iterator[TypeEntry]:
    name = declaration_name(node)
    if not name:
        return
    if enclosing:
        qualified_name = f"{enclosing[-1]}.{name}"
    else:
        qualified_name = scope.qualify(name)

    kind = _KIND_BY_NODE[node.type]
    superclass = None
    interfaces = []
    for clause, type_node in supertype_clauses(node):
        reference = type_name(unannotated(type_node))
        if clause == EXTENDS_CLAUSE and kind == KIND_CLASS:
            superclass = reference
        else:
            interfaces.append(reference)

    own_enclosing = enclosing + (qualified_name,)
    type_parameters = outer_type_parameters + type_parameter_names(node)
    yield TypeEntry(
        qualified_name=qualified_name,
        kind=kind,
        superclass=superclass,
        interfaces=tuple(interfaces),
        scope=scope,
        enclosing=own_enclosing,
        type_parameters=type_parameters,
        file_path=file_path,
        line=line_of(node),
    )

    body = declaration_body(node)
    if body is not None:
        yield from _iter_declarations(body, scope, own_enclosing, type_parameters, file_path)
