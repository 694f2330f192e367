"""
Type reference resolution against a TypeIndex.

Resolution never raises for unknown names. Every lookup returns either a
resolved type or a ``ResolutionFailure`` value, and callers decide how to
propagate it.

Lookup order for a simple name:
    1. type variables in scope
    2. member types of the enclosing types, innermost first, each type's
       own members before those inherited from its ancestors
    3. single-type imports (a ``java.``/``javax.`` import is accepted
       even when the type is not catalogued)
    4. the unit's own package
    5. on-demand (wildcard) imports, in declaration order
    6. ``java.lang``

A qualified name ``A.B`` resolves ``A`` as above and appends ``.B``;
failing that it is looked up as a fully-qualified name.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Set, Tuple, Union

from tree_sitter import Node

from symbols.jdk_types import (
    BOXED_PRIMITIVES,
    IMPLICIT_IMPORT_PACKAGE,
    OBJECT_TYPE,
    is_platform_type,
)
from symbols.syntax import (
    ANNOTATION_NODES,
    PRIMITIVE_TYPE_NODES,
    TYPE_NAME_NODES,
    line_of,
    node_text,
    type_name,
    unannotated,
)
from symbols.type_index import (
    KIND_CLASS,
    KIND_ENUM,
    KIND_RECORD,
    ImportScope,
    TypeEntry,
    TypeIndex,
)

logger = logging.getLogger(__name__)

UNKNOWN_TYPE_PREFIX = "unknown: "

_IMPLICIT_SUPERCLASS = {
    KIND_CLASS: OBJECT_TYPE,
    KIND_ENUM: "java.lang.Enum",
    KIND_RECORD: "java.lang.Record",
}


@dataclass(frozen=True)
class PrimitiveType:
    keyword: str

    @property
    def boxed_name(self) -> str:
        return BOXED_PRIMITIVES[self.keyword]


@dataclass(frozen=True)
class ReferenceType:
    qualified_name: str


@dataclass(frozen=True)
class OtherType:
    """A present but non-nameable type (array, type variable)."""

    description: str


@dataclass(frozen=True)
class ResolutionFailure:
    """A type reference that cannot be resolved against the lookup path."""

    reference: str
    reason: str
    file_path: Optional[str] = None
    line: Optional[int] = None

    def describe(self) -> str:
        location = self.file_path or "<unknown>"
        if self.line:
            location = f"{location}:{self.line}"
        return f"cannot resolve '{self.reference}' at {location}: {self.reason}"


ResolvedType = Union[PrimitiveType, ReferenceType, OtherType]
Resolution = Union[PrimitiveType, ReferenceType, OtherType, ResolutionFailure]


@dataclass(frozen=True)
class LexicalScope:
    """Where a type reference appears."""

    imports: ImportScope
    enclosing: Tuple[str, ...] = ()
    type_parameters: FrozenSet[str] = field(default_factory=frozenset)
    file_path: Optional[str] = None


def display_name(resolved: ResolvedType) -> str:
    """Canonical display name of a resolved parameter type."""
    if isinstance(resolved, PrimitiveType):
        return resolved.boxed_name
    if isinstance(resolved, ReferenceType):
        return resolved.qualified_name
    return UNKNOWN_TYPE_PREFIX + resolved.description


def _spelling(resolved: ResolvedType) -> str:
    if isinstance(resolved, PrimitiveType):
        return resolved.keyword
    if isinstance(resolved, ReferenceType):
        return resolved.qualified_name
    return resolved.description


class TypeResolver:
    """Resolves type references and expands ancestor chains."""

    def __init__(self, index: TypeIndex) -> None:
        self.index = index
        self._direct_cache: Dict[str, Union[List[str], ResolutionFailure]] = {}
        self._ancestor_cache: Dict[str, Union[List[str], ResolutionFailure]] = {}
        self._resolving: Set[str] = set()

    # ------------------------------------------------------------------
    # Name lookup
    # ------------------------------------------------------------------

    def _inherited_member(self, outer: str, name: str) -> Optional[str]:
        # Supertypes being resolved right now cannot contribute members yet
        if outer in self._resolving:
            return None
        ancestors = self.all_ancestors(outer)
        if isinstance(ancestors, ResolutionFailure):
            return None
        for ancestor in ancestors:
            candidate = f"{ancestor}.{name}"
            if candidate in self.index:
                return candidate
        return None

    def _lookup_simple(self, name: str, scope: LexicalScope) -> Optional[str]:
        for outer in reversed(scope.enclosing):
            candidate = f"{outer}.{name}"
            if candidate in self.index:
                return candidate
            inherited = self._inherited_member(outer, name)
            if inherited is not None:
                return inherited

        imported = scope.imports.single_imports.get(name)
        if imported is not None:
            if imported in self.index or is_platform_type(imported):
                return imported
            return None

        candidate = scope.imports.qualify(name)
        if candidate in self.index:
            return candidate

        for package in scope.imports.on_demand_imports:
            candidate = f"{package}.{name}"
            if candidate in self.index:
                return candidate

        candidate = f"{IMPLICIT_IMPORT_PACKAGE}.{name}"
        if candidate in self.index:
            return candidate
        return None

    def resolve_name(
        self,
        name: str,
        scope: LexicalScope,
        line: Optional[int] = None,
    ) -> Resolution:
        """Resolve a dotted type name spelled in source."""
        if "." not in name:
            if name in scope.type_parameters:
                return OtherType(f"type variable {name}")
            qualified = self._lookup_simple(name, scope)
            if qualified is not None:
                return ReferenceType(qualified)
        else:
            head, rest = name.split(".", 1)
            qualified_head = self._lookup_simple(head, scope)
            if qualified_head is not None:
                candidate = f"{qualified_head}.{rest}"
                if candidate in self.index or is_platform_type(candidate):
                    return ReferenceType(candidate)
            if name in self.index or is_platform_type(name):
                return ReferenceType(name)

        reason = "type not found on lookup path"
        imported = scope.imports.single_imports.get(name.split(".", 1)[0])
        if imported is not None and imported not in self.index:
            reason = f"imported type {imported} not found on lookup path"
        return ResolutionFailure(
            reference=name,
            reason=reason,
            file_path=scope.file_path,
            line=line,
        )

    def resolve_type_node(self, node: Node, scope: LexicalScope) -> Resolution:
        """Resolve a type node, including the alternatives of a catch clause."""
        node = unannotated(node)
        if node.type in PRIMITIVE_TYPE_NODES:
            return PrimitiveType(node_text(node).strip())

        if node.type == "array_type":
            element = node.child_by_field_name("element")
            if element is None:
                return OtherType(node_text(node).strip())
            resolved = self.resolve_type_node(element, scope)
            if isinstance(resolved, ResolutionFailure):
                return resolved
            dimensions = "".join(node_text(node.child_by_field_name("dimensions")).split())
            return OtherType(f"{_spelling(resolved)}{dimensions}")

        if node.type in TYPE_NAME_NODES:
            return self.resolve_name(type_name(node), scope, line=line_of(node))

        if node.type == "catch_type":
            alternatives = []
            for child in node.named_children:
                if child.type in ANNOTATION_NODES:
                    continue
                resolved = self.resolve_type_node(child, scope)
                if isinstance(resolved, ResolutionFailure):
                    return resolved
                alternatives.append(resolved)
            if len(alternatives) == 1:
                return alternatives[0]
            # Multi-catch union
            return OtherType(" | ".join(_spelling(r) for r in alternatives))

        return OtherType(node_text(node).strip())

    def resolve_parameter_type(
        self,
        node: Node,
        scope: LexicalScope,
        extra_dimensions: str = "",
    ) -> Resolution:
        """Resolve a declared parameter type.

        ``extra_dimensions`` carries C-style array brackets written after the
        parameter name (``int values[]``).
        """
        resolved = self.resolve_type_node(node, scope)
        if isinstance(resolved, ResolutionFailure) or not extra_dimensions:
            return resolved
        return OtherType(f"{_spelling(resolved)}{extra_dimensions}")

    def resolve_supertype(self, node: Node, scope: LexicalScope) -> Union[ReferenceType, ResolutionFailure]:
        """Resolve a type named in an extends or implements clause."""
        resolved = self.resolve_type_node(node, scope)
        if isinstance(resolved, (ReferenceType, ResolutionFailure)):
            return resolved
        return ResolutionFailure(
            reference=node_text(node).strip(),
            reason="supertype is not a class or interface type",
            file_path=scope.file_path,
            line=line_of(node),
        )

    # ------------------------------------------------------------------
    # Ancestors
    # ------------------------------------------------------------------

    def _entry_scope(self, entry: TypeEntry) -> LexicalScope:
        return LexicalScope(
            imports=entry.scope,
            enclosing=entry.enclosing,
            type_parameters=frozenset(entry.type_parameters),
            file_path=entry.file_path,
        )

    def direct_supertypes(self, qualified_name: str) -> Union[List[str], ResolutionFailure]:
        """Fully-qualified direct supertypes, superclass first."""
        cached = self._direct_cache.get(qualified_name)
        if cached is not None:
            return cached
        if qualified_name in self._resolving:
            # Re-entered through an inherited member lookup; not cached
            return ResolutionFailure(
                reference=qualified_name,
                reason="supertypes are still being resolved",
            )

        entry = self.index.get(qualified_name)
        if entry is None and is_platform_type(qualified_name):
            # Uncatalogued platform type
            result: Union[List[str], ResolutionFailure] = [OBJECT_TYPE]
        elif entry is None:
            result = ResolutionFailure(
                reference=qualified_name,
                reason="type not found on lookup path",
            )
        elif not entry.is_source:
            result = list(entry.interfaces)
        else:
            self._resolving.add(qualified_name)
            try:
                result = self._resolve_entry_supertypes(entry)
            finally:
                self._resolving.discard(qualified_name)

        self._direct_cache[qualified_name] = result
        return result

    def _resolve_entry_supertypes(self, entry: TypeEntry) -> Union[List[str], ResolutionFailure]:
        scope = self._entry_scope(entry)
        supertypes = []
        references = ([entry.superclass] if entry.superclass else []) + list(entry.interfaces)
        for reference in references:
            resolved = self.resolve_name(reference, scope, line=entry.line)
            if isinstance(resolved, ResolutionFailure):
                return resolved
            if not isinstance(resolved, ReferenceType):
                return ResolutionFailure(
                    reference=reference,
                    reason="supertype is not a class or interface type",
                    file_path=entry.file_path,
                    line=entry.line,
                )
            supertypes.append(resolved.qualified_name)

        implicit = _IMPLICIT_SUPERCLASS.get(entry.kind)
        if implicit is not None and entry.superclass is None and implicit != entry.qualified_name:
            supertypes.insert(0, implicit)
        return supertypes

    def all_ancestors(self, qualified_name: str) -> Union[List[str], ResolutionFailure]:
        """All transitive supertypes, depth-first, each listed once.

        The universal root ``java.lang.Object`` is included when reachable;
        cyclic declarations are cut at the repeated type.
        """
        return self._all_ancestors(qualified_name, frozenset())

    def _all_ancestors(
        self,
        qualified_name: str,
        visiting: FrozenSet[str],
    ) -> Union[List[str], ResolutionFailure]:
        cached = self._ancestor_cache.get(qualified_name)
        if cached is not None:
            return cached

        direct = self.direct_supertypes(qualified_name)
        if isinstance(direct, ResolutionFailure):
            return direct

        visiting = visiting | {qualified_name}
        ancestors: List[str] = []
        for supertype in direct:
            if supertype in visiting:
                logger.warning("Cyclic inheritance involving %s", supertype)
                continue
            if supertype not in ancestors:
                ancestors.append(supertype)
            indirect = self._all_ancestors(supertype, visiting)
            if isinstance(indirect, ResolutionFailure):
                return indirect
            for name in indirect:
                if name not in ancestors and name != qualified_name:
                    ancestors.append(name)

        self._ancestor_cache[qualified_name] = ancestors
        return ancestors

    def ancestor_chain(self, node: Node, scope: LexicalScope) -> Union[List[str], ResolutionFailure]:
        """Ancestry contributed by one supertype clause.

        The resolved supertype comes first, followed by each of its distinct
        transitive ancestors. ``java.lang.Object`` is removed.
        """
        resolved = self.resolve_supertype(node, scope)
        if isinstance(resolved, ResolutionFailure):
            return resolved

        ancestors = self.all_ancestors(resolved.qualified_name)
        if isinstance(ancestors, ResolutionFailure):
            return ResolutionFailure(
                reference=ancestors.reference,
                reason=f"{ancestors.reason} (ancestor of {resolved.qualified_name})",
                file_path=ancestors.file_path or scope.file_path,
                line=ancestors.line if ancestors.file_path else line_of(node),
            )

        chain = [resolved.qualified_name] + ancestors
        return [name for name in chain if name != OBJECT_TYPE]
