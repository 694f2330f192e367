"""
AST traversal and class documentation extraction.

This module walks a parsed Java source unit depth-first and builds one
ClassDoc per class-like declaration. Each node kind that matters has its
own handler; every other node is walked through to its named children.

Handlers return None to continue or a ``ResolutionFailure`` to stop the
walk. A failure is fatal for the whole run and is propagated unchanged to
the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from tree_sitter import Node, Tree

from docgen.config import (
    CATCH_PARAMETER_NODE,
    CATCH_TYPE_NODE,
    CLASS_BODY_NODE,
    COMMENT_NODES,
    DEFAULT_INCLUDE_INTERFACES,
    EXPLICIT_TYPE_TAG,
    FORMAL_PARAMETER_NODE,
    IMPORT_NODE,
    INFERRED_PARAMETERS_NODE,
    LAMBDA_NODE,
    METHOD_NODE,
    MODIFIER_KEYWORDS,
    MODIFIERS_NODE,
    PACKAGE_NODE,
    SPREAD_PARAMETER_NODE,
    VAR_TYPE_NAME,
)
from docgen.context import TraversalContext
from docgen.javadoc import Javadoc, parse_javadoc
from docgen.models import ClassDoc, MethodDoc
from symbols.resolver import ResolutionFailure, TypeResolver, display_name
from symbols.syntax import (
    CLASS_DECLARATION_TYPES,
    IMPLEMENTS_CLAUSE,
    declaration_body,
    declaration_name,
    is_local_declaration,
    line_of,
    node_text,
    parse_import_declaration,
    parse_package_declaration,
    supertype_clauses,
    type_parameter_names,
    unannotated,
)

logger = logging.getLogger(__name__)

Outcome = Optional[ResolutionFailure]


@dataclass
class UnitExtraction:
    """Result of traversing one source unit.

    ``classes`` holds every finished ClassDoc in exit order, before
    selection. When ``failure`` is set the walk stopped early and
    ``classes`` is incomplete.
    """

    file_path: Optional[str]
    classes: List[ClassDoc] = field(default_factory=list)
    failure: Optional[ResolutionFailure] = None
    methods: int = 0
    parameters: int = 0
    dropped_methods: int = 0
    dropped_parameters: int = 0

    @property
    def ok(self) -> bool:
        return self.failure is None


def get_preceding_javadoc(node: Node) -> Optional[Javadoc]:
    """Javadoc comment attached to a declaration node.

    Only the nearest preceding comment counts; if that comment is not a
    Javadoc comment the declaration is undocumented.
    """
    sibling = node.prev_named_sibling
    if sibling is None or sibling.type not in COMMENT_NODES:
        return None
    return parse_javadoc(node_text(sibling))


def method_modifiers(node: Node) -> List[str]:
    """Keyword modifiers of a declaration in source order, without duplicates."""
    modifiers: List[str] = []
    for child in node.children:
        if child.type != MODIFIERS_NODE:
            continue
        for keyword in child.children:
            if keyword.type in MODIFIER_KEYWORDS and keyword.type not in modifiers:
                modifiers.append(keyword.type)
    return modifiers


def is_placeholder_type(node: Optional[Node]) -> bool:
    """True when the declared type is absent or ``var``."""
    if node is None:
        return True
    node = unannotated(node)
    return node.type == "type_identifier" and node_text(node).strip() == VAR_TYPE_NAME


class DocumentationWalker:
    """Depth-first walk of one source unit, dispatching on node type."""

    def __init__(
        self,
        context: TraversalContext,
        resolver: TypeResolver,
        include_interfaces: bool = DEFAULT_INCLUDE_INTERFACES,
    ) -> None:
        self.context = context
        self.resolver = resolver
        self.include_interfaces = include_interfaces
        self.result = UnitExtraction(file_path=context.file_path)
        self._handlers: Dict[str, Callable[[Node], Outcome]] = {
            PACKAGE_NODE: self._visit_package,
            IMPORT_NODE: self._visit_import,
            METHOD_NODE: self._visit_method,
            FORMAL_PARAMETER_NODE: self._visit_formal_parameter,
            SPREAD_PARAMETER_NODE: self._visit_spread_parameter,
            CATCH_PARAMETER_NODE: self._visit_catch_parameter,
            LAMBDA_NODE: self._visit_lambda,
            # Reached only for anonymous class bodies; declared bodies are
            # walked directly by _visit_class.
            CLASS_BODY_NODE: self._skip,
        }
        for declaration_type in CLASS_DECLARATION_TYPES:
            self._handlers[declaration_type] = self._visit_class

    def visit(self, node: Node) -> Outcome:
        handler = self._handlers.get(node.type, self._visit_children)
        return handler(node)

    def _visit_children(self, node: Node) -> Outcome:
        for child in node.named_children:
            if child.type in COMMENT_NODES:
                continue
            failure = self.visit(child)
            if failure is not None:
                return failure
        return None

    def _skip(self, node: Node) -> Outcome:
        return None

    # -- unit header ---------------------------------------------------

    def _visit_package(self, node: Node) -> Outcome:
        self.context.imports.package = parse_package_declaration(node)
        return None

    def _visit_import(self, node: Node) -> Outcome:
        decl = parse_import_declaration(node)
        if decl is not None:
            self.context.imports.add_import(decl)
        return None

    # -- declarations --------------------------------------------------

    def _visit_class(self, node: Node) -> Outcome:
        name = declaration_name(node)
        if not name:
            logger.debug("Skipping unnamed declaration at line %d", line_of(node))
            return None

        if is_local_declaration(node):
            self._register_local_class(node)

        javadoc = get_preceding_javadoc(node)
        self.context.enter(
            name,
            description=javadoc.description_or_none() if javadoc else None,
            type_parameters=type_parameter_names(node),
        )
        try:
            failure = self._visit_supertypes(node)
            if failure is not None:
                return failure
            body = declaration_body(node)
            if body is None:
                return None
            return self._visit_children(body)
        finally:
            self.context.exit()

    def _register_local_class(self, node: Node) -> None:
        # Local classes are nameable from the point of declaration onwards
        scope = self.context.lexical_scope()
        added = self.resolver.index.add_declaration(
            node,
            self.context.imports,
            scope.enclosing,
            type_parameters=tuple(sorted(scope.type_parameters)),
            file_path=self.context.file_path,
        )
        logger.debug("Registered %d local types at line %d", added, line_of(node))

    def _visit_supertypes(self, node: Node) -> Outcome:
        for clause, type_node in supertype_clauses(node):
            if clause == IMPLEMENTS_CLAUSE and not self.include_interfaces:
                continue
            chain = self.resolver.ancestor_chain(type_node, self.context.lexical_scope())
            if isinstance(chain, ResolutionFailure):
                return chain
            current = self.context.current()
            for ancestor in chain:
                current.add_ancestor(ancestor)
        return None

    def _visit_method(self, node: Node) -> Outcome:
        name = declaration_name(node) or node_text(node.child_by_field_name("name"))
        if self.context.current() is None:
            logger.warning("No current class for method %s at line %d; dropped", name, line_of(node))
            self.result.dropped_methods += 1
            return None

        method = MethodDoc(name=name, modifiers=method_modifiers(node))
        javadoc = get_preceding_javadoc(node)
        if javadoc is not None:
            method.description = javadoc.description_or_none()
            method.explicit_type = javadoc.first_tag(EXPLICIT_TYPE_TAG) or None

        self.context.enter_method(method, type_parameter_names(node))
        self.result.methods += 1
        try:
            parameters = node.child_by_field_name("parameters")
            if parameters is not None:
                failure = self.visit(parameters)
                if failure is not None:
                    return failure
            body = node.child_by_field_name("body")
            if body is None:
                return None
            return self.visit(body)
        finally:
            self.context.exit_method()

    # -- parameters ----------------------------------------------------

    def _current_method_for(self, parameter_name: str, node: Node) -> Optional[MethodDoc]:
        method = self.context.current_method()
        if method is None:
            owner = self.context.current()
            logger.warning(
                "in class %s: no current method for parameter %s at line %d",
                owner.name if owner is not None else "<none>",
                parameter_name,
                line_of(node),
            )
            self.result.dropped_parameters += 1
        return method

    def _add_parameter(self, name: str, type_node: Optional[Node], node: Node, dimensions: str = "") -> Outcome:
        method = self._current_method_for(name, node)
        if method is None:
            return None

        if is_placeholder_type(type_node):
            method.add_parameter(name, None)
        else:
            resolved = self.resolver.resolve_parameter_type(
                type_node, self.context.lexical_scope(), extra_dimensions=dimensions
            )
            if isinstance(resolved, ResolutionFailure):
                return resolved
            method.add_parameter(name, display_name(resolved))
        self.result.parameters += 1
        return None

    def _visit_formal_parameter(self, node: Node) -> Outcome:
        name = node_text(node.child_by_field_name("name"))
        dimensions = "".join(node_text(node.child_by_field_name("dimensions")).split())
        return self._add_parameter(name, node.child_by_field_name("type"), node, dimensions)

    def _visit_spread_parameter(self, node: Node) -> Outcome:
        # Varargs resolve to their element type: ``String... names`` -> String
        type_node = None
        name = ""
        for child in node.named_children:
            if child.type == "variable_declarator":
                name = node_text(child.child_by_field_name("name"))
            elif child.type == "identifier" and type_node is not None:
                name = node_text(child)
            elif child.type != MODIFIERS_NODE and type_node is None:
                type_node = child
        return self._add_parameter(name, type_node, node)

    def _visit_catch_parameter(self, node: Node) -> Outcome:
        # Attached to the enclosing method, like lambda parameters
        name = node_text(node.child_by_field_name("name"))
        dimensions = "".join(node_text(node.child_by_field_name("dimensions")).split())
        type_node = None
        for child in node.named_children:
            if child.type == CATCH_TYPE_NODE:
                type_node = child
                break
        return self._add_parameter(name, type_node, node, dimensions)

    def _visit_lambda(self, node: Node) -> Outcome:
        parameters = node.child_by_field_name("parameters")
        if parameters is not None:
            if parameters.type == "identifier":
                failure = self._add_parameter(node_text(parameters), None, parameters)
            elif parameters.type == INFERRED_PARAMETERS_NODE:
                failure = None
                for identifier in parameters.named_children:
                    failure = self._add_parameter(node_text(identifier), None, identifier)
                    if failure is not None:
                        break
            else:
                failure = self.visit(parameters)
            if failure is not None:
                return failure

        body = node.child_by_field_name("body")
        if body is None:
            return None
        return self.visit(body)


def extract_classes_from_tree(
    tree: Tree,
    resolver: TypeResolver,
    file_path: Optional[str] = None,
    include_interfaces: bool = DEFAULT_INCLUDE_INTERFACES,
) -> UnitExtraction:
    """Traverse one parsed source unit with a fresh context.

    This is the main entry point for per-unit extraction.

    Args:
        tree: The parsed AST tree.
        resolver: Type resolver backed by the run's type index.
        file_path: File path used in diagnostics.
        include_interfaces: Whether implements clauses contribute ancestors.

    Returns:
        UnitExtraction with every finished ClassDoc (unfiltered) or the
        resolution failure that stopped the walk.
    """
    context = TraversalContext(file_path=file_path)
    walker = DocumentationWalker(context, resolver, include_interfaces=include_interfaces)
    failure = walker.visit(tree.root_node)
    context.ensure_empty()

    result = walker.result
    result.classes = list(context.finished)
    result.failure = failure
    if failure is not None:
        logger.error("Resolution failed in %s: %s", file_path, failure.describe())
    else:
        logger.debug("Extracted %d classes from %s", len(result.classes), file_path)
    return result
