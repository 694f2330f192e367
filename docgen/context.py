"""
Class context tracking for a single source unit traversal.

A ``TraversalContext`` is created fresh for each source unit. It owns the
unit's import table, the stack of enclosing class declarations and the
list of finished ClassDocs.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from docgen.models import ClassDoc, MethodDoc
from symbols.resolver import LexicalScope
from symbols.type_index import ImportScope

logger = logging.getLogger(__name__)


class ContextStackError(RuntimeError):
    """Raised on mismatched enter/exit calls (a traversal defect)."""


@dataclass
class ClassFrame:
    """One entry of the class context stack."""

    doc: ClassDoc
    qualified_name: str
    type_parameters: Tuple[str, ...] = ()
    active_method: Optional[MethodDoc] = None
    method_type_parameters: Tuple[str, ...] = ()


class TraversalContext:
    """Per-unit traversal state: imports, class stack, finished classes."""

    def __init__(self, file_path: Optional[str] = None) -> None:
        self.file_path = file_path
        self.imports = ImportScope()
        self.finished: List[ClassDoc] = []
        self._stack: List[ClassFrame] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    def enter(
        self,
        simple_name: str,
        description: Optional[str] = None,
        type_parameters: Tuple[str, ...] = (),
    ) -> ClassDoc:
        """Push a new ClassDoc qualified by the currently enclosing classes."""
        if self._stack:
            parent = self._stack[-1]
            name = f"{parent.doc.name}.{simple_name}"
            qualified_name = f"{parent.qualified_name}.{simple_name}"
        else:
            name = simple_name
            qualified_name = self.imports.qualify(simple_name)

        doc = ClassDoc(name=name, description=description)
        self._stack.append(
            ClassFrame(doc=doc, qualified_name=qualified_name, type_parameters=type_parameters)
        )
        logger.debug("Entered class %s", name)
        return doc

    def exit(self) -> ClassDoc:
        """Pop the current ClassDoc and append it to the finished list."""
        if not self._stack:
            raise ContextStackError("exit() called with an empty class stack")
        frame = self._stack.pop()
        if frame.active_method is not None:
            raise ContextStackError(
                f"class {frame.doc.name} exited while method "
                f"{frame.active_method.name} is still open"
            )
        self.finished.append(frame.doc)
        logger.debug("Exited class %s", frame.doc.name)
        return frame.doc

    def current(self) -> Optional[ClassDoc]:
        """Top of the class stack, or None outside any class."""
        return self._stack[-1].doc if self._stack else None

    def enter_method(self, method: MethodDoc, type_parameters: Tuple[str, ...] = ()) -> None:
        """Append ``method`` to the current class and make it current."""
        if not self._stack:
            raise ContextStackError(f"method {method.name} entered outside any class")
        frame = self._stack[-1]
        if frame.active_method is not None:
            raise ContextStackError(
                f"method {method.name} entered while {frame.active_method.name} is open"
            )
        frame.doc.add_method(method)
        frame.active_method = method
        frame.method_type_parameters = type_parameters

    def exit_method(self) -> None:
        if not self._stack or self._stack[-1].active_method is None:
            raise ContextStackError("exit_method() called with no open method")
        frame = self._stack[-1]
        frame.active_method = None
        frame.method_type_parameters = ()

    def current_method(self) -> Optional[MethodDoc]:
        """Method of the current class whose declaration is being traversed."""
        return self._stack[-1].active_method if self._stack else None

    def lexical_scope(self) -> LexicalScope:
        """Resolution scope at the current traversal position."""
        type_parameters = set()
        for frame in self._stack:
            type_parameters.update(frame.type_parameters)
            type_parameters.update(frame.method_type_parameters)
        return LexicalScope(
            imports=self.imports,
            enclosing=tuple(frame.qualified_name for frame in self._stack),
            type_parameters=frozenset(type_parameters),
            file_path=self.file_path,
        )

    def ensure_empty(self) -> None:
        """Check the stack is balanced at a unit boundary."""
        if self._stack:
            open_names = ", ".join(frame.doc.name for frame in self._stack)
            raise ContextStackError(f"class stack not empty: {open_names}")
