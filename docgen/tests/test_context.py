"""
Unit tests for context.py

Tests nested class naming, stack balance checks and the current method slot.
"""

import unittest

from docgen.context import ContextStackError, TraversalContext
from docgen.models import MethodDoc


class TestClassStack(unittest.TestCase):

    def setUp(self):
        self.context = TraversalContext(file_path="Unit.java")
        self.context.imports.package = "com.berray"

    def test_nested_names_are_dot_joined(self):
        self.context.enter("C")
        self.context.enter("B")
        inner = self.context.enter("A")
        self.assertEqual(inner.name, "C.B.A")
        self.assertEqual(self.context.depth, 3)

    def test_exit_order_is_innermost_first(self):
        self.context.enter("Outer", description="outer docs")
        self.context.enter("Inner")
        self.context.exit()
        self.context.exit()
        self.assertEqual([c.name for c in self.context.finished], ["Outer.Inner", "Outer"])
        self.assertEqual(self.context.finished[1].description, "outer docs")
        self.assertIsNone(self.context.current())

    def test_current_is_top_of_stack(self):
        self.assertIsNone(self.context.current())
        outer = self.context.enter("Outer")
        self.assertIs(self.context.current(), outer)
        inner = self.context.enter("Inner")
        self.assertIs(self.context.current(), inner)
        self.context.exit()
        self.assertIs(self.context.current(), outer)

    def test_exit_on_empty_stack(self):
        with self.assertRaises(ContextStackError):
            self.context.exit()

    def test_ensure_empty(self):
        self.context.ensure_empty()
        self.context.enter("Open")
        with self.assertRaises(ContextStackError):
            self.context.ensure_empty()

    def test_lexical_scope_tracks_enclosing_types(self):
        self.context.enter("Outer", type_parameters=("T",))
        self.context.enter("Inner")
        self.context.enter_method(MethodDoc(name="m"), type_parameters=("R",))
        scope = self.context.lexical_scope()
        self.assertEqual(scope.enclosing, ("com.berray.Outer", "com.berray.Outer.Inner"))
        self.assertEqual(scope.type_parameters, frozenset({"T", "R"}))
        self.assertEqual(scope.file_path, "Unit.java")


class TestMethodSlot(unittest.TestCase):

    def setUp(self):
        self.context = TraversalContext()

    def test_enter_method_appends_to_current_class(self):
        doc = self.context.enter("Jump")
        method = MethodDoc(name="apply")
        self.context.enter_method(method)
        self.assertIs(self.context.current_method(), method)
        self.assertEqual(doc.methods, [method])
        self.context.exit_method()
        self.assertIsNone(self.context.current_method())

    def test_current_method_is_per_class(self):
        self.context.enter("Outer")
        self.context.enter_method(MethodDoc(name="m"))
        self.context.enter("Local")
        self.assertIsNone(self.context.current_method())

    def test_method_outside_class(self):
        with self.assertRaises(ContextStackError):
            self.context.enter_method(MethodDoc(name="orphan"))

    def test_nested_method_in_same_class(self):
        self.context.enter("Jump")
        self.context.enter_method(MethodDoc(name="a"))
        with self.assertRaises(ContextStackError):
            self.context.enter_method(MethodDoc(name="b"))

    def test_exit_class_with_open_method(self):
        self.context.enter("Jump")
        self.context.enter_method(MethodDoc(name="a"))
        with self.assertRaises(ContextStackError):
            self.context.exit()

    def test_exit_method_without_open_method(self):
        self.context.enter("Jump")
        with self.assertRaises(ContextStackError):
            self.context.exit_method()


if __name__ == "__main__":
    unittest.main()
