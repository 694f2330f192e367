"""
Unit tests for traversal.py

Tests per-unit extraction: nesting, ancestors, Javadoc attachment,
modifiers and parameter type resolution.
"""

import unittest

from docgen.config import DEFAULT_INTERESTING_BASE_TYPES
from docgen.parser import parse_bytes
from docgen.selection import select_interesting
from docgen.traversal import extract_classes_from_tree, method_modifiers
from symbols.resolver import ResolutionFailure, TypeResolver
from symbols.type_index import TypeIndex


COMPONENT = "com.berray.components.core.Component"


def extract(source, external=None, include_interfaces=True):
    """Index and traverse a single in-memory source unit."""
    tree = parse_bytes(source)
    index = TypeIndex()
    index.index_tree(tree, "unit0.java")
    if external:
        index.add_external_types(external)
    index.add_jdk_types()
    return extract_classes_from_tree(
        tree,
        TypeResolver(index),
        file_path="unit0.java",
        include_interfaces=include_interfaces,
    )


def by_name(unit):
    return {c.name: c for c in unit.classes}


class TestComponentExtraction(unittest.TestCase):
    """The documented component example, end to end for one unit."""

    SOURCE = b"""
package com.berray.components.movement;

import com.berray.components.core.Component;

/** Lets an object jump. */
public class Jump extends Component {
  /**
   * does a jump
   * @type number
   */
  public void apply(float force) {
  }
}
"""

    def test_jump(self):
        unit = extract(self.SOURCE, external={COMPONENT: ["java.lang.Object"]})
        self.assertTrue(unit.ok)
        self.assertEqual(len(unit.classes), 1)
        self.assertEqual(
            unit.classes[0].to_dict(),
            {
                "name": "Jump",
                "description": "Lets an object jump.",
                "ancestors": [COMPONENT],
                "methods": [
                    {
                        "name": "apply",
                        "description": "does a jump",
                        "explicit_type": "number",
                        "modifiers": ["public"],
                        "parameters": [{"name": "force", "resolved_type": "java.lang.Float"}],
                    }
                ],
            },
        )
        self.assertEqual(unit.methods, 1)
        self.assertEqual(unit.parameters, 1)

    def test_missing_base_type_fails(self):
        unit = extract(self.SOURCE)
        self.assertFalse(unit.ok)
        self.assertIsInstance(unit.failure, ResolutionFailure)
        self.assertEqual(unit.failure.reference, "Component")
        self.assertIn(COMPONENT, unit.failure.reason)


class TestNesting(unittest.TestCase):

    def test_nested_classes_finish_innermost_first(self):
        unit = extract(b"""
class Outer {
  static class Middle {
    class Inner { void deep() {} }
  }
  void top() {}
}
""")
        self.assertEqual([c.name for c in unit.classes], ["Outer.Middle.Inner", "Outer.Middle", "Outer"])
        classes = by_name(unit)
        self.assertEqual([m.name for m in classes["Outer"].methods], ["top"])
        self.assertEqual([m.name for m in classes["Outer.Middle.Inner"].methods], ["deep"])

    def test_no_supertypes_means_no_ancestors(self):
        unit = extract(b"class Plain { }")
        self.assertEqual(unit.classes[0].ancestors, [])
        self.assertIsNone(unit.classes[0].description)

    def test_member_type_reference(self):
        unit = extract(b"""
package p;
class Outer {
  static class Base {}
  static class Sub extends Base {}
}
""")
        self.assertEqual(by_name(unit)["Outer.Sub"].ancestors, ["p.Outer.Base"])

    def test_enum_methods(self):
        unit = extract(b"enum Dir { UP, DOWN; int dy() { return 0; } }")
        self.assertEqual([m.name for m in unit.classes[0].methods], ["dy"])

    def test_anonymous_class_body_is_skipped(self):
        unit = extract(b"""
class Host {
  void start() {
    Runnable r = new Runnable() {
      public void run() {}
    };
  }
}
""")
        self.assertEqual([c.name for c in unit.classes], ["Host"])
        self.assertEqual([m.name for m in unit.classes[0].methods], ["start"])

    def test_local_class_gets_its_own_doc(self):
        unit = extract(b"""
class Host {
  void start(int a) {
    class Helper { void help(int b) {} }
  }
}
""")
        classes = by_name(unit)
        self.assertEqual([c.name for c in unit.classes], ["Host.Helper", "Host"])
        self.assertEqual([p.name for p in classes["Host"].methods[0].parameters], ["a"])
        self.assertEqual([p.name for p in classes["Host.Helper"].methods[0].parameters], ["b"])

    def test_local_class_is_resolvable(self):
        unit = extract(b"""
class Host {
  void start() {
    class Node { void link(Node other) {} }
  }
}
""")
        self.assertTrue(unit.ok)
        link = by_name(unit)["Host.Node"].methods[0]
        self.assertEqual([(p.name, p.resolved_type) for p in link.parameters], [("other", "Host.Node")])

    def test_local_class_extends_earlier_local_class(self):
        unit = extract(b"""
package p;
class Host {
  void start() {
    class Shape {}
    class Square extends Shape { void copy(Square from) {} }
  }
}
""")
        self.assertTrue(unit.ok)
        square = by_name(unit)["Host.Square"]
        self.assertEqual(square.ancestors, ["p.Host.Shape"])
        self.assertEqual(square.methods[0].parameters[0].resolved_type, "p.Host.Square")

    def test_inherited_member_type(self):
        unit = extract(b"""
class Base { static class Inner {} }
class Sub extends Base { void m(Inner i) {} }
""")
        self.assertTrue(unit.ok)
        method = by_name(unit)["Sub"].methods[0]
        self.assertEqual(method.parameters[0].resolved_type, "Base.Inner")

    def test_own_member_type_shadows_inherited(self):
        unit = extract(b"""
class Base { static class Inner {} }
class Sub extends Base {
  static class Inner {}
  void m(Inner i) {}
}
""")
        method = by_name(unit)["Sub"].methods[0]
        self.assertEqual(method.parameters[0].resolved_type, "Sub.Inner")


class TestAncestors(unittest.TestCase):

    def test_extends_then_implements(self):
        unit = extract(b"""
class Base {}
class Mover extends Base implements Runnable {}
""")
        self.assertEqual(by_name(unit)["Mover"].ancestors, ["Base", "java.lang.Runnable"])

    def test_transitive_chain(self):
        unit = extract(b"""
package com.game;
import java.util.ArrayList;
class Bag extends ArrayList<String> {}
""")
        ancestors = by_name(unit)["Bag"].ancestors
        self.assertEqual(ancestors[:3], ["java.util.ArrayList", "java.util.AbstractList", "java.util.AbstractCollection"])
        self.assertIn("java.util.List", ancestors)
        self.assertNotIn("java.lang.Object", ancestors)

    def test_duplicates_across_clauses_are_kept(self):
        unit = extract(b"""
interface Tag {}
class Parent implements Tag {}
class Child extends Parent implements Tag {}
""")
        self.assertEqual(by_name(unit)["Child"].ancestors, ["Parent", "Tag", "Tag"])

    def test_interfaces_can_be_excluded(self):
        source = b"class Task implements Runnable {}"
        self.assertEqual(extract(source).classes[0].ancestors, ["java.lang.Runnable"])
        self.assertEqual(extract(source, include_interfaces=False).classes[0].ancestors, [])

    def test_unrelated_base_is_seen_but_not_selected(self):
        unit = extract(b"""
class Helper {}
class Thing extends Helper {}
""")
        self.assertEqual(by_name(unit)["Thing"].ancestors, ["Helper"])
        self.assertEqual(select_interesting(unit.classes, DEFAULT_INTERESTING_BASE_TYPES), [])

    def test_unresolvable_supertype_stops_walk(self):
        unit = extract(b"""
class First { void ok() {} }
class Second extends Nowhere {}
class Third {}
""")
        self.assertFalse(unit.ok)
        self.assertEqual(unit.failure.reference, "Nowhere")
        self.assertEqual(unit.failure.file_path, "unit0.java")
        self.assertEqual(unit.failure.line, 3)
        self.assertNotIn("Third", [c.name for c in unit.classes])


class TestMethods(unittest.TestCase):

    def test_modifiers_skip_annotations(self):
        tree = parse_bytes(b"class A { @Deprecated public static synchronized void x() {} }")
        method = tree.root_node.named_children[0].child_by_field_name("body").named_children[0]
        self.assertEqual(method_modifiers(method), ["public", "static", "synchronized"])

    def test_javadoc_must_be_nearest_comment(self):
        unit = extract(b"""
class D {
  /** Documented. */
  // stray note
  void hidden() {}

  /** Visible. */
  @Override
  public String toString() { return ""; }

  /* plain block */
  void plain() {}
}
""")
        methods = {m.name: m for m in unit.classes[0].methods}
        self.assertIsNone(methods["hidden"].description)
        self.assertEqual(methods["toString"].description, "Visible.")
        self.assertIsNone(methods["plain"].description)

    def test_type_tag_without_description(self):
        unit = extract(b"""
class Pos {
  /** @type Vec2 */
  Object get() { return null; }
}
""")
        method = unit.classes[0].methods[0]
        self.assertIsNone(method.description)
        self.assertEqual(method.explicit_type, "Vec2")

    def test_interface_method_declarations(self):
        unit = extract(b"interface Action { void run(String name); }")
        method = unit.classes[0].methods[0]
        self.assertEqual(method.parameters[0].resolved_type, "java.lang.String")


class TestParameters(unittest.TestCase):

    def _params(self, unit, method_name):
        for cls in unit.classes:
            for method in cls.methods:
                if method.name == method_name:
                    return [(p.name, p.resolved_type) for p in method.parameters]
        raise AssertionError(f"method {method_name} not found")

    def test_primitives_are_boxed(self):
        unit = extract(b"class M { void m(int a, boolean b, char c, double d, long e) {} }")
        self.assertEqual(
            self._params(unit, "m"),
            [
                ("a", "java.lang.Integer"),
                ("b", "java.lang.Boolean"),
                ("c", "java.lang.Character"),
                ("d", "java.lang.Double"),
                ("e", "java.lang.Long"),
            ],
        )

    def test_reference_types_are_qualified(self):
        unit = extract(b"""
import java.util.List;
import java.util.Map;
class M { void m(List<String> items, Map.Entry<String, Integer> entry, java.io.File file) {} }
""")
        self.assertEqual(
            self._params(unit, "m"),
            [
                ("items", "java.util.List"),
                ("entry", "java.util.Map.Entry"),
                ("file", "java.io.File"),
            ],
        )

    def test_varargs_use_element_type(self):
        unit = extract(b"class M { void m(int count, String... labels) {} }")
        self.assertEqual(
            self._params(unit, "m"),
            [("count", "java.lang.Integer"), ("labels", "java.lang.String")],
        )

    def test_arrays_and_type_variables(self):
        unit = extract(b"""
class Box<T> {
  <R> void m(T value, R other, int[] xs, String names[]) {}
}
""")
        self.assertEqual(
            self._params(unit, "m"),
            [
                ("value", "unknown: type variable T"),
                ("other", "unknown: type variable R"),
                ("xs", "unknown: int[]"),
                ("names", "unknown: java.lang.String[]"),
            ],
        )

    def test_lambda_parameters_join_enclosing_method(self):
        unit = extract(b"""
import java.util.List;
import java.util.function.BiFunction;
import java.util.function.Function;
class M {
  void run(List<String> items) {
    items.forEach(item -> {});
    BiFunction<Integer, Integer, Integer> f = (a, b) -> a;
    Function<String, String> g = (String s) -> s;
  }
}
""")
        self.assertEqual(
            self._params(unit, "run"),
            [
                ("items", "java.util.List"),
                ("item", None),
                ("a", None),
                ("b", None),
                ("s", "java.lang.String"),
            ],
        )

    def test_var_lambda_parameter_has_no_type(self):
        unit = extract(b"""
import java.util.function.Consumer;
class M { void run() { Consumer<String> c = (var v) -> {}; } }
""")
        self.assertEqual(self._params(unit, "run"), [("v", None)])

    def test_constructor_parameters_are_dropped(self):
        unit = extract(b"class C { C(int x) {} void m(int y) {} }")
        self.assertEqual([m.name for m in unit.classes[0].methods], ["m"])
        self.assertEqual(self._params(unit, "m"), [("y", "java.lang.Integer")])
        self.assertEqual(unit.dropped_parameters, 1)

    def test_field_lambda_parameters_are_dropped(self):
        unit = extract(b"""
import java.util.function.Function;
class C { Function<String, String> f = s -> s; }
""")
        self.assertEqual(unit.classes[0].methods, [])
        self.assertEqual(unit.dropped_parameters, 1)

    def test_catch_parameter_joins_enclosing_method(self):
        unit = extract(b"""
class M {
  void m(int tries) {
    try { tries++; } catch (RuntimeException e) { }
  }
}
""")
        self.assertEqual(
            self._params(unit, "m"),
            [("tries", "java.lang.Integer"), ("e", "java.lang.RuntimeException")],
        )

    def test_multi_catch_parameter(self):
        unit = extract(b"""
class M {
  void m() {
    try { } catch (IllegalStateException | IllegalArgumentException e) { }
  }
}
""")
        self.assertEqual(
            self._params(unit, "m"),
            [("e", "unknown: java.lang.IllegalStateException | java.lang.IllegalArgumentException")],
        )

    def test_unresolvable_catch_type_stops_walk(self):
        unit = extract(b"class M { void m() { try { } catch (NoSuchThing e) { } } }")
        self.assertFalse(unit.ok)
        self.assertEqual(unit.failure.reference, "NoSuchThing")

    def test_unresolvable_parameter_stops_walk(self):
        unit = extract(b"class E {\n  void m(Missing x) {}\n}")
        self.assertFalse(unit.ok)
        self.assertEqual(unit.failure.reference, "Missing")
        self.assertEqual(unit.failure.line, 2)
        self.assertEqual(unit.parameters, 0)


class TestPlatformTypes(unittest.TestCase):
    """JDK types outside the built-in table."""

    def _param_types(self, unit):
        return [p.resolved_type for p in unit.classes[0].methods[0].parameters]

    def test_imported_platform_type(self):
        unit = extract(b"""
import java.util.stream.Stream;
class M { void m(Stream<String> s) {} }
""")
        self.assertTrue(unit.ok)
        self.assertEqual(self._param_types(unit), ["java.util.stream.Stream"])

    def test_java_lang_type(self):
        unit = extract(b"class M { void m(StringBuffer sb, StackTraceElement frame) {} }")
        self.assertTrue(unit.ok)
        self.assertEqual(self._param_types(unit), ["java.lang.StringBuffer", "java.lang.StackTraceElement"])

    def test_fully_qualified_platform_type(self):
        unit = extract(b"class M { void m(java.util.concurrent.Future<?> f, javax.swing.JPanel p) {} }")
        self.assertTrue(unit.ok)
        self.assertEqual(self._param_types(unit), ["java.util.concurrent.Future", "javax.swing.JPanel"])

    def test_platform_supertype_has_object_as_only_ancestor(self):
        unit = extract(b"""
import java.util.concurrent.ThreadPoolExecutor;
class Pool extends ThreadPoolExecutor {}
""")
        self.assertTrue(unit.ok)
        self.assertEqual(unit.classes[0].ancestors, ["java.util.concurrent.ThreadPoolExecutor"])

    def test_unknown_non_platform_import_still_fails(self):
        unit = extract(b"""
import org.missing.Widget;
class M { void m(Widget w) {} }
""")
        self.assertFalse(unit.ok)
        self.assertIn("org.missing.Widget", unit.failure.reason)


if __name__ == "__main__":
    unittest.main()
