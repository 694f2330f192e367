"""
Built-in catalog of well-known JDK reference types.

Maps fully-qualified type names to their direct supertypes. Classes list
their superclass first, then their interfaces; ``java.lang.Object`` is the
implicit superclass of every class that names none.

The public types of ``java.lang`` are listed in full because they are
visible without an import. Other packages list the common types only; the
rest are covered by ``is_platform_type``.
"""

from typing import Dict, Tuple

OBJECT_TYPE: str = "java.lang.Object"

# Primitive keyword -> boxed type
BOXED_PRIMITIVES: Dict[str, str] = {
    "boolean": "java.lang.Boolean",
    "byte": "java.lang.Byte",
    "char": "java.lang.Character",
    "short": "java.lang.Short",
    "int": "java.lang.Integer",
    "long": "java.lang.Long",
    "float": "java.lang.Float",
    "double": "java.lang.Double",
    "void": "java.lang.Void",
}

_SERIALIZABLE = "java.io.Serializable"
_COMPARABLE = "java.lang.Comparable"
_ANNOTATION = "java.lang.annotation.Annotation"

JDK_TYPES: Dict[str, Tuple[str, ...]] = {
    # java.lang
    OBJECT_TYPE: (),
    "java.lang.CharSequence": (),
    _COMPARABLE: (),
    "java.lang.Iterable": (),
    "java.lang.Runnable": (),
    "java.lang.AutoCloseable": (),
    "java.lang.Cloneable": (),
    "java.lang.Appendable": (),
    "java.lang.Readable": (),
    "java.lang.ProcessHandle": (),
    "java.lang.ProcessHandle.Info": (),
    "java.lang.Thread.UncaughtExceptionHandler": (),
    "java.lang.StackWalker.StackFrame": (),
    "java.lang.Override": (_ANNOTATION,),
    "java.lang.Deprecated": (_ANNOTATION,),
    "java.lang.SuppressWarnings": (_ANNOTATION,),
    "java.lang.FunctionalInterface": (_ANNOTATION,),
    "java.lang.SafeVarargs": (_ANNOTATION,),
    "java.lang.String": (OBJECT_TYPE, _SERIALIZABLE, _COMPARABLE, "java.lang.CharSequence"),
    "java.lang.StringBuilder": (OBJECT_TYPE, _SERIALIZABLE, "java.lang.Appendable", "java.lang.CharSequence", _COMPARABLE),
    "java.lang.StringBuffer": (OBJECT_TYPE, _SERIALIZABLE, "java.lang.Appendable", "java.lang.CharSequence", _COMPARABLE),
    "java.lang.Number": (OBJECT_TYPE, _SERIALIZABLE),
    "java.lang.Integer": ("java.lang.Number", _COMPARABLE),
    "java.lang.Long": ("java.lang.Number", _COMPARABLE),
    "java.lang.Short": ("java.lang.Number", _COMPARABLE),
    "java.lang.Byte": ("java.lang.Number", _COMPARABLE),
    "java.lang.Float": ("java.lang.Number", _COMPARABLE),
    "java.lang.Double": ("java.lang.Number", _COMPARABLE),
    "java.lang.Character": (OBJECT_TYPE, _SERIALIZABLE, _COMPARABLE),
    "java.lang.Character.Subset": (OBJECT_TYPE,),
    "java.lang.Character.UnicodeBlock": ("java.lang.Character.Subset",),
    "java.lang.Character.UnicodeScript": ("java.lang.Enum",),
    "java.lang.Boolean": (OBJECT_TYPE, _SERIALIZABLE, _COMPARABLE),
    "java.lang.Void": (OBJECT_TYPE,),
    "java.lang.Enum": (OBJECT_TYPE, _COMPARABLE, _SERIALIZABLE),
    "java.lang.Record": (OBJECT_TYPE,),
    "java.lang.Class": (OBJECT_TYPE, _SERIALIZABLE),
    "java.lang.ClassLoader": (OBJECT_TYPE,),
    "java.lang.ClassValue": (OBJECT_TYPE,),
    "java.lang.InheritableThreadLocal": ("java.lang.ThreadLocal",),
    "java.lang.Math": (OBJECT_TYPE,),
    "java.lang.Module": (OBJECT_TYPE,),
    "java.lang.ModuleLayer": (OBJECT_TYPE,),
    "java.lang.ModuleLayer.Controller": (OBJECT_TYPE,),
    "java.lang.Package": (OBJECT_TYPE,),
    "java.lang.Process": (OBJECT_TYPE,),
    "java.lang.ProcessBuilder": (OBJECT_TYPE,),
    "java.lang.ProcessBuilder.Redirect": (OBJECT_TYPE,),
    "java.lang.ProcessBuilder.Redirect.Type": ("java.lang.Enum",),
    "java.lang.Runtime": (OBJECT_TYPE,),
    "java.lang.Runtime.Version": (OBJECT_TYPE, _COMPARABLE),
    "java.lang.RuntimePermission": ("java.security.BasicPermission",),
    "java.lang.SecurityManager": (OBJECT_TYPE,),
    "java.lang.StackTraceElement": (OBJECT_TYPE, _SERIALIZABLE),
    "java.lang.StackWalker": (OBJECT_TYPE,),
    "java.lang.StackWalker.Option": ("java.lang.Enum",),
    "java.lang.StrictMath": (OBJECT_TYPE,),
    "java.lang.System": (OBJECT_TYPE,),
    "java.lang.System.Logger": (),
    "java.lang.System.Logger.Level": ("java.lang.Enum",),
    "java.lang.System.LoggerFinder": (OBJECT_TYPE,),
    "java.lang.Thread": (OBJECT_TYPE, "java.lang.Runnable"),
    "java.lang.Thread.State": ("java.lang.Enum",),
    "java.lang.ThreadGroup": (OBJECT_TYPE, "java.lang.Thread.UncaughtExceptionHandler"),
    "java.lang.ThreadLocal": (OBJECT_TYPE,),
    "java.lang.Throwable": (OBJECT_TYPE, _SERIALIZABLE),
    # java.lang exceptions
    "java.lang.Exception": ("java.lang.Throwable",),
    "java.lang.RuntimeException": ("java.lang.Exception",),
    "java.lang.ArithmeticException": ("java.lang.RuntimeException",),
    "java.lang.ArrayStoreException": ("java.lang.RuntimeException",),
    "java.lang.ClassCastException": ("java.lang.RuntimeException",),
    "java.lang.EnumConstantNotPresentException": ("java.lang.RuntimeException",),
    "java.lang.IllegalArgumentException": ("java.lang.RuntimeException",),
    "java.lang.IllegalCallerException": ("java.lang.RuntimeException",),
    "java.lang.IllegalMonitorStateException": ("java.lang.RuntimeException",),
    "java.lang.IllegalStateException": ("java.lang.RuntimeException",),
    "java.lang.IllegalThreadStateException": ("java.lang.IllegalArgumentException",),
    "java.lang.IndexOutOfBoundsException": ("java.lang.RuntimeException",),
    "java.lang.ArrayIndexOutOfBoundsException": ("java.lang.IndexOutOfBoundsException",),
    "java.lang.StringIndexOutOfBoundsException": ("java.lang.IndexOutOfBoundsException",),
    "java.lang.LayerInstantiationException": ("java.lang.RuntimeException",),
    "java.lang.MatchException": ("java.lang.RuntimeException",),
    "java.lang.NegativeArraySizeException": ("java.lang.RuntimeException",),
    "java.lang.NullPointerException": ("java.lang.RuntimeException",),
    "java.lang.NumberFormatException": ("java.lang.IllegalArgumentException",),
    "java.lang.SecurityException": ("java.lang.RuntimeException",),
    "java.lang.TypeNotPresentException": ("java.lang.RuntimeException",),
    "java.lang.UnsupportedOperationException": ("java.lang.RuntimeException",),
    "java.lang.WrongThreadException": ("java.lang.RuntimeException",),
    "java.lang.CloneNotSupportedException": ("java.lang.Exception",),
    "java.lang.InterruptedException": ("java.lang.Exception",),
    "java.lang.ReflectiveOperationException": ("java.lang.Exception",),
    "java.lang.ClassNotFoundException": ("java.lang.ReflectiveOperationException",),
    "java.lang.IllegalAccessException": ("java.lang.ReflectiveOperationException",),
    "java.lang.InstantiationException": ("java.lang.ReflectiveOperationException",),
    "java.lang.NoSuchFieldException": ("java.lang.ReflectiveOperationException",),
    "java.lang.NoSuchMethodException": ("java.lang.ReflectiveOperationException",),
    # java.lang errors
    "java.lang.Error": ("java.lang.Throwable",),
    "java.lang.AssertionError": ("java.lang.Error",),
    "java.lang.ThreadDeath": ("java.lang.Error",),
    "java.lang.LinkageError": ("java.lang.Error",),
    "java.lang.BootstrapMethodError": ("java.lang.LinkageError",),
    "java.lang.ClassCircularityError": ("java.lang.LinkageError",),
    "java.lang.ClassFormatError": ("java.lang.LinkageError",),
    "java.lang.UnsupportedClassVersionError": ("java.lang.ClassFormatError",),
    "java.lang.ExceptionInInitializerError": ("java.lang.LinkageError",),
    "java.lang.IncompatibleClassChangeError": ("java.lang.LinkageError",),
    "java.lang.AbstractMethodError": ("java.lang.IncompatibleClassChangeError",),
    "java.lang.IllegalAccessError": ("java.lang.IncompatibleClassChangeError",),
    "java.lang.InstantiationError": ("java.lang.IncompatibleClassChangeError",),
    "java.lang.NoSuchFieldError": ("java.lang.IncompatibleClassChangeError",),
    "java.lang.NoSuchMethodError": ("java.lang.IncompatibleClassChangeError",),
    "java.lang.NoClassDefFoundError": ("java.lang.LinkageError",),
    "java.lang.UnsatisfiedLinkError": ("java.lang.LinkageError",),
    "java.lang.VerifyError": ("java.lang.LinkageError",),
    "java.lang.VirtualMachineError": ("java.lang.Error",),
    "java.lang.InternalError": ("java.lang.VirtualMachineError",),
    "java.lang.OutOfMemoryError": ("java.lang.VirtualMachineError",),
    "java.lang.StackOverflowError": ("java.lang.VirtualMachineError",),
    "java.lang.UnknownError": ("java.lang.VirtualMachineError",),
    # java.lang.annotation
    _ANNOTATION: (),
    "java.lang.annotation.Retention": (_ANNOTATION,),
    "java.lang.annotation.Target": (_ANNOTATION,),
    "java.lang.annotation.Documented": (_ANNOTATION,),
    "java.lang.annotation.Inherited": (_ANNOTATION,),
    # java.security
    "java.security.Permission": (OBJECT_TYPE, _SERIALIZABLE),
    "java.security.BasicPermission": ("java.security.Permission", _SERIALIZABLE),
    # java.io
    _SERIALIZABLE: (),
    "java.io.Closeable": ("java.lang.AutoCloseable",),
    "java.io.IOException": ("java.lang.Exception",),
    "java.io.File": (OBJECT_TYPE, _SERIALIZABLE, _COMPARABLE),
    "java.io.InputStream": (OBJECT_TYPE, "java.io.Closeable"),
    "java.io.OutputStream": (OBJECT_TYPE, "java.io.Closeable"),
    # java.util
    "java.util.Collection": ("java.lang.Iterable",),
    "java.util.List": ("java.util.Collection",),
    "java.util.Set": ("java.util.Collection",),
    "java.util.SortedSet": ("java.util.Set",),
    "java.util.Queue": ("java.util.Collection",),
    "java.util.Deque": ("java.util.Queue",),
    "java.util.Map": (),
    "java.util.Map.Entry": (),
    "java.util.SortedMap": ("java.util.Map",),
    "java.util.Iterator": (),
    "java.util.Comparator": (),
    "java.util.RandomAccess": (),
    "java.util.AbstractCollection": (OBJECT_TYPE, "java.util.Collection"),
    "java.util.AbstractList": ("java.util.AbstractCollection", "java.util.List"),
    "java.util.AbstractSet": ("java.util.AbstractCollection", "java.util.Set"),
    "java.util.AbstractMap": (OBJECT_TYPE, "java.util.Map"),
    "java.util.ArrayList": ("java.util.AbstractList", "java.util.List", "java.util.RandomAccess", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.LinkedList": ("java.util.AbstractList", "java.util.List", "java.util.Deque", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.HashSet": ("java.util.AbstractSet", "java.util.Set", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.LinkedHashSet": ("java.util.HashSet", "java.util.Set", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.TreeSet": ("java.util.AbstractSet", "java.util.SortedSet", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.HashMap": ("java.util.AbstractMap", "java.util.Map", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.LinkedHashMap": ("java.util.HashMap", "java.util.Map"),
    "java.util.TreeMap": ("java.util.AbstractMap", "java.util.SortedMap", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.ArrayDeque": ("java.util.AbstractCollection", "java.util.Deque", "java.lang.Cloneable", _SERIALIZABLE),
    "java.util.Optional": (OBJECT_TYPE,),
    "java.util.Objects": (OBJECT_TYPE,),
    "java.util.Random": (OBJECT_TYPE, _SERIALIZABLE),
    "java.util.UUID": (OBJECT_TYPE, _SERIALIZABLE, _COMPARABLE),
    # java.util.function
    "java.util.function.Function": (),
    "java.util.function.BiFunction": (),
    "java.util.function.UnaryOperator": ("java.util.function.Function",),
    "java.util.function.BinaryOperator": ("java.util.function.BiFunction",),
    "java.util.function.Consumer": (),
    "java.util.function.BiConsumer": (),
    "java.util.function.Supplier": (),
    "java.util.function.Predicate": (),
    "java.util.function.BiPredicate": (),
    "java.util.function.IntFunction": (),
    "java.util.function.ToIntFunction": (),
    "java.util.function.DoubleSupplier": (),
}

# Types implicitly visible in every compilation unit
IMPLICIT_IMPORT_PACKAGE: str = "java.lang"

# Packages shipped with every JRE. A name under these prefixes that is
# spelled out in full (single-type import or qualified reference) is taken
# as a platform type even when the catalog above does not list it.
PLATFORM_PACKAGE_PREFIXES: Tuple[str, ...] = ("java.", "javax.")


def is_platform_type(qualified_name: str) -> bool:
    return qualified_name.startswith(PLATFORM_PACKAGE_PREFIXES)
