"""
Data models for extracted Java class documentation.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List


@dataclass
class ParameterDoc:
    """A single method parameter.

    Attributes:
        name: Parameter identifier.
        resolved_type: Boxed primitive name, fully-qualified reference type
            name, an ``unknown: ...`` diagnostic, or None when the declared
            type is a placeholder (``var``, untyped lambda parameter).
    """

    name: str
    resolved_type: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "resolved_type": self.resolved_type}


@dataclass
class MethodDoc:
    """Documentation of one declared method.

    Attributes:
        name: Method identifier as declared.
        description: Javadoc description text, or None.
        explicit_type: Payload of the first ``@type`` tag, or None.
        modifiers: Keyword modifiers in declaration order.
        parameters: Parameters in declaration order.
    """

    name: str
    description: Optional[str] = None
    explicit_type: Optional[str] = None
    modifiers: List[str] = field(default_factory=list)
    parameters: List[ParameterDoc] = field(default_factory=list)

    def add_parameter(self, name: str, resolved_type: Optional[str]) -> ParameterDoc:
        parameter = ParameterDoc(name=name, resolved_type=resolved_type)
        self.parameters.append(parameter)
        return parameter

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "explicit_type": self.explicit_type,
            "modifiers": list(self.modifiers),
            "parameters": [p.to_dict() for p in self.parameters],
        }


@dataclass
class ClassDoc:
    """Documentation of one declared class, interface, enum or record.

    Attributes:
        name: Dot-joined simple names of the enclosing classes followed by
            this class's simple name (no package prefix).
        description: Javadoc description text, or None.
        ancestors: Fully-qualified supertype names; the direct supertype of
            each clause comes first, followed by its transitive ancestors.
            ``java.lang.Object`` is never included. Not deduplicated.
        methods: Methods in declaration order.
    """

    name: str
    description: Optional[str] = None
    ancestors: List[str] = field(default_factory=list)
    methods: List[MethodDoc] = field(default_factory=list)

    def add_ancestor(self, qualified_name: str) -> None:
        self.ancestors.append(qualified_name)

    def add_method(self, method: MethodDoc) -> MethodDoc:
        self.methods.append(method)
        return method

    def to_dict(self) -> Dict[str, Any]:
        """Convert the class doc to a dictionary suitable for JSON serialization.

        Key order is fixed so that serialized output is stable across runs.
        """
        return {
            "name": self.name,
            "description": self.description,
            "ancestors": list(self.ancestors),
            "methods": [m.to_dict() for m in self.methods],
        }
