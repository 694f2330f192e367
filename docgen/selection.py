"""Selection of the classes worth documenting."""

from typing import AbstractSet, Iterable, List

from docgen.models import ClassDoc


def is_interesting(class_doc: ClassDoc, interesting_base_types: AbstractSet[str]) -> bool:
    """True iff the class has at least one interesting base type among its ancestors."""
    return any(ancestor in interesting_base_types for ancestor in class_doc.ancestors)


def select_interesting(
    classes: Iterable[ClassDoc],
    interesting_base_types: AbstractSet[str],
) -> List[ClassDoc]:
    """Keep interesting classes, preserving their order."""
    return [c for c in classes if is_interesting(c, interesting_base_types)]
