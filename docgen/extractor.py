"""
High-level orchestrator for Java documentation extraction.

A run has two passes. The index pass parses every source unit of the
source root and of each lookup path and registers their types. The
extraction pass traverses each unit of the source root with a fresh
context and keeps the interesting classes. The first resolution failure
stops the run and no classes are returned.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional, Tuple

from tree_sitter import Tree

from core.structured_logging import phase_scope, unit_scope
from docgen.config import (
    DEFAULT_INCLUDE_INTERFACES,
    DEFAULT_INTERESTING_BASE_TYPES,
    JAVA_EXTENSIONS,
    SKIPPED_DIRECTORIES,
)
from docgen.models import ClassDoc
from docgen.parser import count_error_nodes, parse_file
from docgen.selection import select_interesting
from docgen.traversal import UnitExtraction, extract_classes_from_tree
from symbols.resolver import ResolutionFailure, TypeResolver
from symbols.type_index import TypeIndex

logger = logging.getLogger(__name__)


@dataclass
class ParsedUnit:
    """A parsed source file."""

    file_path: str
    relative_path: str
    tree: Tree
    parse_error_count: int


class ExtractionStats:
    """Statistics for an extraction run."""

    def __init__(self):
        self.files_indexed = 0
        self.files_processed = 0
        self.parse_errors = 0
        self.types_indexed = 0
        self.classes_seen = 0
        self.classes_kept = 0
        self.methods = 0
        self.parameters = 0
        self.dropped_methods = 0
        self.dropped_parameters = 0

    def record_unit(self, unit: UnitExtraction, kept: int) -> None:
        self.files_processed += 1
        self.classes_seen += len(unit.classes)
        self.classes_kept += kept
        self.methods += unit.methods
        self.parameters += unit.parameters
        self.dropped_methods += unit.dropped_methods
        self.dropped_parameters += unit.dropped_parameters

    def to_dict(self) -> Dict[str, int]:
        """Convert stats to dictionary."""
        return {
            "files_indexed": self.files_indexed,
            "files_processed": self.files_processed,
            "parse_errors": self.parse_errors,
            "types_indexed": self.types_indexed,
            "classes_seen": self.classes_seen,
            "classes_kept": self.classes_kept,
            "methods": self.methods,
            "parameters": self.parameters,
            "dropped_methods": self.dropped_methods,
            "dropped_parameters": self.dropped_parameters,
        }

    def __str__(self) -> str:
        """String representation of stats."""
        return (
            f"ExtractionStats(processed={self.files_processed}, "
            f"classes={self.classes_seen}, kept={self.classes_kept}, "
            f"parse_errors={self.parse_errors}, "
            f"dropped_parameters={self.dropped_parameters})"
        )


@dataclass
class DocgenResult:
    """Outcome of a documentation run.

    ``classes`` holds the kept classes in file order; it is empty when
    ``failure`` is set.
    """

    classes: List[ClassDoc] = field(default_factory=list)
    stats: ExtractionStats = field(default_factory=ExtractionStats)
    failure: Optional[ResolutionFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def discover_java_files(directory: str) -> List[str]:
    """Recursively discover all Java source files in a directory.

    Args:
        directory: Root directory to search.

    Returns:
        Sorted list of absolute paths to .java files.
    """
    java_files = []
    directory = os.path.abspath(directory)

    logger.info("Discovering Java files in %s", directory)

    for root, dirs, files in os.walk(directory):
        # Skip hidden directories and common build output directories
        dirs[:] = [d for d in dirs if not d.startswith('.') and d not in SKIPPED_DIRECTORIES]

        for file in files:
            ext = os.path.splitext(file)[1]
            if ext in JAVA_EXTENSIONS:
                java_files.append(os.path.join(root, file))

    logger.info("Found %d Java files", len(java_files))
    return sorted(java_files)


def parse_source_root(directory: str) -> List[ParsedUnit]:
    """Parse every Java file under ``directory``.

    Raises:
        FileNotFoundError: If directory does not exist.
        NotADirectoryError: If directory is a file.
    """
    directory = os.path.abspath(directory)
    if not os.path.exists(directory):
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"Not a directory: {directory}")

    units = []
    for file_path in discover_java_files(directory):
        relative_path = os.path.relpath(file_path, directory)
        with unit_scope(relative_path):
            tree, _ = parse_file(file_path)
            error_count = count_error_nodes(tree)
            if error_count:
                logger.warning(
                    "File %s contains syntax errors (%d error nodes)",
                    relative_path,
                    error_count,
                )
        units.append(
            ParsedUnit(
                file_path=file_path,
                relative_path=relative_path,
                tree=tree,
                parse_error_count=error_count,
            )
        )
    return units


def build_type_index(
    unit_groups: Iterable[List[ParsedUnit]],
    external_types: Optional[Mapping[str, Iterable[str]]] = None,
) -> TypeIndex:
    """Build the run's type index.

    Source declarations are registered first, then configured external
    stubs, then the JDK catalog; the first registration of a name wins.
    """
    index = TypeIndex()
    for units in unit_groups:
        for unit in units:
            with unit_scope(unit.relative_path):
                index.index_tree(unit.tree, unit.relative_path)
    if external_types:
        index.add_external_types(external_types)
    index.add_jdk_types()
    logger.info("Indexed %d types", len(index))
    return index


def extract_unit(
    unit: ParsedUnit,
    resolver: TypeResolver,
    include_interfaces: bool = DEFAULT_INCLUDE_INTERFACES,
) -> UnitExtraction:
    """Traverse a single parsed unit."""
    with unit_scope(unit.relative_path):
        logger.debug("Extracting classes from %s", unit.relative_path)
        return extract_classes_from_tree(
            unit.tree,
            resolver,
            file_path=unit.relative_path,
            include_interfaces=include_interfaces,
        )


def extract_directory(
    source_root: str,
    lookup_paths: Iterable[str] = (),
    external_types: Optional[Mapping[str, Iterable[str]]] = None,
    interesting_base_types: AbstractSet[str] = DEFAULT_INTERESTING_BASE_TYPES,
    include_interfaces: bool = DEFAULT_INCLUDE_INTERFACES,
) -> DocgenResult:
    """Extract documentation of interesting classes from a source tree.

    Args:
        source_root: Directory whose classes are documented.
        lookup_paths: Additional source directories indexed for type
            resolution only.
        external_types: Type stubs ``fqn -> supertype fqns``.
        interesting_base_types: Classes are kept when one of their
            ancestors is in this set.
        include_interfaces: Whether implements clauses contribute ancestors.

    Returns:
        DocgenResult with the kept classes, or with the resolution failure
        that stopped the run.

    Raises:
        FileNotFoundError: If the source root or a lookup path does not exist.

    Example:
        >>> result = extract_directory("src/main/java")
        >>> print(f"Kept {result.stats.classes_kept} of {result.stats.classes_seen} classes")
    """
    stats = ExtractionStats()

    with phase_scope("index"):
        source_units = parse_source_root(source_root)
        lookup_groups: List[List[ParsedUnit]] = [
            parse_source_root(path) for path in lookup_paths
        ]
        stats.files_indexed = len(source_units) + sum(len(g) for g in lookup_groups)
        stats.parse_errors = sum(u.parse_error_count for u in source_units)
        index = build_type_index([source_units] + lookup_groups, external_types)
        stats.types_indexed = len(index)

    if not source_units:
        logger.warning("No Java files found in %s", source_root)
        return DocgenResult(stats=stats)

    resolver = TypeResolver(index)
    kept: List[ClassDoc] = []

    with phase_scope("extract"):
        for unit in source_units:
            extraction = extract_unit(unit, resolver, include_interfaces=include_interfaces)
            if not extraction.ok:
                stats.files_processed += 1
                logger.error("Stopping run: %s", extraction.failure.describe())
                return DocgenResult(stats=stats, failure=extraction.failure)

            selected = select_interesting(extraction.classes, interesting_base_types)
            stats.record_unit(extraction, kept=len(selected))
            kept.extend(selected)

    logger.info("Extraction complete: %s", stats)
    return DocgenResult(classes=kept, stats=stats)


def extract_to_dict_list(source_root: str, **kwargs) -> Tuple[List[Dict], Optional[ResolutionFailure]]:
    """Extract and return kept classes as dictionaries ready for JSON.

    Keyword arguments are passed to ``extract_directory``.
    """
    result = extract_directory(source_root, **kwargs)
    return [c.to_dict() for c in result.classes], result.failure
