"""
Build an in-memory model of the complex types declared in an XSD document.

The model maps each named complex type to the canonical description lines of
its members (see descriptors.py). Matching is done on local names within the
recognised schema namespace, so documents using `xs:`, `xsd:` or any other
prefix produce identical models.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any

from lxml import etree

from xsdiff.analyze.descriptors import (
    CATEGORIES,
    CATEGORY_LABELS,
    PRESETS,
    XSD_NAMESPACE,
    Construct,
    describe,
    local_name,
    namespace_of,
    resolve_constructs,
)
from xsdiff.exceptions import ParseFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Members of one named complex type.

    Descriptors are immutable; build them with from_members(), which keeps
    each category as an insertion-ordered set (a repeated line keeps its
    first position).
    """

    name: str
    elements: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    annotations: tuple[str, ...] = ()
    appinfos: tuple[str, ...] = ()

    @classmethod
    def from_members(cls, name: str, members: Iterable[tuple[str, str]]) -> "TypeDescriptor":
        """
        Create a descriptor from (category, line) pairs in document order.

        Example:
            >>> t = TypeDescriptor.from_members(
            ...     "Address", [("elements", "street (xs:string)"), ("elements", "street (xs:string)")]
            ... )
            >>> t.elements
            ('street (xs:string)',)
        """
        collected: dict[str, dict[str, None]] = {category: {} for category in CATEGORIES}
        for category, line in members:
            collected[category].setdefault(line, None)
        return cls(name, **{category: tuple(lines) for category, lines in collected.items()})

    def all_members(self) -> list[str]:
        """
        Flatten all members to labelled lines.

        Order is elements, attributes, annotations, appinfos; each category
        keeps its own insertion order.

        Example:
            >>> t = TypeDescriptor("Address", elements=("street (xs:string)",),
            ...                    attributes=("@country default='USA'",))
            >>> t.all_members()
            ['element: street (xs:string)', "attribute: @country default='USA'"]
        """
        return [
            f"{CATEGORY_LABELS[category]}: {line}"
            for category in CATEGORIES
            for line in getattr(self, category)
        ]


SchemaModel = dict[str, TypeDescriptor]


def _secure_parser() -> etree.XMLParser:
    # Schemas come from arbitrary folders: never expand entities or fetch DTDs
    return etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False)


class SchemaAnalyzer:
    """
    Extract complex types from XSD documents.

    Example:
        >>> analyzer = SchemaAnalyzer()
        >>> model = analyzer.analyze(Path("customer.xsd"))
        >>> for name, descriptor in model.items():
        ...     print(name, descriptor.all_members())
    """

    def __init__(
        self,
        constructs: Iterable[str] | None = None,
        namespaces: Iterable[str] | None = None,
    ):
        """
        Args:
            constructs: Local names of constructs to record (default: all known)
            namespaces: Namespace URIs treated as the schema namespace; an empty
                string also accepts unqualified tags
        """
        self.constructs: dict[str, Construct] = resolve_constructs(constructs)
        self.namespaces: frozenset[str] = frozenset(
            namespaces if namespaces is not None else (XSD_NAMESPACE,)
        )

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "SchemaAnalyzer":
        """Create an analyzer from the `analyzer` section of the configuration."""
        section = config.get("analyzer", {})
        constructs = section.get("constructs")
        if constructs is None:
            constructs = PRESETS[section.get("preset", "full")]
        return cls(constructs=constructs, namespaces=section.get("namespaces"))

    def _in_schema_namespace(self, node: etree._Element) -> bool:
        return (namespace_of(node) or "") in self.namespaces

    def analyze(self, source: str | Path | IO[bytes], path: str | Path | None = None) -> SchemaModel:
        """
        Parse one schema document into a SchemaModel.

        Args:
            source: File path or binary file object
            path: Path used in error messages (defaults to source when it is a path)

        Returns:
            Ordered mapping of complex type name to TypeDescriptor. A type
            declared twice keeps the later declaration's members.

        Raises:
            ParseFailure: If the document cannot be read or is not well-formed
        """
        if path is None and isinstance(source, (str, Path)):
            path = source

        try:
            tree = etree.parse(
                str(source) if isinstance(source, Path) else source, _secure_parser()
            )
        except (etree.ParseError, OSError) as e:
            raise ParseFailure(path, e) from e

        model: SchemaModel = {}
        for node in tree.getroot().iter(etree.Element):
            if local_name(node) != "complexType" or not self._in_schema_namespace(node):
                continue

            type_name = node.get("name")
            if not type_name:
                # Anonymous types are not indexed
                continue

            if type_name in model:
                logger.debug(f"complexType {type_name} redeclared at line {node.sourceline}")
            model[type_name] = self._describe_type(type_name, node)

        logger.debug(f"Found {len(model)} complex types in {path or 'document'}")
        return model

    def _describe_type(self, type_name: str, complex_type: etree._Element) -> TypeDescriptor:
        members = []
        for node in complex_type.iterdescendants(etree.Element):
            if not self._in_schema_namespace(node):
                continue
            described = describe(node, self.constructs)
            if described is not None:
                members.append(described)
        return TypeDescriptor.from_members(type_name, members)


def build_schema_model(
    source: str | Path | IO[bytes],
    path: str | Path | None = None,
    *,
    constructs: Iterable[str] | None = None,
    namespaces: Iterable[str] | None = None,
) -> SchemaModel:
    """
    Parse one schema document with a default-configured analyzer.

    See SchemaAnalyzer.analyze for arguments and errors.
    """
    return SchemaAnalyzer(constructs=constructs, namespaces=namespaces).analyze(source, path)
