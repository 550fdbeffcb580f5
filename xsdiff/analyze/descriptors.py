"""
Canonical one-line descriptions of XML Schema constructs.

Every construct found inside a complex type is rendered to a single line of
text. Two constructs that render to the same line are considered equal when
schemas are compared, so the rendering must not depend on anything but the
attributes listed per construct below (and never on the namespace prefix the
document happens to use).
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from lxml import etree

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"

# Member categories of a complex type, in reporting order
ELEMENTS = "elements"
ATTRIBUTES = "attributes"
ANNOTATIONS = "annotations"
APPINFOS = "appinfos"

CATEGORIES = (ELEMENTS, ATTRIBUTES, ANNOTATIONS, APPINFOS)

CATEGORY_LABELS = {
    ELEMENTS: "element",
    ATTRIBUTES: "attribute",
    ANNOTATIONS: "annotation",
    APPINFOS: "appinfo",
}


@dataclass(frozen=True)
class Construct:
    """A recognised schema construct: its local name, category and formatter."""

    name: str
    category: str
    render: Callable[[etree._Element], str | None]


def local_name(node: etree._Element) -> str | None:
    """
    Return the local part of an element's tag, or None for comments and PIs.

    Example:
        >>> local_name(etree.fromstring('<xs:element xmlns:xs="urn:x"/>'))
        'element'
    """
    if not isinstance(node.tag, str):
        return None
    return etree.QName(node).localname


def namespace_of(node: etree._Element) -> str | None:
    """Return the namespace URI of an element's tag (None when unqualified)."""
    if not isinstance(node.tag, str):
        return None
    return etree.QName(node).namespace


def _optional(node: etree._Element, attribute: str, template: str) -> str:
    value = node.get(attribute)
    if not value:
        return ""
    return template.format(value)


def format_occurs(node: etree._Element) -> str:
    """Render ` [min..max]` when either bound is declared; a missing bound is 1."""
    min_occurs = node.get("minOccurs")
    max_occurs = node.get("maxOccurs")
    if not min_occurs and not max_occurs:
        return ""
    return f" [{min_occurs or '1'}..{max_occurs or '1'}]"


def format_element(node: etree._Element) -> str | None:
    name = node.get("name")
    if not name:
        return None
    return name + _optional(node, "type", " ({})") + format_occurs(node)


def format_attribute(node: etree._Element) -> str | None:
    name = node.get("name")
    if not name:
        return None
    return (
        "@"
        + name
        + _optional(node, "type", " ({})")
        + _optional(node, "default", " default='{}'")
    )


def format_sequence(node: etree._Element) -> str:
    return "sequence" + format_occurs(node)


def _with_attribute(label: str, attribute: str) -> Callable[[etree._Element], str]:
    def render(node: etree._Element) -> str:
        return label + _optional(node, attribute, f" {attribute}='{{}}'")

    return render


def _literal(label: str) -> Callable[[etree._Element], str]:
    def render(node: etree._Element) -> str:
        return label

    return render


CONSTRUCTS: dict[str, Construct] = {
    construct.name: construct
    for construct in (
        Construct("element", ELEMENTS, format_element),
        Construct("sequence", ELEMENTS, format_sequence),
        Construct("simpleContent", ELEMENTS, _literal("simpleContent")),
        Construct("extension", ELEMENTS, _with_attribute("extension", "base")),
        Construct("restriction", ELEMENTS, _with_attribute("restriction", "base")),
        Construct("enumeration", ELEMENTS, _with_attribute("enumeration", "value")),
        Construct("minLength", ELEMENTS, _with_attribute("minLength", "value")),
        Construct("maxLength", ELEMENTS, _with_attribute("maxLength", "value")),
        Construct("attribute", ATTRIBUTES, format_attribute),
        Construct("annotation", ANNOTATIONS, _literal("annotation")),
        Construct("documentation", ANNOTATIONS, _with_attribute("documentation", "source")),
        Construct("appinfo", APPINFOS, _with_attribute("appinfo", "source")),
    )
}

PRESETS: dict[str, tuple[str, ...]] = {
    "full": tuple(CONSTRUCTS),
    "basic": ("element", "attribute"),
}


def resolve_constructs(names: Iterable[str] | None = None) -> dict[str, Construct]:
    """
    Select the recognised constructs by name.

    Args:
        names: Construct local names; None selects every known construct

    Returns:
        Mapping of local name to Construct, in the order given

    Raises:
        ValueError: If a name is not a known construct
    """
    if names is None:
        return dict(CONSTRUCTS)

    selected = {}
    for name in names:
        if name not in CONSTRUCTS:
            known = ", ".join(CONSTRUCTS)
            raise ValueError(f"Unknown schema construct '{name}' (known: {known})")
        selected[name] = CONSTRUCTS[name]
    return selected


def describe(
    node: etree._Element, constructs: dict[str, Construct] | None = None
) -> tuple[str, str] | None:
    """
    Describe one node as a (category, line) pair.

    Namespace filtering is the caller's job; this only looks at the local name.

    Returns:
        The category and the canonical line, or None when the node is not a
        recognised construct or lacks a required attribute (e.g. a `ref=` element)
    """
    if constructs is None:
        constructs = CONSTRUCTS

    name = local_name(node)
    construct = constructs.get(name) if name else None
    if construct is None:
        return None

    line = construct.render(node)
    if line is None:
        return None
    return construct.category, line
