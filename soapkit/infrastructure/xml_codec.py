# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER
# Description: Node tree <-> XML text.
# ============================================================================
"""XML codec.

``render`` turns a built Node tree into XML markup; ``parse`` reads received
markup into a Node tree with local names split from their namespace URIs.
"""

import logging
from xml.etree import ElementTree

from ..config.settings import get_settings
from ..core.exceptions import DocumentParseError
from ..core.node import Node

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


def render(node: Node, xml_declaration: bool = False) -> str:
    """Render ``node`` and its subtree as compact XML.

    Args:
        node: Root element.
        xml_declaration: Prefix the output with an XML declaration.

    Returns:
        XML markup.
    """
    parts: list[str] = [XML_DECLARATION] if xml_declaration else []
    _render_node(parts, node)
    return "".join(parts)


def _render_node(parts: list[str], node: Node) -> None:
    tag = node.qualified_name
    parts.append(f"<{tag}")
    for prefix, uri in node.declarations.items():
        parts.append(f' xmlns:{prefix}="{_escape_attribute(uri)}"')
    for (prefix, name), value in node.attributes.items():
        attr = f"{prefix}:{name}" if prefix else name
        parts.append(f' {attr}="{_escape_attribute(value)}"')

    if node.is_leaf and not node.text:
        parts.append("/>")
        return

    parts.append(">")
    if not node.is_leaf:
        for child in node.children:
            _render_node(parts, child)
    else:
        parts.append(_escape_text(node.text or ""))
    parts.append(f"</{tag}>")


def parse(xml_text: str | bytes, max_depth: int | None = None) -> Node:
    """Parse received XML into a Node tree.

    Text is kept only on elements without child elements; whitespace between
    elements is dropped.

    Args:
        xml_text: Received document.
        max_depth: Deepest element nesting accepted. Defaults to
            SOAPKIT_MAX_DEPTH.

    Raises:
        DocumentParseError: If the text is not well-formed XML or nests
            deeper than ``max_depth``.
    """
    if max_depth is None:
        max_depth = get_settings().SOAPKIT_MAX_DEPTH
    try:
        root = ElementTree.fromstring(xml_text)
    except ElementTree.ParseError as e:
        logger.error(f"Error parsing XML document: {e}")
        raise DocumentParseError(f"Malformed XML document: {e}") from e
    return _from_element(root, 1, max_depth)


def _from_element(elem: ElementTree.Element, depth: int, max_depth: int) -> Node:
    namespace, local_name = split_tag(elem.tag)
    if depth > max_depth:
        logger.warning(f"Max parsing depth ({max_depth}) exceeded at element: {local_name}")
        raise DocumentParseError(f"XML document nests deeper than {max_depth} elements")

    node = Node(local_name=local_name, namespace=namespace)
    for key, value in elem.attrib.items():
        _, attr_name = split_tag(key)
        node.attributes[(None, attr_name)] = value

    for child in elem:
        node.children.append(_from_element(child, depth + 1, max_depth))
    if node.is_leaf:
        node.text = elem.text or ""
    return node


def split_tag(tag: str) -> tuple[str | None, str]:
    """Split an ElementTree ``{uri}local`` tag into ``(uri, local)``."""
    if tag.startswith("{") and "}" in tag:
        uri, local = tag[1:].split("}", 1)
        return uri, local
    return None, tag


def _escape_text(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attribute(value: str) -> str:
    return _escape_text(value).replace('"', "&quot;")
