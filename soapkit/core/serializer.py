# ============================================================================
# SCOPE: CORE LAYER
# Description: Text Serializer for located Generic Values.
# ============================================================================
"""Text Serializer.

Renders a value found by a path back into tab-indented tagged text. The
wrapper tag is the last path key, or the key before it when the last key is a
list index.
"""

from collections.abc import Sequence

from .query import parse_index, resolve
from .values import GenericValue, ListValue, Mapping, Scalar

INDENT = "\t"


def escape_text(text: str) -> str:
    """Escape markup characters in element text."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class TextSerializer:
    """Renders Generic Values as indented tagged text.

    Attributes:
        escape: Whether scalar text is entity-escaped.
    """

    def __init__(self, escape: bool = True) -> None:
        self.escape = escape

    def to_xml_string(self, value: GenericValue, keys: Sequence[str] = ()) -> str | None:
        """Render the value at ``keys`` inside its inferred wrapper tag.

        Args:
            value: Snapshot to resolve the path against.
            keys: Path to the value to render.

        Returns:
            Rendered text, or None if the path does not resolve or the
            wrapper tag cannot be inferred.
        """
        result = resolve(value, keys)
        if result is None:
            return None

        if not keys:
            parts: list[str] = []
            self._render_contents(parts, result, None, "")
            return "".join(parts)

        wrapper = self._wrapper_tag(keys)
        if wrapper is None:
            return None

        parts = []
        self._render_entry(parts, wrapper, result, "")
        return "".join(parts)

    @staticmethod
    def _wrapper_tag(keys: Sequence[str]) -> str | None:
        wrapper = keys[-1]
        if parse_index(wrapper) is not None:
            if len(keys) < 2:
                return None
            wrapper = keys[-2]
        return wrapper

    def _render_entry(self, parts: list[str], tag: str, value: GenericValue, indent: str) -> None:
        match value:
            case Scalar(text=text):
                parts.append(f"{indent}<{tag}>{self._text(text)}</{tag}>\n")
            case _:
                parts.append(f"{indent}<{tag}>\n")
                self._render_contents(parts, value, tag, indent + INDENT)
                parts.append(f"{indent}</{tag}>\n")

    def _render_contents(self, parts: list[str], value: GenericValue, tag: str | None, indent: str) -> None:
        match value:
            case Scalar(text=text):
                parts.append(self._text(text))
            case Mapping():
                for key, entry in value.items():
                    self._render_list_or_entry(parts, key, entry, indent)
            case ListValue():
                # A bare list has no name of its own; items reuse the wrapper.
                for item in value:
                    self._render_entry(parts, tag or "", item, indent)

    def _render_list_or_entry(self, parts: list[str], key: str, value: GenericValue, indent: str) -> None:
        if isinstance(value, ListValue):
            for item in value:
                self._render_entry(parts, key, item, indent)
        else:
            self._render_entry(parts, key, value, indent)

    def _text(self, text: str) -> str:
        return escape_text(text) if self.escape else text
