# ============================================================================
# Tests for the Text Serializer
# ============================================================================
"""Unit tests for TextSerializer."""

from soapkit.core.serializer import TextSerializer, escape_text
from soapkit.core.values import ListValue, Mapping, Scalar

REQUEST = Mapping({"Request": Mapping({"Status": Scalar("OK"), "Id": Scalar("7")})})

DOCUMENT = Mapping(
    {
        "A": Mapping(
            {
                "B": Scalar("x"),
                "List": ListValue(
                    (
                        Mapping({"Id": Scalar("1")}),
                        Mapping({"Id": Scalar("2")}),
                    )
                ),
            }
        )
    }
)


class TestWrapperInference:
    """Tests for choosing the wrapper tag from the path."""

    def test_last_key_is_wrapper(self) -> None:
        """Should wrap with the last key."""
        assert TextSerializer().to_xml_string(DOCUMENT, ("A", "B")) == "<B>x</B>\n"

    def test_index_uses_previous_key(self) -> None:
        """Should wrap with the key before a trailing index."""
        result = TextSerializer().to_xml_string(DOCUMENT, ("A", "List", "0"))
        assert result == "<List>\n\t<Id>1</Id>\n</List>\n"

    def test_bare_index_is_ambiguous(self) -> None:
        """Should return None for a single index key."""
        items = ListValue((Scalar("a"),))
        assert TextSerializer().to_xml_string(items, ("0",)) is None

    def test_missing_path(self) -> None:
        """Should return None when the path does not resolve."""
        assert TextSerializer().to_xml_string(DOCUMENT, ("A", "Nope")) is None


class TestRendering:
    """Tests for the rendered layout."""

    def test_request_example(self) -> None:
        """Should render one tab-indented line per leaf."""
        result = TextSerializer().to_xml_string(REQUEST, ("Request",))
        assert result == "<Request>\n\t<Status>OK</Status>\n\t<Id>7</Id>\n</Request>\n"

    def test_list_entries_repeat_key(self) -> None:
        """Should render each list element under the mapping key."""
        expected = (
            "<A>\n"
            "\t<B>x</B>\n"
            "\t<List>\n"
            "\t\t<Id>1</Id>\n"
            "\t</List>\n"
            "\t<List>\n"
            "\t\t<Id>2</Id>\n"
            "\t</List>\n"
            "</A>\n"
        )
        assert TextSerializer().to_xml_string(DOCUMENT, ("A",)) == expected

    def test_scalar_list_entries(self) -> None:
        """Should render scalar list elements inline."""
        value = Mapping({"R": Mapping({"Item": ListValue((Scalar("a"), Scalar("b")))})})
        assert TextSerializer().to_xml_string(value, ("R",)) == "<R>\n\t<Item>a</Item>\n\t<Item>b</Item>\n</R>\n"

    def test_top_level_list(self) -> None:
        """Should render a located list as repeated wrapper entries."""
        expected = (
            "<List>\n"
            "\t<List>\n"
            "\t\t<Id>1</Id>\n"
            "\t</List>\n"
            "\t<List>\n"
            "\t\t<Id>2</Id>\n"
            "\t</List>\n"
            "</List>\n"
        )
        assert TextSerializer().to_xml_string(DOCUMENT, ("A", "List")) == expected

    def test_no_keys_renders_contents(self) -> None:
        """Should render the whole snapshot without an extra wrapper."""
        serializer = TextSerializer()
        assert serializer.to_xml_string(REQUEST) == serializer.to_xml_string(REQUEST, ("Request",))

    def test_empty_scalar(self) -> None:
        """Should render an empty element as an open/close pair."""
        value = Mapping({"R": Mapping({"Note": Scalar("")})})
        assert TextSerializer().to_xml_string(value, ("R", "Note")) == "<Note></Note>\n"


class TestEscaping:
    """Tests for text escaping."""

    def test_escapes_by_default(self) -> None:
        """Should escape markup characters in scalar text."""
        value = Mapping({"R": Mapping({"Text": Scalar("a<b & c>")})})
        assert TextSerializer().to_xml_string(value, ("R", "Text")) == "<Text>a&lt;b &amp; c&gt;</Text>\n"

    def test_raw_when_disabled(self) -> None:
        """Should pass text through untouched when escaping is off."""
        value = Mapping({"R": Mapping({"Text": Scalar("a<b & c>")})})
        assert TextSerializer(escape=False).to_xml_string(value, ("R", "Text")) == "<Text>a<b & c></Text>\n"

    def test_escape_text_order(self) -> None:
        """Should not double-escape ampersands it introduced."""
        assert escape_text("<&>") == "&lt;&amp;&gt;"
