"""Tests for templar.serialization: AST JSON round-trip."""

import json

import pytest

from templar import parse_template
from templar.location import Span
from templar.nodes import Element, Expression, MixedProp, NodeKind, Root, Text
from templar.serialization import from_dict, from_json, to_dict, to_json
from templar.tokens import Token, TokenType


def _roundtrip(*chunks: str) -> tuple[Root, Root]:
    root = parse_template(list(chunks))
    return root, from_json(to_json(root))


class TestRoundTrip:
    """Parsed trees survive to_json/from_json unchanged."""

    def test_text(self) -> None:
        root, restored = _roundtrip("Hello")
        assert restored == root

    def test_nested_elements(self) -> None:
        root, restored = _roundtrip("<div><p><b>x</b></p></div>")
        assert restored == root

    def test_component_kind(self) -> None:
        root, restored = _roundtrip("<Layout><Header /></Layout>")
        assert restored == root
        layout = restored.children[0]
        assert isinstance(layout, Element)
        assert layout.kind is NodeKind.COMPONENT

    def test_every_prop_kind(self) -> None:
        root, restored = _roundtrip(
            '<input type="text" value=', ' class="a ', '" disabled ...', " />"
        )
        assert restored == root
        element = restored.children[0]
        assert isinstance(element, Element)
        assert [type(p).__name__ for p in element.props] == [
            "StaticProp",
            "ExpressionProp",
            "MixedProp",
            "BooleanProp",
            "SpreadProp",
        ]

    def test_mixed_parts_keep_ints_and_strings(self) -> None:
        _, restored = _roundtrip('<div class="a ', " b ", '"></div>')
        prop = restored.children[0].props[0]  # type: ignore[union-attr]
        assert isinstance(prop, MixedProp)
        assert prop.parts == ("a ", 0, " b ", 1)

    def test_raw_text_and_expressions(self) -> None:
        root, restored = _roundtrip("<script>a < b", "</script>")
        assert restored == root

    def test_empty_root(self) -> None:
        root, restored = _roundtrip("")
        assert restored == root == Root(span=Span(0, 0), children=())


class TestDictShape:
    """Shape of the JSON-compatible dicts."""

    def test_type_discriminator(self) -> None:
        data = to_dict(Text(span=Span(0, 2), value="hi"))
        assert data == {"_type": "Text", "span": {"_type": "Span", "start": 0, "end": 2}, "value": "hi"}

    def test_tokens_are_preserved(self) -> None:
        root = parse_template(["<p>", "</p>"])
        data = to_dict(root)
        element = data["children"][0]
        assert element["kind"] == "ELEMENT"
        assert element["open"] == {
            "_type": "Token",
            "type": "OPEN_ANGLE",
            "value": None,
            "start": 0,
            "end": 1,
        }
        assert element["children"] == [
            {"_type": "Expression", "span": {"_type": "Span", "start": 3, "end": 3}, "index": 0}
        ]

    def test_class_level_kind_is_not_serialized(self) -> None:
        assert "kind" not in to_dict(Expression(span=Span(0, 0), index=0))

    def test_token_from_dict(self) -> None:
        data = {"_type": "Token", "type": "EXPRESSION", "value": 2, "start": 4, "end": 4}
        assert from_dict(data) == Token(TokenType.EXPRESSION, 2, 4, 4)

    def test_json_is_sorted(self) -> None:
        text = to_json(parse_template(["<p>x</p>"]))
        parsed = json.loads(text)
        assert list(parsed) == sorted(parsed)
        assert text == json.dumps(parsed, sort_keys=True)

    def test_json_is_deterministic(self) -> None:
        a = to_json(parse_template(['<a href="', '">x</a>']))
        b = to_json(parse_template(['<a href="', '">x</a>']))
        assert a == b

    def test_indent(self) -> None:
        assert "\n" in to_json(parse_template(["x"]), indent=2)


class TestErrors:
    """Malformed payloads are rejected."""

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"value": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Paragraph"})

    def test_from_json_requires_root(self) -> None:
        payload = json.dumps(to_dict(Text(span=Span(0, 1), value="x")))
        with pytest.raises(ValueError, match="Expected Root, got Text"):
            from_json(payload)
