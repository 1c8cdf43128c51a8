"""Tests for content-addressed parse cache."""

from templar import (
    DictParseCache,
    ParseConfig,
    Root,
    hash_config,
    hash_content,
    parse_template,
)
from templar.location import Span


class TestDictParseCache:
    """Tests for DictParseCache."""

    def test_get_returns_none_when_empty(self) -> None:
        """Cache returns None when no entry exists."""
        cache = DictParseCache()
        assert cache.get("abc123", "config1") is None

    def test_put_then_get_returns_root(self) -> None:
        """Put then get returns the stored root."""
        cache = DictParseCache()
        root = Root(span=Span(0, 5), children=())
        cache.put("abc123", "config1", root)
        assert cache.get("abc123", "config1") is root
        assert len(cache) == 1

    def test_different_keys_return_none(self) -> None:
        """Different content_hash or config_hash returns None."""
        cache = DictParseCache()
        cache.put("abc123", "config1", Root(span=Span(0, 5), children=()))
        assert cache.get("xyz789", "config1") is None
        assert cache.get("abc123", "config2") is None

    def test_clear(self) -> None:
        cache = DictParseCache()
        cache.put("a", "b", Root(span=Span(0, 0), children=()))
        cache.clear()
        assert len(cache) == 0


class TestHashHelpers:
    """Tests for hash_content and hash_config."""

    def test_hash_content_deterministic(self) -> None:
        assert hash_content(["<p>", "</p>"]) == hash_content(("<p>", "</p>"))

    def test_hash_content_different_for_different_input(self) -> None:
        assert hash_content(["<p>"]) != hash_content(["<b>"])

    def test_chunk_boundaries_are_part_of_the_key(self) -> None:
        """Same concatenated text with holes in different places hashes differently."""
        assert hash_content(["<p>", "</p>"]) != hash_content(["<p></p>"])
        assert hash_content(["ab", "c"]) != hash_content(["a", "bc"])
        assert hash_content(["a", ""]) != hash_content(["a"])

    def test_hash_config_different_for_different_tag_sets(self) -> None:
        assert hash_config(ParseConfig()) != hash_config(ParseConfig(void_elements=frozenset()))
        assert hash_config(ParseConfig()) != hash_config(
            ParseConfig(raw_text_elements=frozenset({"pre"}))
        )

    def test_hash_config_ignores_source_name(self) -> None:
        assert hash_config(ParseConfig()) == hash_config(ParseConfig(source_name="x.html"))

    def test_hash_config_ignores_tag_order(self) -> None:
        a = ParseConfig(void_elements=frozenset({"a", "b"}))
        b = ParseConfig(void_elements=frozenset(["b", "a"]))
        assert hash_config(a) == hash_config(b)


class TestParseWithCache:
    """Tests for parse_template() with cache."""

    def test_first_call_parses_second_hits_cache(self) -> None:
        cache = DictParseCache()
        root1 = parse_template(["<p>", "</p>"], cache=cache)
        root2 = parse_template(["<p>", "</p>"], cache=cache)
        assert root1 is root2
        assert len(cache) == 1

    def test_different_content_misses(self) -> None:
        cache = DictParseCache()
        root1 = parse_template(["<p>", "</p>"], cache=cache)
        root2 = parse_template(["<b>", "</b>"], cache=cache)
        assert root1 is not root2
        assert len(cache) == 2

    def test_different_void_names_miss(self) -> None:
        cache = DictParseCache()
        root1 = parse_template(["<x>a</x>"], cache=cache)
        root2 = parse_template(["<x>a</x>"], void_names={"x"}, cache=cache)
        assert root1 != root2

    def test_cached_root_equals_fresh_parse(self) -> None:
        cache = DictParseCache()
        cached = parse_template(['<div class="a ', '">x</div>'], cache=cache)
        assert cached == parse_template(['<div class="a ', '">x</div>'])

    def test_failed_parse_is_not_cached(self) -> None:
        cache = DictParseCache()
        try:
            parse_template(["<div>"], cache=cache)
        except Exception:
            pass
        assert len(cache) == 0
