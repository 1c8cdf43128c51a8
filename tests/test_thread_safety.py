"""Thread safety tests for Templar.

Parsing keeps all mutable state on the Lexer and Parser instances, and the
active configuration lives in a ContextVar. These tests verify that:
1. Concurrent parses with different tag sets never see each other's config
2. A shared tree can be read from many threads
3. Parse errors in one thread do not disturb the others

These tests use real threading to catch actual concurrency bugs.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from templar import Element, ParseConfig, ParseError, parse_config_context, parse_template
from templar.visitor import walk


def _child_count(void: bool) -> int:
    names = {"x"} if void else set()
    with parse_config_context(ParseConfig(void_elements=frozenset(names))):
        root = parse_template(["<x>a<b>", "</b></x>"])
    element = root.children[0]
    assert isinstance(element, Element)
    return len(element.children)


class TestParseThreadSafety:
    """Verify parsing is thread-safe."""

    def test_concurrent_parses_with_different_configs(self) -> None:
        """Each thread sees only the void set it installed."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(_child_count, i % 2 == 0): i for i in range(40)}
            for future in as_completed(futures):
                i = futures[future]
                expected = 0 if i % 2 == 0 else 2
                assert future.result() == expected

    def test_no_config_bleeding_between_threads(self) -> None:
        """Config from one thread should not bleed into another."""
        barrier = threading.Barrier(2)
        results: dict[str, str] = {}

        def parse_with(raw: frozenset[str], key: str) -> None:
            with parse_config_context(ParseConfig(raw_text_elements=raw)):
                barrier.wait()
                root = parse_template(["<pre><b>x</b></pre>"])
            results[key] = type(root.children[0].children[0]).__name__  # type: ignore[union-attr]

        t1 = threading.Thread(target=parse_with, args=(frozenset({"pre"}), "raw"))
        t2 = threading.Thread(target=parse_with, args=(frozenset(), "markup"))

        t1.start()
        t2.start()
        t1.join(timeout=5.0)
        t2.join(timeout=5.0)

        assert results == {"raw": "Text", "markup": "Element"}

    def test_shared_tree_is_readable_everywhere(self) -> None:
        root = parse_template(["<ul>", "<li>a</li><li>", "</li></ul>"])
        expected = len(list(walk(root)))

        with ThreadPoolExecutor(max_workers=8) as executor:
            counts = list(executor.map(lambda _: len(list(walk(root))), range(32)))

        assert counts == [expected] * 32

    def test_errors_stay_in_their_thread(self) -> None:
        def parse_one(i: int) -> str:
            chunks = ["<div>"] if i % 3 == 0 else ["<div></div>"]
            try:
                parse_template(chunks)
            except ParseError as e:
                return e.message
            return "ok"

        with ThreadPoolExecutor(max_workers=6) as executor:
            results = list(executor.map(parse_one, range(30)))

        for i, result in enumerate(results):
            assert result == ("Unclosed tag <div>" if i % 3 == 0 else "ok")
