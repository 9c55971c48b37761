"""Thread safety tests for memomark.

Parsing reads its configuration from a ContextVar and keeps all other
state on the scanner instance. These tests verify that:
1. Concurrent parses with different configurations never interfere
2. A shared renderer instance can be used from many threads
3. Results match the single-threaded output

These tests use real threading to catch actual concurrency bugs.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from memomark import extract_tags, parse_document, serialize_document
from memomark.config import ParseConfig, parse_config_context
from memomark.nodes import TaskListItem, UnorderedListItem
from memomark.renderers import HtmlRenderer

_NOTE = "- [ ] call #mom\n\nsee https://x.io\n```\n#not\n```"


class TestThreadSafety:
    """Verify parse and render are thread-safe as documented."""

    def test_concurrent_configs(self) -> None:
        """Threads with different task list settings see only their own."""
        barrier = threading.Barrier(8)

        def parse_with(enabled: bool) -> tuple[bool, type]:
            with parse_config_context(ParseConfig(task_lists_enabled=enabled)):
                barrier.wait()
                doc = parse_document("- [x] done")
            return enabled, type(doc.children[0])

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(parse_with, i % 2 == 0) for i in range(8)]
            results = [f.result() for f in as_completed(futures)]

        for enabled, node_type in results:
            assert node_type is (TaskListItem if enabled else UnorderedListItem)

    def test_shared_renderer(self) -> None:
        renderer = HtmlRenderer()
        doc = parse_document(_NOTE)
        expected = renderer.render(doc)

        with ThreadPoolExecutor(max_workers=8) as executor:
            outputs = list(executor.map(lambda _: renderer.render(doc), range(50)))

        assert all(out == expected for out in outputs)

    def test_concurrent_matches_sequential(self) -> None:
        notes = [f"{_NOTE}\n- [x] item {i} #t{i}" for i in range(40)]
        expected = [(serialize_document(parse_document(n)), extract_tags(n)) for n in notes]

        def work(note: str) -> tuple[str, set[str]]:
            return serialize_document(parse_document(note)), extract_tags(note)

        with ThreadPoolExecutor(max_workers=8) as executor:
            actual = list(executor.map(work, notes))

        assert actual == expected
