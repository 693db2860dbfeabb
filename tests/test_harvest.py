"""Tests for textmagnet.harvest module."""

import threading
import time

from textmagnet.config import ClusteringConfig
from textmagnet.harvest import flatten_words, harvest_words, pool_size
from textmagnet.models import Word


def _tokenize(element):
    return [Word.of(token, element) for token in element.split()]


class TestFlattenWords:
    """Tests for merging word lists."""

    def test_merges_counts_and_containers(self):
        merged = flatten_words(
            [
                [Word.of("sort", "A#sort"), Word.of("pivot", "A#sort")],
                [Word.of("SORT", "B#sort", count=2)],
            ]
        )

        assert [w.element for w in merged] == ["sort", "pivot"]
        assert merged[0].value == 3
        assert merged[0].containers == ["A#sort", "B#sort"]

    def test_inputs_untouched(self):
        original = Word.of("sort", "A#sort")
        flatten_words([[original], [Word.of("sort", "B#sort")]])

        assert original.value == 1
        assert original.containers == ["A#sort"]

    def test_empty(self):
        assert flatten_words([]) == []


class TestHarvestWords:
    """Tests for parallel harvesting."""

    def test_corpus_order(self):
        words = harvest_words(["a b", "b c"], _tokenize)

        assert [w.element for w in words] == ["a", "b", "c"]
        assert words[1].value == 2
        assert words[1].containers == ["a b", "b c"]

    def test_failures_skipped(self):
        def tokenize(element):
            if element == "bad":
                raise RuntimeError("cannot parse")
            return _tokenize(element)

        words = harvest_words(["a", "bad", "c"], tokenize)
        assert [w.element for w in words] == ["a", "c"]

    def test_slow_tasks_dropped(self):
        release = threading.Event()

        def tokenize(element):
            if element == "slow":
                release.wait(5.0)
            return _tokenize(element)

        config = ClusteringConfig(harvest_timeout_seconds=0.05)
        try:
            words = harvest_words(["fast", "slow"], tokenize, config)
        finally:
            release.set()

        assert [w.element for w in words] == ["fast"]

    def test_slow_tokenizer_kept_by_default(self):
        """The default grace period is minutes, not milliseconds."""

        def tokenize(element):
            time.sleep(1.2)
            return _tokenize(element)

        words = harvest_words(["alpha", "beta"], tokenize)
        assert [w.element for w in words] == ["alpha", "beta"]

    def test_running_tasks_get_double_timeout(self):
        def tokenize(element):
            time.sleep(1.0)
            return _tokenize(element)

        config = ClusteringConfig(harvest_timeout_seconds=0.4)
        words = harvest_words(["alpha", "beta"], tokenize, config)
        assert [w.element for w in words] == ["alpha", "beta"]

    def test_empty_corpus(self):
        assert harvest_words([], _tokenize) == []


class TestPoolSize:
    """Tests for worker pool sizing."""

    def test_at_least_one(self):
        assert pool_size(0) == 1

    def test_capped_by_config(self):
        config = ClusteringConfig(max_harvest_workers_per_cpu=2)
        assert pool_size(100, config) == pool_size(2)
