"""Parallel word harvesting.

Runs a tokenizer over every element of a corpus on a bounded thread pool
and flattens the per-element word lists into one list for the index.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Optional, TypeVar

from .config import DEFAULT_CONFIG, ClusteringConfig
from .logging_config import get_logger
from .models import Word

logger = get_logger(__name__)

E = TypeVar("E")

Tokenizer = Callable[[E], Iterable[Word]]


def pool_size(corpus_size: int, config: Optional[ClusteringConfig] = None) -> int:
    """Workers for a corpus: min(corpus_size, cap) per CPU, at least 1."""
    config = config or DEFAULT_CONFIG
    cpus = os.cpu_count() or 1
    return max(1, min(corpus_size, config.max_harvest_workers_per_cpu) * cpus)


def harvest_words(
    corpus: Sequence[E],
    tokenizer: Tokenizer,
    config: Optional[ClusteringConfig] = None,
) -> list[Word]:
    """Tokenize every corpus element in parallel and merge the results.

    A failing element is logged and skipped. Elements still pending after
    the configured timeout are cancelled; running ones get twice the
    timeout to finish before they are dropped.

    Args:
        corpus: Elements to tokenize (files, snippets, ...)
        tokenizer: Returns the words found in one element
        config: Supplies the timeout and pool cap

    Returns:
        Flattened words, in corpus order
    """
    config = config or DEFAULT_CONFIG
    if not corpus:
        return []

    timeout = config.harvest_timeout_seconds
    executor = ThreadPoolExecutor(max_workers=pool_size(len(corpus), config))
    try:
        futures: list[Future] = [executor.submit(tokenizer, element) for element in corpus]

        _, pending = wait(futures, timeout=timeout)
        if pending:
            for future in pending:
                future.cancel()
            _, pending = wait(pending, timeout=2 * timeout)
            if pending:
                logger.debug(f"{len(pending)} harvesting tasks did not finish in time")
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    harvested: list[list[Word]] = []
    for element, future in zip(corpus, futures):
        if not future.done() or future.cancelled():
            continue
        try:
            harvested.append(list(future.result()))
        except Exception as e:
            logger.debug(f"Error harvesting {element}: {e}")

    return flatten_words(harvested)


def flatten_words(word_lists: Iterable[Iterable[Word]]) -> list[Word]:
    """Merge word lists: equal words add their counts and join containers.

    Input Word objects are not modified.
    """
    merged: dict[Word, Word] = {}

    for words in word_lists:
        for word in words:
            if word is None:
                continue

            existing = merged.get(word)
            if existing is None:
                merged[word] = Word(word.element, word.value, list(word.containers))
                continue

            existing.count(word.value)
            for container in word.containers:
                existing.add(container)

    return list(merged.values())
