"""A pipeline whose steps may turn one item into zero, one or many items."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Item:
    """A unit of data flowing through the pipeline."""

    id: int
    payload: str


Reader = Callable[[], Iterable[Item]]
Processor = Callable[[Item], Iterable[Item]]
Writer = Callable[[list[Item]], None]


class FanOutPipeline:
    """Reads items, pushes each one through the chain of processors concurrently, then writes.

    A processor that raises for an item drops only that item; the others
    continue. Everything left at the end is written in one batch.
    """

    def __init__(
        self, reader: Reader, processors: Sequence[Processor], writer: Writer
    ) -> None:
        self._reader = reader
        self._processors = list(processors)
        self._writer = writer

    def _process(self, item: Item) -> list[Item]:
        current = [item]
        for processor in self._processors:
            following: list[Item] = []
            for data in current:
                try:
                    following.extend(processor(data))
                except Exception as exc:
                    logger.warning(
                        "error processing item ID %d: %s; item skipped", data.id, exc
                    )
            current = following
            if not current:
                break
        return current

    def run(self) -> list[Item]:
        """Run the pipeline and return the items handed to the writer."""
        items = list(self._reader())
        logger.info("read %d items from the source", len(items))

        results: list[Item] = []
        if items:
            with ThreadPoolExecutor(max_workers=len(items)) as pool:
                for produced in pool.map(self._process, items):
                    results.extend(produced)

        if results:
            self._writer(results)
        else:
            logger.info("no data to write after processing")
        return results