"""A read/process/write pipeline that handles each record in parallel."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class Record:
    """A unit of data flowing through the pipeline."""

    id: int
    payload: dict[str, Any] = field(default_factory=dict)


class PipelineError(Exception):
    """Raised when a processor fails on a record; the batch is not written."""

    def __init__(self, record_id: int, cause: BaseException) -> None:
        super().__init__(f"error processing record with ID {record_id}: {cause}")
        self.record_id = record_id
        self.cause = cause


Reader = Callable[[], Iterable[Record]]
Processor = Callable[[Record], Record]
Writer = Callable[[list[Record]], None]


class Pipeline:
    """Reads records, runs every processor over each record concurrently, then writes.

    Each processor receives a shallow copy of the record it works on and
    returns the record to pass on. If any processor raises, nothing is
    written and :class:`PipelineError` is raised.
    """

    def __init__(
        self, reader: Reader, processors: Sequence[Processor], writer: Writer
    ) -> None:
        self._reader = reader
        self._processors = list(processors)
        self._writer = writer

    def _process(self, record: Record) -> Record:
        current = record
        for processor in self._processors:
            try:
                current = processor(replace(current))
            except Exception as exc:
                raise PipelineError(record.id, exc) from exc
        return current

    def run(self) -> list[Record]:
        """Run the pipeline and return the records handed to the writer."""
        records = list(self._reader())
        logger.info("read %d records", len(records))
        if not records:
            logger.info("no data to write")
            return []

        with ThreadPoolExecutor(max_workers=len(records)) as pool:
            futures = [pool.submit(self._process, record) for record in records]
            first_error: BaseException | None = None
            for future in as_completed(futures):
                error = future.exception()
                if error is not None and first_error is None:
                    first_error = error

        if first_error is not None:
            logger.error("processing failed: %s; pipeline stopped", first_error)
            raise first_error

        processed = [future.result() for future in futures]
        logger.info("processed %d records", len(processed))
        self._writer(processed)
        return processed