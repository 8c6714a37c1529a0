from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from .exceptions import LoadError
from .schema import DEFAULT_SCHEMA, Schema

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]
Loader = Callable[[Union[str, Path], Schema], Tuple[Record, ...]]


@dataclass(frozen=True)
class Status:
    """
    User-facing status line.

    level is "info", "warning" or "error"; the UI colours the status bar by it.
    """

    level: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.level == "error"


class RecordStore:
    """
    Holds the loaded dataset as an immutable tuple of records.

    The tuple is only ever replaced as a whole after a successful load, so a
    failed or aborted load leaves the previous contents (possibly empty) in
    place. The outcome of the last load is published on `status`.
    """

    def __init__(self, schema: Schema = DEFAULT_SCHEMA, loader: Optional[Loader] = None) -> None:
        if loader is None:
            from .dataset_loader import load_records
            loader = load_records

        self.schema = schema
        self._loader = loader
        self._records: Tuple[Record, ...] = ()
        self._source: Optional[str] = None
        self.status: Status = Status("info", "No dataset loaded.")

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def is_loaded(self) -> bool:
        return self._source is not None

    def __len__(self) -> int:
        return len(self._records)

    def load(self, source: Union[str, Path]) -> bool:
        """
        Load records from source, replacing the current contents on success.

        :param source: path to the CSV file
        :return: True if the store was updated, False on LoadError
        """
        try:
            records = self._loader(source, self.schema)
        except LoadError as e:
            return self._fail(source, e)
        return self._commit(source, records)

    async def load_async(self, source: Union[str, Path]) -> bool:
        """
        Same as `load`, but the blocking read runs in a worker thread so the
        event loop stays responsive. The store is only touched on the loop.
        """
        try:
            records = await asyncio.to_thread(self._loader, source, self.schema)
        except LoadError as e:
            return self._fail(source, e)
        return self._commit(source, records)

    def _commit(self, source: Union[str, Path], records: Tuple[Record, ...]) -> bool:
        self._records = tuple(records)
        self._source = str(source)
        self.status = Status("info", f"Loaded {len(self._records)} rows.")
        logger.info("Dataset loaded", extra={"source": str(source), "n_rows": len(self._records)})
        return True

    def _fail(self, source: Union[str, Path], error: LoadError) -> bool:
        self.status = Status("error", f"Error: {error}")
        logger.error(
            "Dataset load failed; keeping previous records",
            extra={"source": str(source), "reason": error.reason, "n_rows_kept": len(self._records)},
        )
        return False
