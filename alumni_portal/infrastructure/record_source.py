"""Adapters that load tabular source-of-record data (events, donations, alumni)."""

from __future__ import annotations

import importlib
import io
import logging
import math
from functools import partial
from pathlib import Path
from typing import Any, Iterable, Protocol, Sequence

import anyio

logger = logging.getLogger(__name__)

Record = dict[str, str]

EVENT_TABLE = "Event"
DONATION_TABLE = "Donation"
ALUMNI_TABLE = "Alumni"

_SUPPORTED_EXTENSIONS = (".csv", ".xlsx")


class SourceUnavailableError(RuntimeError):
    """Raised when a source-of-record table cannot be fetched or parsed."""

    def __init__(self, table_name: str, reason: str) -> None:
        super().__init__(f"Record source '{table_name}' is unavailable: {reason}")
        self.table_name = table_name
        self.reason = reason


class RecordSource(Protocol):
    """Contract for anything able to return the rows of a named table."""

    def fetch(self, table_name: str) -> list[Record]:
        ...


def _get_pandas_module() -> Any:
    """Load :mod:`pandas` lazily so a missing parser degrades to a source error."""

    return importlib.import_module("pandas")


def normalize_records(rows: Iterable[dict[Any, Any]]) -> list[Record]:
    """Return ``rows`` as string mappings, dropping rows whose fields are all empty."""

    normalized: list[Record] = []
    for row in rows:
        record = {
            str(key).strip(): _normalize_cell_value(value) for key, value in row.items()
        }
        if any(record.values()):
            normalized.append(record)
    return normalized


def _normalize_cell_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value).strip()


class FileRecordSource:
    """Read ``<table>.csv`` or ``<table>.xlsx`` files from a data directory."""

    def __init__(
        self,
        directory: str | Path,
        *,
        extensions: Sequence[str] = _SUPPORTED_EXTENSIONS,
    ) -> None:
        self.directory = Path(directory)
        self.extensions = tuple(extensions)

    def fetch(self, table_name: str) -> list[Record]:
        path = self._resolve_path(table_name)
        try:
            pd = _get_pandas_module()
        except ModuleNotFoundError as exc:
            raise SourceUnavailableError(
                table_name, "pandas is required to parse record files"
            ) from exc

        try:
            dataframe = self._read(pd, path)
        except ImportError as exc:
            raise SourceUnavailableError(table_name, str(exc)) from exc
        except (OSError, ValueError) as exc:
            raise SourceUnavailableError(table_name, f"unable to parse {path.name}") from exc

        records = normalize_records(dataframe.to_dict(orient="records"))
        logger.debug("Loaded %s rows from %s", len(records), path)
        return records

    def _resolve_path(self, table_name: str) -> Path:
        for extension in self.extensions:
            candidate = self.directory / f"{table_name}{extension}"
            if candidate.is_file():
                return candidate
        raise SourceUnavailableError(
            table_name, f"no data file found in {self.directory}"
        )

    @staticmethod
    def _read(pd: Any, path: Path) -> Any:
        if path.suffix.lower() == ".csv":
            buffer = io.BytesIO(path.read_bytes())
            return pd.read_csv(buffer, dtype=object, keep_default_na=False)
        return pd.read_excel(path, dtype=object, keep_default_na=False)


async def fetch_records(
    source: RecordSource,
    table_name: str,
    *,
    timeout: float | None = None,
) -> list[Record]:
    """Run ``source.fetch`` in a worker thread, optionally bounded by ``timeout``."""

    call = partial(source.fetch, table_name)
    if timeout is None:
        return await anyio.to_thread.run_sync(call)
    try:
        with anyio.fail_after(timeout):
            return await anyio.to_thread.run_sync(call, abandon_on_cancel=True)
    except TimeoutError as exc:
        raise SourceUnavailableError(
            table_name, f"fetch timed out after {timeout:g} seconds"
        ) from exc


__all__ = [
    "ALUMNI_TABLE",
    "DONATION_TABLE",
    "EVENT_TABLE",
    "FileRecordSource",
    "Record",
    "RecordSource",
    "SourceUnavailableError",
    "fetch_records",
    "normalize_records",
]
