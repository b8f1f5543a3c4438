"""Dataset store shared by dashboard consumers."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import pandas as pd

from . import config
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Subscriber = Callable[[List[Record]], None]


class DatasetStore:
    """Holds the current environmental dataset and notifies subscribers on change.

    Usage:
        store = DatasetStore(initial_records)
        unsubscribe = store.subscribe(lambda records: redraw(records))
        store.load('suppliers.csv')   # subscribers are called with the new records
        unsubscribe()
    """

    SUPPORTED_SUFFIXES = ('.csv', '.json')

    def __init__(self, records: Optional[List[Record]] = None):
        self._records: List[Record] = list(records or [])
        self._subscribers: List[Subscriber] = []

    def get(self) -> List[Record]:
        """Return a shallow copy of the current records."""
        return list(self._records)

    def set(self, records: List[Record]) -> None:
        """Replace the current records and notify every subscriber."""
        self._records = list(records)
        logger.info(f"Dataset updated: {len(self._records)} records")
        for callback in list(self._subscribers):
            callback(self.get())

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change callback. Returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self._records)

    def load(self, path: Optional[Union[str, Path]] = None) -> List[Record]:
        """Import a CSV or JSON file and make it the current dataset.

        Args:
            path: File path ending in .csv or .json (a list of objects).
                If None, GREENROUTE_DATASET is used.

        Returns:
            The imported records
        """
        if path is None:
            path = config.DEFAULT_DATASET
            if not path:
                raise ValidationError('file', None, "No dataset path given and GREENROUTE_DATASET is not set")
            logger.debug(f"No path provided, using configured dataset: {path}")

        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in self.SUPPORTED_SUFFIXES:
            raise ValidationError(
                'file', str(path),
                "Unsupported file format. Please provide CSV or JSON files."
            )
        if not path.exists():
            raise FileNotFoundError(f"Dataset file not found: {path}")

        logger.info(f"Loading dataset from {path}")
        try:
            if suffix == '.csv':
                df = pd.read_csv(path, skipinitialspace=True)
                df.columns = [str(c).strip() for c in df.columns]
            else:
                df = pd.read_json(path, orient='records', dtype=False, convert_dates=False)
        except ValueError as e:
            logger.error(f"Error processing file {path}: {str(e)}")
            raise ValidationError('file', str(path), f"Error processing file: {str(e)}") from e

        records = self._frame_to_records(df)
        logger.info(f"  Loaded {len(records):,} rows, {df.shape[1]} columns")
        self.set(records)
        return records

    @staticmethod
    def _frame_to_records(df: pd.DataFrame) -> List[Record]:
        """Convert a DataFrame to plain dicts, with missing cells as None."""
        cleaned = df.astype(object).where(pd.notna(df), None)
        return cleaned.to_dict(orient='records')
