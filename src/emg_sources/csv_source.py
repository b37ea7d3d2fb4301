"""
CSV File Signal Source

This module reads recorded EMG signals from CSV files for offline
filtering and feature extraction.

Expected CSV format:
- One column per channel; the pipeline processes one channel at a time
- An optional header row (detected and skipped)
- No timestamps (each row is one sample)
- Float values representing EMG amplitude
"""
import numpy as np
import pandas as pd
from typing import Optional, Union
from io import StringIO

from .base_source import SignalSource
from ..signal_processing.validation import InvalidParameterError


class CSVSource(SignalSource):
    """
    Signal source that reads one channel from a CSV file.

    Attributes:
        data: Loaded samples of the selected channel, or None before loading
        column: Index of the channel column to read
    """

    def __init__(self, column: int = 0):
        """
        Initialize CSV source.

        Args:
            column: Zero-based index of the column holding the channel

        Raises:
            InvalidParameterError: if column is not a non-negative integer
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)) or column < 0:
            raise InvalidParameterError(f"Column must be a non-negative integer, got {column!r}")
        self.column = int(column)
        self.data: Optional[np.ndarray] = None

    def load_from_file(self, file_content: Union[bytes, str]) -> bool:
        """
        Load a signal from uploaded file content.

        Args:
            file_content: Raw bytes (or text) of the CSV file

        Returns:
            True if data loaded successfully, False otherwise
        """
        try:
            if isinstance(file_content, bytes):
                # Handle both UTF-8 and Latin-1 encodings commonly used in data files
                try:
                    content_str = file_content.decode('utf-8')
                except UnicodeDecodeError:
                    content_str = file_content.decode('latin-1')
            else:
                content_str = file_content

            df = pd.read_csv(StringIO(content_str), header=None)
            self.data = self._extract_column(df)
            return True

        except (ValueError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            print(f"[ERROR] Failed to load CSV: {e}")
            self.data = None
            return False

    def load_from_path(self, filepath: str) -> bool:
        """
        Load a signal from a CSV file on disk.

        Returns:
            True if data loaded successfully, False otherwise
        """
        try:
            with open(filepath, 'rb') as f:
                content = f.read()
        except OSError as e:
            print(f"[ERROR] Could not open {filepath}: {e}")
            self.data = None
            return False
        return self.load_from_file(content)

    def _extract_column(self, df: pd.DataFrame) -> np.ndarray:
        if df.empty:
            raise ValueError("CSV file contains no rows")

        # A first row with a filled, non-numeric cell is a header; blank
        # cells alone do not make one
        first_row = pd.to_numeric(df.iloc[0], errors='coerce')
        if (df.iloc[0].notna() & first_row.isna()).any():
            df = df.iloc[1:]

        if not 0 <= self.column < df.shape[1]:
            raise ValueError(
                f"CSV has {df.shape[1]} columns but column {self.column} was requested"
            )

        values = pd.to_numeric(df.iloc[:, self.column], errors='coerce')
        if values.empty:
            raise ValueError("CSV file contains no samples")
        if values.isna().any():
            raise ValueError(f"Column {self.column} contains non-numeric values")

        return values.to_numpy(dtype=np.float64)

    def get_signal(self, num_samples: Optional[int] = None, gesture=None) -> np.ndarray:
        """
        Return the first num_samples samples (all of them when None).

        Raises:
            InvalidParameterError: if nothing is loaded or too many samples are requested
        """
        if self.data is None:
            raise InvalidParameterError("No CSV data loaded")
        if num_samples is None:
            return self.data.copy()

        num_samples = self._check_num_samples(num_samples)
        if num_samples > len(self.data):
            raise InvalidParameterError(
                f"Requested {num_samples} samples but the file holds {len(self.data)}"
            )
        return self.data[:num_samples].copy()

    def available_samples(self) -> int:
        return len(self.data) if self.data is not None else 0
