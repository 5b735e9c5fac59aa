from __future__ import annotations

import gzip
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, List, Optional, Type, Union

from ..models.formats import Bed6Row, BedGraphExtRow, BedGraphRow, Gff3Row


class RowReader(ABC):
    """Base class for reading rows of a genome annotation file.

    Handles plain or gzip-compressed input, comment lines and blank lines.
    Subclasses decide how a line is split and which row model it becomes.
    """

    comment_prefixes = ('#',)

    def __init__(self, filepath: Union[str, Path]):
        self.logger = logging.getLogger(__name__)
        self.filepath = Path(filepath)
        self._handle = None
        self.rows_read = 0
        self.lines_skipped = 0

    def __enter__(self):
        if str(self.filepath).endswith(('.gz', '.gzip')):
            self._handle = gzip.open(self.filepath, 'rt')
        else:
            self._handle = open(self.filepath, 'r')
        self.logger.debug(f"Opened {self.filepath}")
        return self

    def close(self):
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __iter__(self):
        return self.rows()

    def is_header(self, line: str) -> bool:
        return line.startswith(self.comment_prefixes)

    def stop_reading(self, line: str) -> bool:
        return False

    @abstractmethod
    def split(self, line: str) -> List[str]:
        """Split a data line into its columns."""
        pass

    @abstractmethod
    def parse_fields(self, fields: List[str]):
        """Build a row model from the columns of one line."""
        pass

    def rows(self) -> Iterator:
        """Yield one row model per data line.

        Raises:
            ValueError: If a line cannot be decoded, prefixed with its 1-based
                line number.
        """
        if self._handle is None:
            raise RuntimeError(f"{type(self).__name__} must be used as a context manager")

        for i, line in enumerate(self._handle, start=1):  # 1-based line counting for error messages
            line = line.rstrip('\r\n')
            if self.stop_reading(line):
                self.logger.debug(f"Line {i}: stopped reading {self.filepath}")
                break
            if not line.strip() or self.is_header(line):
                self.lines_skipped += 1
                continue

            try:
                row = self.parse_fields(self.split(line))
            except ValueError as e:  # includes pydantic.ValidationError
                raise ValueError(f"Line {i}: {e}") from e

            self.rows_read += 1
            yield row

        self.logger.info(f"Read {self.rows_read:,} rows from {self.filepath} ({self.lines_skipped:,} lines skipped)")


class Gff3Reader(RowReader):
    """Reads GFF3 rows. The embedded ##FASTA section is not read."""

    def __init__(self, filepath: Union[str, Path], feature_type: Optional[Type] = None):
        super().__init__(filepath)
        self.row_model = Gff3Row[feature_type] if feature_type is not None else Gff3Row

    def stop_reading(self, line: str) -> bool:
        return line.startswith('##FASTA')

    def split(self, line: str) -> List[str]:
        return line.split('\t')

    def parse_fields(self, fields: List[str]):
        if len(fields) != 9:
            raise ValueError(f"GFF format requires 9 fields, found {len(fields)}")
        return self.row_model.from_fields(fields)


class _BedFamilyReader(RowReader):
    comment_prefixes = ('#', 'track', 'browser')

    def split(self, line: str) -> List[str]:
        return line.split()


class Bed6Reader(_BedFamilyReader):

    def parse_fields(self, fields: List[str]) -> Bed6Row:
        return Bed6Row.from_fields(fields)


class BedGraphReader(_BedFamilyReader):

    def __init__(self, filepath: Union[str, Path], value_type: Type = float):
        super().__init__(filepath)
        self.row_model = BedGraphRow[value_type]

    def parse_fields(self, fields: List[str]):
        return self.row_model.from_fields(fields)


class BedGraphExtReader(_BedFamilyReader):
    """Reads BedGraph rows with any number of value columns.

    Columns are tab separated so that empty placeholder columns survive.
    """

    def __init__(self, filepath: Union[str, Path], value_type: Type = float):
        super().__init__(filepath)
        self.row_model = BedGraphExtRow[value_type]

    def split(self, line: str) -> List[str]:
        return line.split('\t')

    def parse_fields(self, fields: List[str]):
        return self.row_model.from_fields(fields)


READERS = {
    'gff3': Gff3Reader,
    'bed6': Bed6Reader,
    'bedgraph': BedGraphReader,
    'bedgraph-ext': BedGraphExtReader,
}
