"""Row-level structure of GFF3, BED6 and BedGraph files.

These models are not intended to be general or comprehensive:
- Percent encodings in GFF3 attributes are neither decoded nor encoded.
- Validation is limited to types and basic structure, e.g. a BED6 score must
  fit in 0-65535 but a GFF3 score is any text ('.' is allowed).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, Generic, List, Optional, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

import numpy as np
from pydantic import BaseModel, BeforeValidator, Field, field_validator

from .genome import GenomicRange, SeqId, to_seqid

F = TypeVar('F')
T = TypeVar('T', int, float)

PLACEHOLDERS = frozenset({'', '.', 'NA'})

SeqIdField = Annotated[SeqId, BeforeValidator(to_seqid)]


class Strand(Enum):
    """The genome strand an annotation is associated with."""
    PLUS = '+'
    MINUS = '-'
    NONE = '.'

    def __str__(self) -> str:
        return self.value


def parse_attributes(text: str) -> Dict[str, str]:
    """Parse a GFF3 attributes column into an insertion-ordered mapping.

    Pieces are split on ';' and then on the first '='. Pieces without '='
    are dropped. A repeated key keeps the position of its first occurrence
    and the value of its last. No whitespace is trimmed.
    """
    attributes = {}
    for kv in text.split(';'):
        key, sep, value = kv.partition('=')
        if sep:
            attributes[key] = value
    return attributes


def format_attributes(attributes: Dict[str, str]) -> str:
    return ';'.join(f"{key}={value}" for key, value in attributes.items())


def render_value(value: Any) -> str:
    if value is None:
        return '.'
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@runtime_checkable
class BedRow(Protocol):
    """Fields shared by every BED-family row, 0-based half-open."""

    @property
    def chrom(self) -> SeqId: ...

    @property
    def chrom_start(self) -> int: ...

    @property
    def chrom_end(self) -> int: ...


class _Row(BaseModel):
    """Common behaviour for rows decoded from delimited text."""
    FIELDS: ClassVar[Tuple[str, ...]] = ()

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    @classmethod
    def from_fields(cls, fields: Sequence[str]):
        """Build a row from already split text columns.

        Raises:
            ValueError: If the number of columns is wrong or a column fails
                validation (pydantic.ValidationError is a ValueError).
        """
        if len(fields) != len(cls.FIELDS):
            raise ValueError(f"{cls.__name__} requires {len(cls.FIELDS)} fields, found {len(fields)}")
        return cls.model_validate(dict(zip(cls.FIELDS, fields)))

    def to_fields(self) -> List[str]:
        return [render_value(getattr(self, name)) for name in self.FIELDS]


class Gff3Row(_Row, Generic[F]):
    """The nine standard GFF3 columns.

    feature_type is generic so callers may use plain strings or an Enum of
    controlled feature types. start and end are 1-based closed.
    """
    FIELDS: ClassVar[Tuple[str, ...]] = (
        'seqid', 'source', 'feature_type', 'start', 'end', 'score', 'strand', 'phase', 'attributes'
    )

    seqid: SeqIdField
    source: str
    feature_type: F
    start: int = Field(ge=1)
    end: int = Field(ge=0)
    score: str
    strand: Strand
    phase: str
    attributes: Dict[str, str] = Field(default_factory=dict)

    @field_validator('attributes', mode='before')
    @classmethod
    def split_attributes(cls, value):
        if isinstance(value, str):
            return parse_attributes(value)
        return value

    def to_fields(self) -> List[str]:
        fields = super().to_fields()
        fields[-1] = format_attributes(self.attributes)
        return fields

    def to_range(self) -> GenomicRange:
        return GenomicRange.from_gff_row(self)


class Bed6Row(_Row):
    """The six standard BED columns."""
    FIELDS: ClassVar[Tuple[str, ...]] = ('chrom', 'chrom_start', 'chrom_end', 'name', 'score', 'strand')

    chrom: SeqIdField
    chrom_start: int = Field(ge=0)
    chrom_end: int = Field(ge=0)
    name: str
    score: int = Field(ge=0, le=65535)
    strand: Strand

    def to_range(self) -> GenomicRange:
        return GenomicRange.from_bed_row(self)


class BedGraphRow(_Row, Generic[T]):
    """A BedGraph row carrying a single value."""
    FIELDS: ClassVar[Tuple[str, ...]] = ('chrom', 'chrom_start', 'chrom_end', 'data_value')

    chrom: SeqIdField
    chrom_start: int = Field(ge=0)
    chrom_end: int = Field(ge=0)
    data_value: T

    def to_data_interval(self) -> DataInterval[T]:
        return DataInterval.from_bedgraph_row(self)


class BedGraphExtRow(_Row, Generic[T]):
    """BedGraph extended with zero or more values per row.

    Every column after the first three is a value column. Placeholder
    columns ('', '.', 'NA') are read as absent.
    """
    FIELDS: ClassVar[Tuple[str, ...]] = ('chrom', 'chrom_start', 'chrom_end')

    chrom: SeqIdField
    chrom_start: int = Field(ge=0)
    chrom_end: int = Field(ge=0)
    data_values: List[Optional[T]] = Field(default_factory=list)

    @field_validator('data_values', mode='before')
    @classmethod
    def absent_placeholders(cls, value):
        if isinstance(value, (list, tuple)):
            return [None if isinstance(v, str) and v in PLACEHOLDERS else v for v in value]
        return value

    @classmethod
    def from_fields(cls, fields: Sequence[str]):
        n_fixed = len(cls.FIELDS)
        if len(fields) < n_fixed:
            raise ValueError(f"{cls.__name__} requires at least {n_fixed} fields, found {len(fields)}")
        record = dict(zip(cls.FIELDS, fields))
        record['data_values'] = list(fields[n_fixed:])
        return cls.model_validate(record)

    def to_fields(self) -> List[str]:
        return super().to_fields() + [render_value(v) for v in self.data_values]

    def to_data_interval(self) -> DataInterval[T]:
        return DataInterval.from_bedgraph_ext_row(self)


@dataclass(frozen=True)
class DataInterval(Generic[T]):
    """A genomic range with zero or more associated data values.

    One slot per data column, in column order; None marks a missing value.
    """
    range: GenomicRange
    values: Tuple[Optional[T], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'values', tuple(self.values))

    @classmethod
    def from_bedgraph_row(cls, row: BedGraphRow[T]) -> DataInterval[T]:
        return cls(GenomicRange.from_bed_row(row), (row.data_value,))

    @classmethod
    def from_bedgraph_ext_row(cls, row: BedGraphExtRow[T]) -> DataInterval[T]:
        return cls(GenomicRange.from_bed_row(row), tuple(row.data_values))

    def as_array(self) -> np.ndarray:
        """Values as a float array, NaN where a value is missing."""
        return np.array([np.nan if v is None else v for v in self.values], dtype=float)
