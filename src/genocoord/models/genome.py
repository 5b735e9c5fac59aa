"""Sequence identifiers and genomic ranges.

Coordinates are always stored 0-based and half-open. Callers must say which
convention they are handing in (or asking for) so that translation between
conventions happens in exactly one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Tuple, Union

if TYPE_CHECKING:
    from .formats import BedRow, Gff3Row

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

_UNSIGNED_PATTERN = re.compile(r'\+?[0-9]+')

LOCUS_HINT = "location should be in the form <seqid>:<start>-<end>"


class InvalidArguments(ValueError):
    """Raised when arguments cannot describe a valid genomic location."""

    def __init__(self, message: str):
        super().__init__(f"invalid arguments: {message}")
        self.message = message


def parse_unsigned(text: str, limit: int):
    """Parse text as an unsigned integer no larger than limit, else None."""
    if not _UNSIGNED_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > limit:
        return None
    return value


@total_ordering
@dataclass(frozen=True, eq=True)
class SeqId:
    """Refers to a genomic sequence e.g. chromosome, scaffold or contig.

    Any string is accepted. Two ids that both parse as unsigned 32-bit
    integers are ordered numerically ("2" < "10"); every other pair is
    ordered as plain strings. Ids that overflow 32 bits are treated as
    non-numeric. Distinct ids with the same number (e.g. "02" and "2") are
    neither less nor greater than each other, yet not equal, so >= and <=
    hold in both directions for such a pair.
    """
    name: str

    def as_str(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: SeqId) -> bool:
        if not isinstance(other, SeqId):
            return NotImplemented
        if self.name == other.name:
            return False
        seqnum = parse_unsigned(self.name, U32_MAX)
        other_seqnum = parse_unsigned(other.name, U32_MAX)
        if seqnum is not None and other_seqnum is not None:
            return seqnum < other_seqnum
        return self.name < other.name


SeqIdLike = Union[SeqId, str]


def to_seqid(value: SeqIdLike) -> SeqId:
    if isinstance(value, SeqId):
        return value
    return SeqId(str(value))


def _check_bounds(start, end):
    for bound in (start, end):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise InvalidArguments(f"coordinates must be integers, got {bound!r}")
        if bound < 0:
            raise InvalidArguments(f"coordinates must not be negative, got {bound}")


@total_ordering
@dataclass(frozen=True)
class GenomicRange:
    """A range on a specific sequence.

    Accessors require the caller to be explicit about the coordinate
    convention wanted, which avoids the usual off-by-one mix-ups between
    formats. Ranges order by seqid, then start, then end.
    """
    # 0-based, open on the right
    seqid: SeqId
    start: int
    end: int

    @classmethod
    def from_0halfopen(cls, seqid: SeqIdLike, bounds: Union[Tuple[int, int], range]) -> GenomicRange:
        if isinstance(bounds, range):
            bounds = (bounds.start, bounds.stop)
        start, end = bounds
        _check_bounds(start, end)
        return cls(to_seqid(seqid), start, end)

    @classmethod
    def from_1closed(cls, seqid: SeqIdLike, bounds: Tuple[int, int]) -> GenomicRange:
        start, end = bounds
        _check_bounds(start, end)
        if start == 0:
            raise InvalidArguments("1-based coordinates can't start with 0")
        return cls(to_seqid(seqid), start - 1, end)

    @classmethod
    def from_gff_row(cls, row: Gff3Row) -> GenomicRange:
        return cls(row.seqid, row.start - 1, row.end)

    @classmethod
    def from_bed_row(cls, row: BedRow) -> GenomicRange:
        return cls(to_seqid(row.chrom), row.chrom_start, row.chrom_end)

    @classmethod
    def from_locus(cls, text: str) -> GenomicRange:
        """Parse a 1-based closed locus such as ``chr1:100-200``.

        Raises:
            InvalidArguments: If text is not exactly ``<seqid>:<start>-<end>``
                with unsigned integer bounds, or if start is 0.
        """
        values = text.split(':')
        if len(values) == 2:
            seqid, bounds = values
            parts = bounds.split('-')
            if len(parts) == 2:
                start = parse_unsigned(parts[0], U64_MAX)
                end = parse_unsigned(parts[1], U64_MAX)
                if start is not None and end is not None:
                    return cls.from_1closed(seqid, (start, end))
        raise InvalidArguments(LOCUS_HINT)

    def bounding_union(self, other: GenomicRange) -> GenomicRange:
        """Smallest range covering both self and other.

        This is not a set union: a gap between disjoint ranges is covered too.
        """
        if self.seqid != other.seqid:
            raise InvalidArguments("can only combine GenomicRanges with the same seqid")
        return GenomicRange(self.seqid, min(self.start, other.start), max(self.end, other.end))

    combine = bounding_union

    def __lt__(self, other: GenomicRange) -> bool:
        if not isinstance(other, GenomicRange):
            return NotImplemented
        if self.seqid < other.seqid:
            return True
        if other.seqid < self.seqid:
            return False
        # seqids order equal, which includes distinct numeric ids like "02" and "2"
        return (self.start, self.end) < (other.start, other.end)

    def range_1closed(self) -> Tuple[int, int]:
        return (self.start + 1, self.end)

    def range_0halfopen(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def range_0closed(self) -> Tuple[int, int]:
        if self.end <= self.start:
            raise InvalidArguments(f"empty range {self.seqid}:[{self.start}, {self.end}) has no closed form")
        return (self.start, self.end - 1)

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        start, end = self.range_1closed()
        return f"{self.seqid}:{start}-{end}"
