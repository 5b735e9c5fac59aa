"""Genomic coordinates and row models for GFF3, BED6 and BedGraph."""

from genocoord.models import (
    SeqId,
    GenomicRange,
    InvalidArguments,
    Strand,
    BedRow,
    Gff3Row,
    Bed6Row,
    BedGraphRow,
    BedGraphExtRow,
    DataInterval,
    parse_attributes,
)

__version__ = "0.1.0"
