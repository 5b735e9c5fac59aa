from .genome import SeqId, GenomicRange, InvalidArguments
from .formats import (
    Strand,
    BedRow,
    Gff3Row,
    Bed6Row,
    BedGraphRow,
    BedGraphExtRow,
    DataInterval,
    parse_attributes,
)

__all__ = [
    'SeqId',
    'GenomicRange',
    'InvalidArguments',
    'Strand',
    'BedRow',
    'Gff3Row',
    'Bed6Row',
    'BedGraphRow',
    'BedGraphExtRow',
    'DataInterval',
    'parse_attributes'
]
