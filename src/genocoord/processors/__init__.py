from __future__ import annotations

from .readers import RowReader, Gff3Reader, Bed6Reader, BedGraphReader, BedGraphExtReader, READERS

__all__ = [
    'RowReader',
    'Gff3Reader',
    'Bed6Reader',
    'BedGraphReader',
    'BedGraphExtReader',
    'READERS'
]
