from __future__ import annotations

import logging
from functools import reduce
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from genocoord.models.genome import GenomicRange
from genocoord.utils.config import LocusConfig


def _closed_view(grange: GenomicRange) -> str:
    if grange.length <= 0:
        return "(empty)"
    start, end = grange.range_0closed()
    return f"{start}..={end}"


def build_locus_table(ranges: List[GenomicRange], union: Optional[GenomicRange] = None) -> Table:
    table = Table(title="Coordinate views")
    table.add_column("locus")
    table.add_column("seqid")
    table.add_column("1-based closed")
    table.add_column("0-based half-open")
    table.add_column("0-based closed")

    rows = [(str(r), r) for r in ranges]
    if union is not None:
        rows.append(("bounding union", union))

    for label, grange in rows:
        start1, end1 = grange.range_1closed()
        start0, end0 = grange.range_0halfopen()
        table.add_row(label, str(grange.seqid), f"{start1}..={end1}", f"{start0}..{end0}", _closed_view(grange))
    return table


def run_locus(config: LocusConfig, logger: logging.Logger, console: Optional[Console] = None) -> List[GenomicRange]:
    """Parse each locus and print it in every coordinate convention.

    Raises:
        InvalidArguments: If a locus is malformed, or if --combine is used
            with loci on different sequences.
    """
    ranges = []
    for locus in config.loci:
        grange = GenomicRange.from_locus(locus)
        logger.debug(f"Parsed {locus} -> {grange.seqid} [{grange.start}, {grange.end})")
        ranges.append(grange)

    union = reduce(GenomicRange.bounding_union, ranges) if config.combine else None
    if union is not None:
        logger.info(f"Bounding union of {len(ranges)} loci: {union}")

    console = console or Console()
    console.print(build_locus_table(ranges, union))
    return ranges
