from __future__ import annotations

import logging
import sys
import time
from typing import Iterable, List, Union

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from genocoord.models.formats import Bed6Row, BedGraphExtRow, BedGraphRow, DataInterval, Gff3Row, render_value
from genocoord.models.genome import GenomicRange
from genocoord.processors.readers import READERS
from genocoord.utils.config import ConvertConfig

Normalized = Union[GenomicRange, DataInterval]


def normalize(row) -> Normalized:
    """Convert a decoded row into its coordinate representation.

    GFF3 and BED6 rows become GenomicRanges, BedGraph rows DataIntervals.
    """
    if isinstance(row, (BedGraphRow, BedGraphExtRow)):
        return row.to_data_interval()
    if isinstance(row, (Gff3Row, Bed6Row)):
        return row.to_range()
    raise TypeError(f"Unsupported row type: {type(row).__name__}")


def _range_of(record: Normalized) -> GenomicRange:
    return record.range if isinstance(record, DataInterval) else record


def format_record(record: Normalized) -> str:
    grange = _range_of(record)
    start, end = grange.range_0halfopen()
    fields = [str(grange.seqid), str(start), str(end)]
    if isinstance(record, DataInterval):
        fields.extend(render_value(v) for v in record.values)
    return '\t'.join(fields)


def read_records(config: ConvertConfig, logger: logging.Logger) -> List[Normalized]:
    reader_cls = READERS[config.input_format]
    if config.input_format in ('bedgraph', 'bedgraph-ext'):
        reader = reader_cls(config.input_path, value_type=config.value_type)
    else:
        reader = reader_cls(config.input_path)

    records = []
    with reader, Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TextColumn("{task.completed:,.0f} rows"),
        TimeElapsedColumn(),
        console=Console(stderr=True),
        transient=True
    ) as progress:
        task = progress.add_task(f"[cyan]Reading {config.input_path.name}...", total=None)
        for row in reader:
            records.append(normalize(row))
            progress.update(task, advance=1)
    logger.debug(f"Normalized {len(records)} rows from {config.input_path}")
    return records


def write_records(records: Iterable[Normalized], handle) -> int:
    n = 0
    for record in records:
        handle.write(format_record(record) + '\n')
        n += 1
    return n


def run_convert(config: ConvertConfig, logger: logging.Logger) -> int:
    """Normalize every row of the input file to 0-based half-open coordinates.

    Returns:
        Number of records written
    """
    if not config.input_path.exists():
        raise FileNotFoundError(f"Input file not found: {config.input_path}")

    logger.info(f"Converting {config.input_path} ({config.input_format})")
    start_time = time.time()

    records = read_records(config, logger)
    if config.sort:
        records.sort(key=_range_of)
        logger.debug(f"Sorted {len(records)} records")

    if config.output_path is None:
        n = write_records(records, sys.stdout)
    else:
        config.output_path.parent.mkdir(parents=True, exist_ok=True)
        with config.output_path.open('w', encoding='utf-8') as handle:
            n = write_records(records, handle)
        logger.info(f"Wrote {n} records to {config.output_path}")

    elapsed = time.time() - start_time
    logger.info(f"Completed conversion in {elapsed:.2f} seconds")
    return n
