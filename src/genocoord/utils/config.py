from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

FORMATS = ('gff3', 'bed6', 'bedgraph', 'bedgraph-ext')
VALUE_TYPES = {'int': int, 'float': float}


@dataclass
class LocusConfig:
    """Configuration for the locus command."""
    loci: List[str]
    combine: bool = False

    log_dir: Optional[Path] = None
    debug: bool = False
    console_output: bool = False

    @classmethod
    def from_args(cls, args):
        """Create LocusConfig instance from parsed command line arguments."""
        if not args.loci:
            raise ValueError("At least one locus is required")
        return cls(
            loci=list(args.loci),
            combine=getattr(args, 'combine', False),
            log_dir=Path(args.logging) if getattr(args, 'logging', None) else None,
            debug=getattr(args, 'debug', False),
            console_output=getattr(args, 'console_output', False)
        )


@dataclass
class ConvertConfig:
    """Configuration for the convert command."""
    input_path: Path
    input_format: str
    output_path: Optional[Path] = None  # stdout if not specified
    sort: bool = False
    value_type: type = float

    log_dir: Optional[Path] = None  # output_path.parent/logs if not specified
    debug: bool = False
    console_output: bool = False

    @classmethod
    def from_args(cls, args):
        """Create ConvertConfig instance from parsed command line arguments."""
        if args.format not in FORMATS:
            raise ValueError(f"Unknown format '{args.format}', expected one of: {', '.join(FORMATS)}")

        value_type = getattr(args, 'value_type', 'float') or 'float'
        if value_type not in VALUE_TYPES:
            raise ValueError(f"Unknown value type '{value_type}', expected one of: {', '.join(VALUE_TYPES)}")

        output_path = Path(args.output) if getattr(args, 'output', None) else None
        if getattr(args, 'logging', None):
            log_dir = Path(args.logging)
        elif output_path is not None:
            log_dir = output_path.parent / 'logs'
        else:
            log_dir = None

        return cls(
            input_path=Path(args.input),
            input_format=args.format,
            output_path=output_path,
            sort=getattr(args, 'sort', False),
            value_type=VALUE_TYPES[value_type],
            log_dir=log_dir,
            debug=getattr(args, 'debug', False),
            console_output=getattr(args, 'console_output', False)
        )
