from .config import LocusConfig, ConvertConfig
from .logging import setup_file_logging

__all__ = ['LocusConfig', 'ConvertConfig', 'setup_file_logging']
