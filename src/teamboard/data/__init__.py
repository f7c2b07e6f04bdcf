"""
Data submodule for reading board snapshots and writing generated files.
"""

from .io import (
    DATA_YAML,
    DATA_JSON,
    atomic_write,
    data_type_for,
    load_board,
    load_data_file,
    load_model,
)
from .validate import board_schema, validate_board_data

__all__ = [
    'DATA_YAML',
    'DATA_JSON',
    'atomic_write',
    'data_type_for',
    'load_board',
    'load_data_file',
    'load_model',
    'board_schema',
    'validate_board_data',
]
