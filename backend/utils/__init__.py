"""
Backend utilities package.
"""

from .data_store import data_store, DataStore
from .common import (
    fetch_or_default,
    load_csv_files,
    load_seed_directory,
    split_skills,
)

__all__ = [
    "fetch_or_default",
    "load_csv_files",
    "load_seed_directory",
    "split_skills",
    "data_store",
    "DataStore",
]
