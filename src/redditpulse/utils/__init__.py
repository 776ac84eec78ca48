"""Utility modules for RedditPulse."""

from .data_prep import (
    build_export_table,
    export_filename,
    export_to_csv,
    export_to_json,
    prepare_export,
    to_csv_bytes,
)

__all__ = [
    "build_export_table",
    "export_filename",
    "export_to_csv",
    "export_to_json",
    "prepare_export",
    "to_csv_bytes",
]
