"""YouTube Search Exporter - A tool for exporting YouTube search results with transcripts to CSV."""

__version__ = "0.1.0"

# Main workflow function
from .pipeline import export_search_results

# API functions for searching and getting video data
from .api import (
    collect_search_results,
    extract_video_ids,
    fetch_search_page,
    fetch_video_details,
)

# Transcript functions
from .transcript import (
    download_transcript,
    fetch_transcript,
)

# Record building and export
from .records import (
    build_output_record,
    build_output_records,
    normalize_video_detail,
    parse_view_count,
    sort_records,
)
from .export import CSV_FIELDS, save_records_csv

# Errors
from .errors import FailurePolicy, RemoteError, TransientAbsence, YouTubeExportError

# Configuration
from .config import ExportSettings, load_config_from_env, load_settings_from_env

__all__ = [
    # Main workflow
    "export_search_results",
    # API functions
    "fetch_search_page",
    "collect_search_results",
    "extract_video_ids",
    "fetch_video_details",
    # Transcript functions
    "download_transcript",
    "fetch_transcript",
    # Records and export
    "build_output_record",
    "build_output_records",
    "normalize_video_detail",
    "parse_view_count",
    "sort_records",
    "CSV_FIELDS",
    "save_records_csv",
    # Errors
    "FailurePolicy",
    "RemoteError",
    "TransientAbsence",
    "YouTubeExportError",
    # Config
    "ExportSettings",
    "load_config_from_env",
    "load_settings_from_env",
]
