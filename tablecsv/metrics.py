"""
Description:
Prometheus metrics for the table loader.

Defines counters and summaries for tracking loaded files, parsed rows, delimiter fallbacks and load durations.
"""

from prometheus_client import Counter, Summary, start_http_server

FILES_LOADED = Counter(
    'tablecsv_files_loaded_total', 'Total number of files loaded successfully', ['delimiter']
)
LOAD_ERRORS = Counter(
    'tablecsv_load_errors_total', 'Total number of failed file loads', ['kind']
)
ROWS_PARSED = Counter(
    'tablecsv_rows_parsed_total', 'Total number of rows kept in loaded tables'
)
DELIMITER_FALLBACKS = Counter(
    'tablecsv_delimiter_fallbacks_total', 'Total number of loads that fell back from ";" to ","'
)

LOAD_DURATION = Summary(
    'tablecsv_load_duration_seconds', 'Time spent loading individual files'
)


def start_metrics_server(port: int = 8000) -> None:
    """Start the Prometheus metrics HTTP server."""
    start_http_server(port)
