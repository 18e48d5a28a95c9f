"""Template-based SQL statement generator for Postgres and BigQuery."""

__version__ = "0.1.0"
