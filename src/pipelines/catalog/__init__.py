"""Streaming catalog ingestion pipeline."""

from .extract import extract_catalog_rows as extract_catalog_rows
from .load import load_catalog as load_catalog
from .load import records_to_frame as records_to_frame
from .models import ContentRecord as ContentRecord
