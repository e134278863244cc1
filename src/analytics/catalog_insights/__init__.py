"""Catalog insight queries over the streaming catalog export."""

from .main import run as run
from .queries import run_all as run_all
