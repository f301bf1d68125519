"""Shared helpers for Swiss Cut."""

from swisscut.utils.logging import setup_logger
from swisscut.utils.utility_functions import compute_total_rounds, generate_id

__all__ = ["setup_logger", "generate_id", "compute_total_rounds"]
