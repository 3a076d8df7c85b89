"""Utilities package"""
from .helpers import sanitize_filename, format_date_time, format_time, format_area, timestamp_now

__all__ = ["sanitize_filename", "format_date_time", "format_time", "format_area", "timestamp_now"]
