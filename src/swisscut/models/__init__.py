"""Data models for Swiss Cut."""
