"""Data models for kubereport."""
