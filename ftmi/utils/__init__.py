"""Utility helpers for ftmi: logging, application paths, path extraction."""
