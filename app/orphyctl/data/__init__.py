"""Bundled data files for orphyctl."""
