"""Bundled data files for winkit."""
