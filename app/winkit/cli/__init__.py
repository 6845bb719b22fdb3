"""Command line interface for winkit."""
