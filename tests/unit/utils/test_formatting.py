"""Unit tests for formatting utilities."""

import pytest
from winkit.utils.formatting import format_bytes


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (None, "unknown"),
        (512, "512.0 B"),
        (2048, "2.0 KB"),
        (16 * 1024**3, "16.0 GB"),
        (2 * 1024**4, "2.0 TB"),
    ],
)
def test_format_bytes(size: int | None, expected: str) -> None:
    """Sizes use the largest fitting binary unit."""
    assert format_bytes(size) == expected
