"""
Time sampling for screenlist thumbnails.
"""
from typing import List


def sample_timestamps(duration: int, count: int) -> List[int]:
    """
    Evenly spaced timestamps starting at zero.

    Args:
        duration: Video duration in milliseconds
        count: Number of timestamps

    Returns:
        ``count`` timestamps ``i * (duration // count)``. Short videos may
        yield repeated timestamps.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    step = duration // count
    return [i * step for i in range(count)]
