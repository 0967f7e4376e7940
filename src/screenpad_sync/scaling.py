from __future__ import annotations


def scale(source_value: int, source_range: int, target_range: int) -> int:
    """Map a source brightness onto the target's range.

    Integer floor division, clamped to ``[0, target_range]`` so that a
    misbehaving source can never push an out-of-range value to the target.
    """

    if source_range <= 0:
        raise ValueError(f"source_range must be > 0, got {source_range}")

    raw = source_value * target_range // source_range
    if raw < 0:
        return 0
    if raw > target_range:
        return target_range
    return raw
