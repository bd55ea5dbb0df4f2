"""Frame pacing policy for real-time emulation."""

from __future__ import annotations

from datetime import timedelta

FAST_FORWARD_MULTIPLIER = 3
_NORMAL_FRAME_MICROSECONDS = 16742
NORMAL_FRAME_BUDGET = timedelta(microseconds=_NORMAL_FRAME_MICROSECONDS)

# Fast-forward shortens the frame budget rather than batching frames,
# so both modes emulate a single frame per pacing tick.
_FRAMES_PER_TICK = {False: 1, True: 1}


def emulation_frames_per_tick(fast_forward: bool) -> int:
    """Frames emulated per pacing tick; fast-forward speeds up pacing instead."""
    return _FRAMES_PER_TICK[bool(fast_forward)]


def emulation_frame_budget(fast_forward: bool) -> timedelta:
    """Wall-clock time allotted to one emulated frame."""
    if not fast_forward:
        return NORMAL_FRAME_BUDGET
    return timedelta(
        microseconds=_NORMAL_FRAME_MICROSECONDS // FAST_FORWARD_MULTIPLIER
    )