"""Barrier type definitions for supplied contract barriers."""

import re
from enum import Enum
from typing import Optional, Union

RELATIVE_BARRIER_RE = re.compile(r"S-?\d+P", re.IGNORECASE)


class BarrierType(str, Enum):
    """How a supplied barrier relates to the spot."""
    RELATIVE = "relative"        # S10P, S-4P: pips above or below the spot
    ABSOLUTE = "absolute"        # 103.45: compared directly with the spot
    DIFFERENCE = "difference"    # -0.035: numerical difference from the spot


def infer_barrier_type(barrier: Union[str, int, float, None]) -> Optional[BarrierType]:
    """Barrier type implied by the textual form of a supplied barrier."""
    if barrier is None:
        return None

    if isinstance(barrier, str):
        text = barrier.strip()
        if RELATIVE_BARRIER_RE.fullmatch(text):
            return BarrierType.RELATIVE
        if text.startswith(("+", "-")):
            return BarrierType.DIFFERENCE

    return BarrierType.ABSOLUTE
