from enum import Enum
from typing import NamedTuple, Optional

__all__ = ["Feedback", "LFSRConfig"]


class Feedback(Enum):
    XOR = "xor"
    XNOR = "xnor"

    @classmethod
    def parse(cls, value) -> "Feedback":
        """Accept a Feedback or its name in any case; raise ValueError otherwise."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class LFSRConfig(NamedTuple):
    internal_size: int
    seed: int
    polynomial: str
    feedback: Feedback = Feedback.XNOR
    output_size: Optional[int] = None  # None means the full register
    strict_lockup_check: bool = False
