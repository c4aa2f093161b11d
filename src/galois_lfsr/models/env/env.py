from typing import Optional

import toffee

from galois_lfsr.models.env.lfsr_pins import LFSRPins
from galois_lfsr.parameter import PERIOD_SEARCH_LIMIT

__all__ = ["Env"]


class Env:
    def __init__(self, pins: LFSRPins):
        self.pins = pins

    def run(self, cycles: int) -> list[int]:
        """Clock the pins and collect the output after every edge."""
        outputs = []
        for _ in range(cycles):
            self.pins.clock()
            outputs.append(self.pins.output)
        return outputs

    def find_period(self, limit: int = PERIOD_SEARCH_LIMIT) -> Optional[int]:
        """
        Reset, then count edges until the register comes back to the seed.

        :return: the cycle length, or None when the seed is not revisited within limit edges
        """
        self.pins.initialize()
        start = self.pins.state
        for i in range(1, limit + 1):
            self.pins.clock()
            if self.pins.state == start:
                toffee.info(f"LFSR period: {i}")
                return i
        toffee.warning(f"LFSR did not return to {start:#x} within {limit} cycles")
        return None
