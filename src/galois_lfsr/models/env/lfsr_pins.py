import toffee

from galois_lfsr.models.lfsr import GaloisLFSR
from galois_lfsr.parameter import RESET_CYCLES

__all__ = ["LFSRPins"]


class LFSRPins:
    """
    Clock/reset boundary of an LFSR.

    ``reset`` is sampled at each rising edge: when asserted the edge reloads
    the seed, otherwise it applies one feedback step. ``output`` holds the
    value sampled after the most recent edge.
    """

    def __init__(self, lfsr: GaloisLFSR):
        self.lfsr = lfsr
        self.reset = False
        self.cycle = 0
        self._callbacks = []

    def step_ris(self, callback) -> None:
        """Run callback(pins) after every rising edge."""
        self._callbacks.append(callback)

    def clock(self, cycles: int = 1) -> None:
        for _ in range(cycles):
            if self.reset:
                self.lfsr.reset()
            else:
                self.lfsr.step()
            self.cycle += 1
            for cb in self._callbacks:
                cb(self)

    def initialize(self, cycles: int = RESET_CYCLES) -> None:
        self.reset = True
        self.clock(cycles)
        self.reset = False
        toffee.debug(f"LFSRPins: reset released at cycle {self.cycle}, output {self.output:#x}")

    @property
    def output(self) -> int:
        return self.lfsr.output()

    @property
    def state(self) -> int:
        return self.lfsr.state
