from typing import Optional

import toffee

from galois_lfsr.customtypes import Feedback, LFSRConfig
from galois_lfsr.util import PolynomialLike, mask, parse_polynomial, to_bit_string

__all__ = ["GaloisLFSR", "LFSRConfigError"]


class LFSRConfigError(ValueError):
    """Raised when an LFSR cannot be built from the given parameters."""


class GaloisLFSR:
    """
    Galois LFSR, one step per clock edge.

    Every tapped position i < N-1 takes ``op(r[i+1], r[0])``, untapped
    positions shift down, and the top bit is refilled with ``r[0]``.
    The register reads as zero until the first reset.
    """

    def __init__(self, internal_size: int, seed: int, polynomial: PolynomialLike,
                 feedback: Feedback = Feedback.XNOR, output_size: Optional[int] = None,
                 strict_lockup_check: bool = False):
        if output_size is None:
            output_size = internal_size

        if internal_size < 1 or output_size < 1:
            self._fail(f"Register and output widths must be positive, got N={internal_size}, out={output_size}")
        if internal_size < output_size:
            self._fail(f"Output width {output_size} exceeds register width {internal_size}")
        if seed < 0:
            self._fail(f"Seed must be non-negative, got {seed}")
        try:
            poly, poly_len = parse_polynomial(polynomial)
        except ValueError as e:
            self._fail(str(e))
        if poly_len != internal_size:
            self._fail(f"Polynomial length {poly_len} does not match register width {internal_size}")
        try:
            feedback = Feedback.parse(feedback)
        except ValueError:
            self._fail(f"Unknown feedback operator {feedback!r}, expected 'xor' or 'xnor'")

        self._n = internal_size
        self._out_n = output_size
        self._feedback = feedback
        self._seed = seed & mask(internal_size)
        self._poly = poly
        # bit N-1 of the polynomial never gates anything
        self._taps = poly & mask(internal_size - 1)
        self._top = 1 << (internal_size - 1)
        self._state = 0

        # without strict checking only the all-ones pattern is flagged, whatever the operator
        pattern = self.lockup_state if strict_lockup_check else mask(internal_size)
        self.lockup_seed = self._seed == pattern
        if self.lockup_seed:
            name = "all-ones" if pattern else "all-zeros"
            toffee.warning(f"LFSR seed {to_bit_string(self._seed, self._n)} matches the {name} lock-up pattern")

    @classmethod
    def from_config(cls, config: LFSRConfig) -> "GaloisLFSR":
        return cls(config.internal_size, config.seed, config.polynomial, config.feedback,
                   config.output_size, config.strict_lockup_check)

    @staticmethod
    def _fail(msg: str):
        toffee.error(msg)
        raise LFSRConfigError(msg)

    def reset(self) -> None:
        self._state = self._seed
        toffee.debug(f"LFSR reset to {self!r}")

    def step(self) -> None:
        s = self._state
        feed = s & 1
        nxt = s >> 1
        if feed:
            nxt ^= self._taps
        if self._feedback is Feedback.XNOR:
            nxt ^= self._taps
        if feed:
            nxt |= self._top
        self._state = nxt

    def output(self) -> int:
        return self._state & mask(self._out_n)

    def generate(self, n: int) -> list[int]:
        """Step n times, returning the output after each step."""
        res = []
        for _ in range(n):
            self.step()
            res.append(self.output())
        return res

    def __iter__(self):
        while True:
            self.step()
            yield self.output()

    @property
    def state(self) -> int:
        return self._state

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def polynomial(self) -> int:
        return self._poly

    @property
    def feedback(self) -> Feedback:
        return self._feedback

    @property
    def internal_size(self) -> int:
        return self._n

    @property
    def output_size(self) -> int:
        return self._out_n

    @property
    def lockup_state(self) -> int:
        """Fixed point of the step function under the configured operator."""
        return mask(self._n) if self._feedback is Feedback.XNOR else 0

    @property
    def is_locked(self) -> bool:
        return self._state == self.lockup_state

    def __repr__(self):
        return f"GaloisLFSR(state={to_bit_string(self._state, self._n)}, feedback={self._feedback.value})"


if __name__ == '__main__':
    t = GaloisLFSR(4, 0b0001, "0100", Feedback.XOR)
    t.reset()
    for i in range(16):
        print(to_bit_string(t.output(), 4))
        t.step()
