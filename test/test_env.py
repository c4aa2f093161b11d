import logging

import toffee

from galois_lfsr import Env, Feedback, GaloisLFSR, LFSRPins
from galois_lfsr.parameter import INTERNAL_SIZE, POLYNOMIAL

toffee.setup_logging(logging.WARNING)


def make_pins(seed=0b0001, poly="0100", feedback=Feedback.XOR, out=4) -> LFSRPins:
    return LFSRPins(GaloisLFSR(4, seed, poly, feedback, out))


def test_reset_is_synchronous():
    pins = make_pins(seed=0b1010)
    pins.clock(3)
    before = pins.state
    pins.reset = True
    assert pins.state == before
    pins.clock()
    assert pins.state == 0b1010


def test_reset_has_priority_over_step():
    pins = make_pins(seed=0b0001)
    pins.initialize()
    pins.reset = True
    pins.clock(5)
    assert pins.state == 0b0001
    assert pins.cycle == 6


def test_one_transition_per_edge():
    pins = make_pins()
    pins.initialize()
    seen = []
    pins.step_ris(lambda p: seen.append((p.cycle, p.state)))
    pins.clock(3)
    assert seen == [(2, 0xc), (3, 0x6), (4, 0x3)]


def test_output_stable_without_edge():
    pins = make_pins(out=2)
    pins.initialize()
    pins.clock()
    assert pins.output == pins.output == 0b00


def test_env_run():
    pins = make_pins(out=2)
    pins.initialize()
    assert Env(pins).run(6) == [0, 2, 3, 1, 2, 1]


def test_find_period_maximal():
    assert Env(make_pins()).find_period() == 15
    assert Env(make_pins(seed=0, feedback=Feedback.XNOR)).find_period() == 15


def test_find_period_default_parameters():
    for fb in Feedback:
        pins = LFSRPins(GaloisLFSR(INTERNAL_SIZE, 1, POLYNOMIAL, fb))
        assert Env(pins).find_period() == (1 << INTERNAL_SIZE) - 1


def test_find_period_short_cycle():
    # x^4 + x^3 + x^2 + x + 1 is irreducible but not primitive
    assert Env(make_pins(poly="0111")).find_period() == 5


def test_find_period_lockup():
    assert Env(make_pins(seed=0xf, feedback=Feedback.XNOR)).find_period() == 1


def test_find_period_limit():
    assert Env(make_pins()).find_period(limit=10) is None
