from galois_lfsr.models.env.lfsr_pins import LFSRPins
from galois_lfsr.models.env.env import Env

__all__ = ["LFSRPins", "Env"]
