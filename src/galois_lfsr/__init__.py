from galois_lfsr.customtypes import Feedback, LFSRConfig
from galois_lfsr.models import GaloisLFSR, LFSRConfigError
from galois_lfsr.models.env import Env, LFSRPins
from galois_lfsr.util.config import load_config

__all__ = ["Feedback", "LFSRConfig", "GaloisLFSR", "LFSRConfigError", "Env", "LFSRPins", "load_config"]
__version__ = "0.1.0"
