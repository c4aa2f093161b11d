from galois_lfsr.models.lfsr import GaloisLFSR, LFSRConfigError

__all__ = ["GaloisLFSR", "LFSRConfigError"]
