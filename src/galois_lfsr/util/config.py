import os
from typing import Mapping, Optional, Union

import toffee
from dotenv import dotenv_values

from galois_lfsr import parameter
from galois_lfsr.customtypes import Feedback, LFSRConfig
from galois_lfsr.models.lfsr import LFSRConfigError

__all__ = ["load_config", "parse_feedback"]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def parse_feedback(value: Union[str, Feedback]) -> Feedback:
    try:
        return Feedback.parse(value)
    except ValueError:
        raise LFSRConfigError(f"Unknown feedback operator {value!r}, expected 'xor' or 'xnor'") from None


def _parse_int(key: str, value) -> int:
    if isinstance(value, int):
        return value
    try:
        # accepts 0x / 0b / 0o literals as well as plain decimals
        return int(str(value).strip().replace("_", ""), 0)
    except ValueError:
        raise LFSRConfigError(f"{key} must be an integer, got {value!r}") from None


def _parse_bool(key: str, value) -> bool:
    if isinstance(value, bool):
        return value
    v = str(value).strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise LFSRConfigError(f"{key} must be a boolean, got {value!r}")


def load_config(path: Optional[Union[str, os.PathLike]] = None,
                values: Optional[Mapping[str, str]] = None,
                **overrides) -> LFSRConfig:
    """
    Build an LFSRConfig from parameter.py defaults, a .env file and keyword overrides.

    :param path: .env file to read; when None python-dotenv searches for one
    :param values: already loaded key/value pairs, used instead of reading a file
    :param overrides: internal_size, seed, polynomial, feedback, output_size, strict_lockup_check
    """
    env = dict(values) if values is not None else dotenv_values(path)
    p = parameter.ENV_PREFIX

    def pick(name: str, default):
        if name in overrides:
            return overrides.pop(name)
        return env.get(p + name.upper(), default)

    internal_size = _parse_int(p + "INTERNAL_SIZE", pick("internal_size", parameter.INTERNAL_SIZE))
    output_size = _parse_int(p + "OUTPUT_SIZE", pick("output_size", parameter.OUTPUT_SIZE))
    seed = _parse_int(p + "SEED", pick("seed", parameter.SEED))
    polynomial = pick("polynomial", parameter.POLYNOMIAL)
    feedback = parse_feedback(pick("feedback", parameter.FEEDBACK))
    strict = _parse_bool(p + "STRICT_LOCKUP_CHECK", pick("strict_lockup_check", False))
    if overrides:
        raise LFSRConfigError(f"Unknown configuration keys: {sorted(overrides)}")

    toffee.debug(f"LFSR config: N={internal_size}, out={output_size}, seed={seed:#x}, "
                 f"poly={polynomial}, feedback={feedback.value}")
    return LFSRConfig(internal_size, seed, polynomial, feedback, output_size, strict)
