from typing import Sequence, Union

__all__ = ["mask", "bit", "parse_polynomial", "to_bit_string"]

PolynomialLike = Union[str, Sequence[int]]


def mask(width: int) -> int:
    """
    返回低width位全为1的掩码
    """
    return (1 << width) - 1


def bit(value: int, pos: int) -> int:
    return (value >> pos) & 1


def parse_polynomial(polynomial: PolynomialLike) -> tuple[int, int]:
    """
    Parse a tap mask written MSB first.

    :param polynomial: bit string such as ``"1001"`` / ``"0b1_001"``, or a
        sequence of bits with the most significant bit first
    :return: (mask value, number of bit positions written)
    :raises ValueError: when the value is not a str or a sequence, or a position is not 0 or 1
    """
    if isinstance(polynomial, str):
        text = polynomial.strip().replace("_", "")
        if text[:2] in ("0b", "0B"):
            text = text[2:]
        digits = list(text)
    elif isinstance(polynomial, Sequence):
        digits = [str(int(b)) if isinstance(b, bool) else str(b) for b in polynomial]
    else:
        raise ValueError(f"Polynomial must be a bit string or a bit sequence, got {type(polynomial).__name__}")

    value = 0
    for d in digits:
        if d not in ("0", "1"):
            raise ValueError(f"Invalid polynomial digit {d!r} in {polynomial!r}")
        value = (value << 1) | int(d)
    return value, len(digits)


def to_bit_string(value: int, width: int) -> str:
    return format(value & mask(width), f"0{width}b") if width > 0 else ""
