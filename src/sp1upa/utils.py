import re

from .errors import InvalidFieldElementError

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")

# public inputs and field elements are uint256 on chain
MAX_UINT_BITS = 256


def split_list(data, n):
    """Split data into n chunks"""
    return [data[i : i + n] for i in range(0, len(data), n)]


def strip_hex_prefix(s: str) -> str:
    """Remove a leading `0x`/`0X` from `s` if present"""
    if s[:2] in ("0x", "0X"):
        return s[2:]
    return s


def is_hex(s: str) -> bool:
    return _HEX_DIGITS.fullmatch(s) is not None


def parse_uint(value) -> int:
    """
    Parse an unsigned integer from an int, a decimal string
    or a `0x`-prefixed hex string
    """
    if isinstance(value, bool):
        raise InvalidFieldElementError(f"Invalid unsigned integer: {value!r}")

    if isinstance(value, int):
        n = value
    elif isinstance(value, str):
        s = value.strip()
        if s[:2] in ("0x", "0X"):
            digits, base = s[2:], 16
            valid = bool(digits) and is_hex(digits)
        else:
            digits, base = s, 10
            valid = s.isascii() and s.isdigit()
        if not valid:
            raise InvalidFieldElementError(f"Invalid unsigned integer: {value!r}")
        try:
            n = int(digits, base)
        except ValueError as exc:
            raise InvalidFieldElementError(
                f"Cannot parse unsigned integer: {exc}"
            ) from exc
    else:
        raise InvalidFieldElementError(
            f"Invalid unsigned integer type: {type(value).__name__}"
        )

    if n < 0:
        raise InvalidFieldElementError(f"Negative value is not allowed: {value!r}")
    if n.bit_length() > MAX_UINT_BITS:
        raise InvalidFieldElementError(
            f"Value does not fit in {MAX_UINT_BITS} bits"
        )

    return n
