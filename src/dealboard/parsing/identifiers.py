"""CRM record identifiers: 15-char case-sensitive and 18-char checksum forms."""

CHECKSUM_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ012345"
OPPORTUNITY_PREFIX = "006"


def is_valid_id(value: str, prefix: str = OPPORTUNITY_PREFIX) -> bool:
    """True for a trimmed 15 or 18 char ASCII alphanumeric id with the given prefix."""
    s = (value or "").strip()
    if len(s) not in (15, 18):
        return False
    if not s.startswith(prefix):
        return False
    return s.isascii() and s.isalnum()


def to_18(value: str) -> str:
    """
    Extend a 15-char id with its 3-char case checksum.
    Each 5-char chunk yields a 5-bit word (bit j set when char j is an
    uppercase ASCII letter) indexed into CHECKSUM_ALPHABET.
    Anything that is not exactly 15 chars is returned unchanged.
    """
    if len(value) != 15:
        return value
    suffix = ""
    for start in (0, 5, 10):
        chunk = value[start : start + 5]
        flags = 0
        for j, char in enumerate(chunk):
            if "A" <= char <= "Z":
                flags |= 1 << j
        suffix += CHECKSUM_ALPHABET[flags]
    return value + suffix
