from tibetan_iast.text.roles import PhoneticRole
from tibetan_iast.text.table import (
    AA_COMBINED,
    AA_SIGN,
    CODEPOINT_TABLE,
    LOOKAHEAD_LIQUIDS,
    VOCALIC_SIGN,
)

# current + two lookahead characters
MAX_LOOKAHEAD = 2

# codepoints whose role depends on what follows, and how many followers they read
LOOKAHEAD_NEEDED: dict[str, int] = {c: MAX_LOOKAHEAD for c in LOOKAHEAD_LIQUIDS}
LOOKAHEAD_NEEDED[AA_SIGN] = 1


def classify(current: str, next1: str | None = None, next2: str | None = None) -> tuple[PhoneticRole, int]:
    """
    Classifies one codepoint, looking at up to two following ones.

    Returns the role and how many of the following codepoints it consumed
    (0, 1 or 2). Unmapped codepoints give an UNKNOWN role; nothing raises.
    """
    liquid = LOOKAHEAD_LIQUIDS.get(current)
    if liquid is not None:
        plain, short, long_ = liquid
        if next1 == VOCALIC_SIGN:
            return short, 1
        # the long form is only tried once the AA sign is seen
        if next1 == AA_SIGN and next2 == VOCALIC_SIGN:
            return long_, 2
        return plain, 0

    if current == AA_SIGN:
        combined = AA_COMBINED.get(next1)
        if combined is not None:
            return combined, 1

    role = CODEPOINT_TABLE.get(current)
    if role is None:
        return PhoneticRole.unknown(current), 0
    return role, 0
