"""Tibetan codepoint → IAST table for Sanskrit written in Tibetan script.

Pure data: every entry maps one codepoint to a PhoneticRole. The few
codepoints whose reading depends on what follows (RA, LA, AA) are listed in
the LOOKAHEAD_* constants and resolved in classify.py.
"""
from tibetan_iast.text.roles import (
    CARRIER,
    PhoneticRole,
    consonant,
    modifier,
    newline,
    punct,
    space,
    subjoined,
    vowel,
)

VOCALIC_SIGN = "ྀ"  # reversed I, marks vocalic r/l
AA_SIGN = "ཱ"
I_SIGN = "ི"
U_SIGN = "ུ"

# RA / LA in both positions: (plain, short vocalic, long vocalic)
LOOKAHEAD_LIQUIDS: dict[str, tuple[PhoneticRole, PhoneticRole, PhoneticRole]] = {
    "ར": (consonant("r"), vowel("ṛ"), vowel("ṝ")),  # RA
    "ལ": (consonant("l"), vowel("ḷ"), vowel("ḹ")),  # LA
    "ྲ": (subjoined("r"), vowel("ṛ"), vowel("ṝ")),  # subjoined RA
    "ླ": (subjoined("l"), vowel("ḷ"), vowel("ḹ")),  # subjoined LA
}

# AA followed by I / U reads as a long vowel
AA_PLAIN = vowel("ā")
AA_COMBINED = {
    I_SIGN: vowel("ī"),
    U_SIGN: vowel("ū"),
}

_PUNCTUATION = {
    " ": space(),
    "\n": newline(),
    "ༀ": punct("oṃ"),  # OM syllable
    "་": punct("-"),  # tsheg, syllable divider
    "།": punct("|\n"),  # shad, section break
    "༔": punct(";"),  # gter tsheg
}

# Sanskrit CA/JA are written with TSA/DZA; WA reads as v.
_CONSONANTS = {
    "ཀ": "k",
    "ཁ": "kh",
    "ག": "g",
    "གྷ": "gh",
    "ང": "ṅ",
    "ཉ": "ñ",
    "ཊ": "ṭ",
    "ཋ": "ṭh",
    "ཌ": "ḍ",
    "ཎ": "ṇ",
    "ཏ": "t",
    "ཐ": "th",
    "ད": "d",
    "དྷ": "dh",
    "ན": "n",
    "པ": "p",
    "ཕ": "ph",
    "བ": "b",
    "བྷ": "bh",
    "མ": "m",
    "ཙ": "c",  # TSA
    "ཚ": "ch",  # TSHA
    "ཛ": "j",  # DZA
    "ཝ": "v",  # WA
    "ཡ": "y",
    "ཤ": "ś",
    "ཥ": "ṣ",
    "ས": "s",
    "ཧ": "h",
}

_SUBJOINED = {
    "ྐ": "k",
    "ྑ": "kh",
    "ྒ": "g",
    "ྒྷ": "gh",
    "ྔ": "ṅ",
    "ྕ": "c",  # CA
    "ྖ": "ch",  # CHA
    "ྙ": "ñ",
    "ྚ": "ṭ",
    "ྛ": "ṭh",
    "ྜ": "ḍ",
    "ྞ": "ṇ",
    "ྟ": "t",
    "ྠ": "th",
    "ྡ": "d",
    "ྡྷ": "dh",
    "ྣ": "n",
    "ྤ": "p",
    "ྥ": "ph",
    "ྦ": "b",
    "ྦྷ": "bh",
    "ྨ": "m",
    "ྩ": "c",  # TSA
    "ྪ": "ch",  # TSHA
    "ྫ": "j",  # DZA
    "ྭ": "v",  # WA
    "ྱ": "y",
    "ྴ": "ś",
    "ྵ": "ṣ",
    "ྷ": "h",
}

# II and UU are "discouraged" by Unicode but still seen in the wild.
_VOWELS = {
    "ི": "i",
    "ཱི": "ī",
    "ུ": "u",
    "ཱུ": "ū",
    "ེ": "e",
    "ཻ": "ai",  # EE
    "ོ": "o",
    "ཽ": "au",  # OO
}

_MODIFIERS = {
    "ཾ": "ṃ",  # anusvara
    "ཿ": "ḥ",  # visarga
    "ྃ": "~",  # candrabindu
}


def _build() -> dict[str, PhoneticRole]:
    table: dict[str, PhoneticRole] = dict(_PUNCTUATION)
    table.update({c: consonant(t) for c, t in _CONSONANTS.items()})
    table.update({c: subjoined(t) for c, t in _SUBJOINED.items()})
    table.update({c: vowel(t) for c, t in _VOWELS.items()})
    table.update({c: modifier(t) for c, t in _MODIFIERS.items()})
    table["ཨ"] = CARRIER
    # defaults when no lookahead pattern matches
    table.update({c: roles[0] for c, roles in LOOKAHEAD_LIQUIDS.items()})
    table[AA_SIGN] = AA_PLAIN
    return table


CODEPOINT_TABLE: dict[str, PhoneticRole] = _build()
