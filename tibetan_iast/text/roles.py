from dataclasses import dataclass
from enum import Enum


class RoleKind(str, Enum):
    SPACE = "space"
    NEWLINE = "newline"
    PUNCTUATION = "punctuation"
    FULL_CONSONANT = "full_consonant"
    SUBJOINED_CONSONANT = "subjoined_consonant"
    INDEPENDENT_VOWEL = "independent_vowel"
    VOWEL_MODIFIER = "vowel_modifier"  # anusvara | visarga | candrabindu
    VOWEL_CARRIER = "vowel_carrier"  # U+0F68
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PhoneticRole:
    """Phonetic classification of one codepoint plus its Latin text."""

    kind: RoleKind
    text: str = ""

    @classmethod
    def unknown(cls, char: str) -> "PhoneticRole":
        # text keeps the original character; the hex marker is built on emit
        return cls(RoleKind.UNKNOWN, char)

    @property
    def marker(self) -> str:
        """Visible token for an unmapped codepoint: lowercase hex and a space."""
        return f"{ord(self.text):x} "


def space() -> PhoneticRole:
    return PhoneticRole(RoleKind.SPACE, " ")


def newline() -> PhoneticRole:
    return PhoneticRole(RoleKind.NEWLINE, "\n")


def punct(text: str) -> PhoneticRole:
    return PhoneticRole(RoleKind.PUNCTUATION, text)


def consonant(text: str) -> PhoneticRole:
    return PhoneticRole(RoleKind.FULL_CONSONANT, text)


def subjoined(text: str) -> PhoneticRole:
    return PhoneticRole(RoleKind.SUBJOINED_CONSONANT, text)


def vowel(text: str) -> PhoneticRole:
    return PhoneticRole(RoleKind.INDEPENDENT_VOWEL, text)


def modifier(text: str) -> PhoneticRole:
    return PhoneticRole(RoleKind.VOWEL_MODIFIER, text)


CARRIER = PhoneticRole(RoleKind.VOWEL_CARRIER, "")
