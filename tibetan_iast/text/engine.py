"""Streaming Tibetan → IAST transliteration with implicit-vowel insertion."""
import logging
from collections import deque
from typing import Iterable, Iterator

from tibetan_iast.text.classify import LOOKAHEAD_NEEDED, classify
from tibetan_iast.text.roles import PhoneticRole, RoleKind

log = logging.getLogger("tibetan_iast")

IMPLICIT_VOWEL = "a"

_BREAKS = {RoleKind.PUNCTUATION, RoleKind.SPACE, RoleKind.NEWLINE}


class TransliterationEngine:
    """
    Finite-state transducer over a stream of Tibetan codepoints.

    The only state carried between codepoints is ``pending_implicit_vowel``:
    true while the last emitted unit is a bare consonant still owed its
    inherent "a". Input can be pushed in chunks with ``feed`` or pulled from
    any iterable with ``iter_transliterate``. A trailing RA or LA (with up to
    two followers) or AA is held back until the next chunk (or ``finish``) so
    lookahead never depends on where the chunks were split.
    """

    def __init__(self) -> None:
        self.pending_implicit_vowel = False
        self.unknown_codepoints: list[str] = []
        self._window: deque[str] = deque()

    def reset(self) -> None:
        self.pending_implicit_vowel = False
        self.unknown_codepoints = []
        self._window.clear()

    def step(self, role: PhoneticRole) -> str:
        """Applies one role to the state machine and returns the text to emit."""
        if not isinstance(role, PhoneticRole):
            raise TypeError(f"Expected PhoneticRole, got {type(role).__name__}")

        kind = role.kind
        if kind is RoleKind.SUBJOINED_CONSONANT:
            # stacked consonants continue the cluster; flag is untouched
            return role.text

        if kind is RoleKind.FULL_CONSONANT or kind is RoleKind.VOWEL_CARRIER:
            out = self._owed() + role.text
            self.pending_implicit_vowel = True
            return out

        if kind is RoleKind.INDEPENDENT_VOWEL:
            # explicit vowel replaces the inherent one
            self.pending_implicit_vowel = False
            return role.text

        if kind is RoleKind.VOWEL_MODIFIER or kind in _BREAKS:
            out = self._owed() + role.text
            self.pending_implicit_vowel = False
            return out

        if kind is RoleKind.UNKNOWN:
            self._note_unknown(role.text)
            return role.marker

        raise ValueError(f"Unhandled role kind: {kind!r}")

    def feed(self, chunk: str) -> str:
        """Pushes a chunk of text; returns whatever output is already final."""
        self._window.extend(chunk)
        return "".join(self._drain(final=False))

    def finish(self) -> str:
        """Drains held-back lookahead and flushes a pending implicit vowel."""
        out = "".join(self._drain(final=True)) + self._owed()
        self.pending_implicit_vowel = False
        return out

    def iter_transliterate(self, chars: Iterable[str]) -> Iterator[str]:
        """Lazily transliterates an iterable of characters, ending with the flush."""
        for ch in chars:
            self._window.extend(ch)
            yield from self._drain(final=False)
        tail = self.finish()
        if tail:
            yield tail

    def _drain(self, final: bool) -> Iterator[str]:
        window = self._window
        while window and (final or len(window) > LOOKAHEAD_NEEDED.get(window[0], 0)):
            current = window[0]
            next1 = window[1] if len(window) > 1 else None
            next2 = window[2] if len(window) > 2 else None
            role, extra = classify(current, next1, next2)
            for _ in range(1 + extra):
                window.popleft()
            yield self.step(role)

    def _owed(self) -> str:
        return IMPLICIT_VOWEL if self.pending_implicit_vowel else ""

    def _note_unknown(self, char: str) -> None:
        code = f"U+{ord(char):04X}"
        log.debug("Unmapped codepoint %s", code)
        if code not in self.unknown_codepoints:
            self.unknown_codepoints.append(code)


def iter_transliterate(chars: Iterable[str]) -> Iterator[str]:
    return TransliterationEngine().iter_transliterate(chars)


def transliterate(text: str) -> str:
    """Transliterates a whole Tibetan-script string to IAST."""
    return "".join(iter_transliterate(text or ""))
