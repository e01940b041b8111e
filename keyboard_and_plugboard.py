# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable, Sequence

from debug import debug
from errors import PlugboardError
from rotor_and_reflector import ALPHABET, SIZE, _check_signal

PlugPair = str | tuple[str, str]


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    def __contains__(self, letter: object) -> bool:
        return letter in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            sig = self.alpha_to_index[letter]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            ) from None
        debug.log("keyboard", f"{letter}->{sig}")
        return sig

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise IndexError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]


# ── Plugboard ─────────────────────────────────────────────────────
_LETTERS = frozenset(ALPHABET)


def normalise_pairs(pairs: Iterable[PlugPair]) -> list[tuple[str, str]]:
    """Validate plug pairs ("AB" or ("A", "B"), any case) into upper-case tuples.

    Overlapping pairs are rejected, never silently repaired.
    """
    out: list[tuple[str, str]] = []
    used: set[str] = set()

    for raw in pairs:
        # normalise to (a, b)
        if isinstance(raw, str):
            if len(raw) != 2:
                raise PlugboardError(raw, f"Pair {raw!r} must be exactly 2 letters")
            a, b = raw
        else:
            try:
                a, b = raw
            except (TypeError, ValueError):
                raise PlugboardError(raw, f"Pair {raw!r} must be exactly 2 letters") from None
            if not (isinstance(a, str) and isinstance(b, str)):
                raise PlugboardError(raw)
        # exactly one letter on each side
        a, b = a.upper(), b.upper()
        if a not in _LETTERS or b not in _LETTERS:
            bad = a if a not in _LETTERS else b
            raise PlugboardError(raw, f"Symbol {bad!r} not in alphabet")
        if a == b:
            raise PlugboardError(raw, f"Plugboard cannot map a letter to itself: {a}")
        if a in used or b in used:
            dup = a if a in used else b
            raise PlugboardError(raw, f"Letter {dup!r} already used in plugboard")

        out.append((a, b))
        used.update((a, b))

    return out


def plugboard_swap(letter: str, pairs: Sequence[PlugPair]) -> str:
    """Return the partner of *letter* under *pairs*, or *letter* itself.

    The partner comes back in the same case as *letter*.
    """
    key = letter.upper() if letter.isascii() else letter
    for a, b in normalise_pairs(pairs):
        if key in (a, b):
            partner = b if key == a else a
            return partner if letter.isupper() else partner.lower()
    return letter


class Plugboard:
    def __init__(self, pairs: Sequence[PlugPair] = ()) -> None:
        self.pairs: tuple[tuple[str, str], ...] = tuple(normalise_pairs(pairs))
        table = list(range(SIZE))
        for a, b in self.pairs:
            ia, ib = ALPHABET.index(a), ALPHABET.index(b)
            table[ia], table[ib] = ib, ia
        self._map: tuple[int, ...] = tuple(table)

    def swap(self, signal: int) -> int:
        out = self._map[_check_signal(signal)]
        debug.log("plugboard", f"{ALPHABET[signal]}->{ALPHABET[out]}")
        return out

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
