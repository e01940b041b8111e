# rotor_and_reflector.py
from __future__ import annotations

import string
from dataclasses import dataclass, field

from debug import debug
from errors import ConfigurationError, SettingRangeError

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)


def setting_index(setting: str, value: int | str) -> int:
    """Turn a position / ring setting (0-25 or a window letter) into an index."""
    if isinstance(value, str):
        letter = value.strip()
        letter = letter.upper() if letter.isascii() else letter
        if len(letter) == 1 and letter in ALPHABET:
            return ALPHABET.index(letter)
        raise SettingRangeError(setting, value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingRangeError(setting, value)
    if not 0 <= value < SIZE:
        raise SettingRangeError(setting, value)
    return value


def _check_signal(sig: int) -> int:
    # an out-of-range signal is a wiring bug; never let it wrap around
    if not 0 <= sig < SIZE:
        raise IndexError(f"Signal {sig} out of range 0–{SIZE - 1}")
    return sig


@dataclass(frozen=True, slots=True)
class RotorDefinition:
    """Fixed wiring of one wheel type; shared read-only by every Rotor built from it."""

    name: str
    wiring: str
    notch: str
    forward_table: tuple[int, ...] = field(init=False, repr=False)
    backward_table: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(ALPHABET):
            raise ConfigurationError(f"{self.name}: wiring must be a permutation of A–Z")
        if len(self.notch) != 1 or self.notch not in ALPHABET:
            raise ConfigurationError(f"{self.name}: notch must be a single letter A–Z")

        # integer lookup tables
        fwd = tuple(ALPHABET.index(c) for c in self.wiring)
        rev = tuple(self.wiring.index(c) for c in ALPHABET)
        object.__setattr__(self, "forward_table", fwd)
        object.__setattr__(self, "backward_table", rev)

    @property
    def notch_index(self) -> int:
        return ALPHABET.index(self.notch)


class Rotor:
    def __init__(
        self,
        definition: RotorDefinition,
        ring_setting: int | str = 0,
        position: int | str = 0,
    ) -> None:
        self.definition = definition
        self._ring_setting = setting_index("ring setting", ring_setting)
        self._position = setting_index("position", position)

    # ── read-only views ───────────────────────────────────────────
    @property
    def position(self) -> int:
        return self._position

    @property
    def ring_setting(self) -> int:
        return self._ring_setting

    @property
    def window(self) -> str:
        """Letter currently showing in the machine window."""
        return ALPHABET[self._position]

    def set_position(self, position: int | str) -> None:
        """Turn the wheel by hand; integers are taken modulo 26."""
        if isinstance(position, int) and not isinstance(position, bool):
            self._position = position % SIZE
        else:
            self._position = setting_index("position", position)

    # ── stepping --------------------------------------------------
    def is_at_notch(self) -> bool:
        return self._position == self.definition.notch_index

    def step(self) -> None:
        self._position = (self._position + 1) % SIZE

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        return self._through(self.definition.forward_table, sig, "fwd")

    def backward(self, sig: int) -> int:
        return self._through(self.definition.backward_table, sig, "bwd")

    def _through(self, table: tuple[int, ...], sig: int, direction: str) -> int:
        offset = self._position - self._ring_setting
        shift = (_check_signal(sig) + offset) % SIZE
        out = (table[shift] - offset) % SIZE
        debug.log("rotor", f"{self.definition.name} {direction} {sig}->{out}")
        return out

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return (
            f"<Rotor {self.definition.name} pos={self._position} "
            f"ring={self._ring_setting}>"
        )


class Reflector:
    def __init__(self, wiring: str, name: str = "") -> None:
        if sorted(wiring) != sorted(ALPHABET):
            raise ConfigurationError("Reflector wiring must be a permutation of A–Z")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            j = ALPHABET.index(c)
            if wiring[j] != ALPHABET[i] or i == j:
                raise ConfigurationError(
                    "Reflector wiring must be an involution with no fixed points"
                )

        self.name = name
        self._map = tuple(ALPHABET.index(c) for c in wiring)

    def reflect(self, sig: int) -> int:
        out = self._map[_check_signal(sig)]
        debug.log("reflector", f"{sig}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
