# machine.py  ──────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import debug
from errors import ConfigurationError, RotorCountError
from keyboard_and_plugboard import Keyboard, Plugboard, PlugPair
from rotor_and_reflector import Reflector, Rotor, setting_index
from utilities import reflector_b, rotor_definition


class EnigmaMachine:
    """Rotors (left to right), one reflector and a plugboard.

    The rotor positions are the only state that changes; they advance exactly
    once per letter processed. A machine is not safe to share between threads.
    """

    def __init__(
        self,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        plugboard: Plugboard | None = None,
    ) -> None:
        if not rotors:
            raise ConfigurationError("At least one rotor is required")

        self.kb         = Keyboard()
        self.pb         = plugboard if plugboard is not None else Plugboard()
        self.rotors     = list(rotors)
        self.reflector  = reflector

        self._start = tuple(r.position for r in self.rotors)

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        """Letters visible in the windows, left to right."""
        return "".join(r.window for r in self.rotors)

    def reset(self) -> None:
        """Turn every rotor back to the position the machine was built with."""
        for rotor, pos in zip(self.rotors, self._start):
            rotor.set_position(pos)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors for one key-press.

        Every notch is read before any rotor moves. The rightmost rotor always
        steps; a rotor steps when its right-hand neighbour sat at its notch;
        an interior rotor sitting at its own notch steps as well (the
        double-step). No rotor moves more than once per key-press.
        """
        notched = [r.is_at_notch() for r in self.rotors]
        last = len(self.rotors) - 1

        moves = [False] * len(self.rotors)
        moves[last] = True
        for i in range(last):
            if notched[i + 1]:
                moves[i] = True
            if 0 < i and notched[i]:
                moves[i] = True

        for rotor, move in zip(self.rotors, moves):
            if move:
                rotor.step()

    # ── encipher one symbol  ────────────────────────────────────

    def _signal_path(self, signal: int) -> int:
        signal = self.pb.swap(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        # second plugboard pass on the way out to the lamps
        return self.pb.swap(signal)

    def encipher_letter(self, letter: str) -> str:
        """Step the rotors and send one letter A–Z through the machine."""
        signal = self.kb.forward(letter)
        self._step_rotors()
        debug.log("stepping", f"Rotor pos {self.window}")

        out_ch = self.kb.backward(self._signal_path(signal))
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def process(self, text: str) -> str:
        """Encipher (or decipher) *text*; anything that is not A–Z passes through."""
        out: list[str] = []
        for ch in text:
            # only ASCII folds onto the keyboard ("ß", "ı" stay as they are)
            up = ch.upper() if ch.isascii() else ch
            if up in self.kb:
                out.append(self.encipher_letter(up))
            else:
                out.append(ch)
        return "".join(out)

    def __repr__(self) -> str:
        names = "-".join(r.definition.name for r in self.rotors)
        return f"<EnigmaMachine {names} window={self.window} {self.pb!r}>"


def _settings(setting: str, values: Sequence[int | str] | str) -> list[int]:
    # "ADU" reads as three window letters
    if isinstance(values, str):
        values = list(values)
    return [setting_index(setting, v) for v in values]


def new_enigma_machine(
    rotor_selection: Sequence[int | str],
    initial_positions: Sequence[int | str] | str,
    ring_settings: Sequence[int | str] | str,
    plugboard_pairs: Sequence[PlugPair] = (),
) -> EnigmaMachine:
    """Build a fully configured machine or raise ConfigurationError.

    Rotors are given left to right as catalogue indices (0-4) or names
    ("I"-"V"); positions and rings as 0-25 or letters A-Z.
    """
    selection = list(rotor_selection)
    positions = _settings("position", initial_positions)
    rings = _settings("ring setting", ring_settings)

    if not selection:
        raise ConfigurationError("At least one rotor is required")
    if not len(selection) == len(positions) == len(rings):
        raise RotorCountError(len(selection), len(positions), len(rings))

    definitions = [rotor_definition(ident) for ident in selection]
    plugboard = Plugboard(plugboard_pairs)

    rotors = [
        Rotor(defn, ring_setting=ring, position=pos)
        for defn, pos, ring in zip(definitions, positions, rings)
    ]
    return EnigmaMachine(rotors, reflector_b(), plugboard)
