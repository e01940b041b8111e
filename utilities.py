# utilities.py
from __future__ import annotations

import re
from typing import Dict, List, Set, Tuple

from errors import UnknownRotorError
from rotor_and_reflector import ALPHABET, Reflector, RotorDefinition

# ────────────────────────────────────────────────────────────────────────
#  0. Regex & trivial helpers
# ────────────────────────────────────────────────────────────────────────

_roman_re = re.compile(r"^[IVX]+$")
DEFAULT_ROTOR_COUNT = 3
MAX_PAIRS = len(ALPHABET) // 2


def ask(prompt: str) -> str:
    """Read & normalise an operator’s response (uppercase, trimmed)."""
    return input(prompt).strip().upper()


# ────────────────────────────────────────────────────────────────────────
#  1. Wheel database
# ────────────────────────────────────────────────────────────────────────

# Wehrmacht / Luftwaffe rotors, identifier = position in this tuple ------
ROTOR_DEFINITIONS: Tuple[RotorDefinition, ...] = (
    RotorDefinition("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", notch="Q"),
    RotorDefinition("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", notch="E"),
    RotorDefinition("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", notch="V"),
    RotorDefinition("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", notch="J"),
    RotorDefinition("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", notch="Z"),
)

# UKW-B, the only reflector fitted -------------------------------------
REFLECTOR_B_WIRING = "YRUHQSLDPXNGOKMIEBFZCWVJAT"

rotor_dict: Dict[str, RotorDefinition] = {}
for _defn in ROTOR_DEFINITIONS:
    rotor_dict[_defn.name] = rotor_dict[_defn.name.lower()] = _defn  # uppercase + alias


def rotor_definition(identifier: int | str) -> RotorDefinition:
    """Look a wheel up by catalogue index (0-4, int or digit string) or roman name."""
    if isinstance(identifier, bool):
        raise UnknownRotorError(identifier)
    if isinstance(identifier, int):
        if 0 <= identifier < len(ROTOR_DEFINITIONS):
            return ROTOR_DEFINITIONS[identifier]
        raise UnknownRotorError(identifier)
    if isinstance(identifier, str):
        key = identifier.strip()
        if key.isdigit():
            return rotor_definition(int(key))
        defn = rotor_dict.get(key) or rotor_dict.get(key.upper())
        if defn is None:
            raise UnknownRotorError(identifier)
        return defn
    raise UnknownRotorError(identifier)


def reflector_b() -> Reflector:
    return Reflector(REFLECTOR_B_WIRING, name="B")


# ────────────────────────────────────────────────────────────────────────
#  2. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def get_rotor_selection(count: int = DEFAULT_ROTOR_COUNT) -> List[str]:
    names = [d.name for d in ROTOR_DEFINITIONS]
    print("\nAvailable Rotors:", " ".join(names))
    while True:
        sel = ask(f"Select {count} rotors, left to right: ").split()
        if len(sel) == count and all(_roman_re.match(r) and r in rotor_dict for r in sel):
            return sel
        print(f"❌  Need exactly {count} valid rotor names.")


# ––– plugboard helpers –––––––––––––––––––––––––––––––––––––––––––

def _validate_pair(pair: str, used: Set[str]) -> Tuple[bool, str | None]:
    if len(pair) != 2:
        return False, f"❌ Pair '{pair}' must be exactly 2 characters."
    a, b = pair
    if a == b:
        return False, f"❌ Pair '{pair}' cannot map to itself."
    if {a, b} - set(ALPHABET):
        invalid = ({a, b} - set(ALPHABET)).pop()
        return False, f"❌ Invalid char '{invalid}' in pair '{pair}'."
    if {a, b} & used:
        dup = ({a, b} & used).pop()
        return False, f"❌ Char '{dup}' already used."
    return True, None


def get_plugboard() -> List[str]:
    """Return a list of *validated* plugboard pairs (e.g. ["AB", "CD"])."""
    print(f"\nPlugboard pairs (≤{MAX_PAIRS}, e.g. AB CD EF):")
    while True:
        used: Set[str] = set()
        raw = ask("Pairs (Enter for none): ")
        if not raw:
            return []

        pairs = raw.split()
        if len(pairs) > MAX_PAIRS:
            print(f"❌  Too many pairs (max {MAX_PAIRS}).")
            continue

        # validate
        for p in pairs:
            ok, err = _validate_pair(p, used)
            if not ok:
                print(err)
                break
            used.update(p)
        else:  # only executes if no break occurred
            return pairs


# ––– rings & window letters –––––––––––––––––––––––––––––––––––––

def get_ring_settings(count: int) -> List[int]:
    """Ring settings are typed 1-26 as on the wheel tyre; returned 0-based."""
    while True:
        raw = ask(f"{count} ring settings 1-26: ").split()
        if len(raw) == count and all(item.isdigit() and 1 <= int(item) <= 26 for item in raw):
            return [int(item) - 1 for item in raw]
        print(f"❌  Need exactly {count} numbers in 1–26.")


def get_start_positions(count: int) -> str:
    while True:
        key = ask(f"Start positions ({count} letters): ")
        if len(key) == count and set(key) <= set(ALPHABET):
            return key
        print(f"❌ Must be exactly {count} letters A–Z.")


# ––– orchestration –––––––––––––––––––––––––––––––––––––––––––––––

def get_machine_settings(count: int = DEFAULT_ROTOR_COUNT) -> dict:
    """Collect *interactive* settings from the operator, shaped like a JSON config."""
    rotors = get_rotor_selection(count)
    plugs = get_plugboard()
    rings = get_ring_settings(count)
    positions = get_start_positions(count)
    return {
        "rotors": rotors,
        "positions": list(positions),
        "rings": rings,
        "plugs": plugs,
    }


__all__ = [
    "ROTOR_DEFINITIONS",
    "REFLECTOR_B_WIRING",
    "rotor_dict",
    "rotor_definition",
    "reflector_b",
    "get_machine_settings",
]
