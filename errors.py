"""Exceptions for the Enigma engine: every way a machine can be misconfigured."""

from __future__ import annotations

from typing import Any


class EnigmaError(Exception):
    """Base exception for the Enigma engine."""

    pass


class ConfigurationError(EnigmaError, ValueError):
    """Raised when machine settings are rejected at construction time."""


class RotorCountError(ConfigurationError):
    """Raised when rotor selection, positions and ring settings disagree in length."""

    def __init__(self, rotors: int, positions: int, rings: int) -> None:
        self.rotors = rotors
        self.positions = positions
        self.rings = rings
        super().__init__(
            f"Rotor count mismatch: {rotors} rotors, "
            f"{positions} positions, {rings} ring settings"
        )


class UnknownRotorError(ConfigurationError):
    """Raised when a rotor identifier is not in the wheel catalogue."""

    def __init__(self, identifier: Any, message: str | None = None) -> None:
        self.identifier = identifier
        super().__init__(message or f"Unknown rotor: {identifier!r}")


class SettingRangeError(ConfigurationError):
    """Raised when a rotor position or ring setting falls outside 0-25."""

    def __init__(self, setting: str, value: Any) -> None:
        self.setting = setting
        self.value = value
        super().__init__(f"{setting} {value!r} out of range 0–25 (or A–Z)")


class PlugboardError(ConfigurationError):
    """Raised when plugboard pairs are malformed or overlap."""

    def __init__(self, pair: Any, message: str | None = None) -> None:
        self.pair = pair
        super().__init__(message or f"Invalid plugboard pair: {pair!r}")
