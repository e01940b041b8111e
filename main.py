# main.py
from __future__ import annotations

import argparse, json, sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from debug import COMPONENTS, debug
from errors import ConfigurationError, EnigmaError
from machine import EnigmaMachine, new_enigma_machine
from utilities import DEFAULT_ROTOR_COUNT, get_machine_settings

DEFAULT_CONFIG = Path("enigma_config.json")

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class Config:
    """Runtime switches for the console front end."""

    block: int = 0                  # group output in blocks of N letters (0 = as typed)


# ────────────────────────────────────────────────────────────────────────
#  1. JSON loading helpers
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: settings must be a JSON object")
    required = {"rotors", "positions", "rings"}
    missing = required - data.keys()
    if missing:
        raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")
    return data


def build_from_cfg(cfg: dict) -> EnigmaMachine:
    plugs = cfg.get("plugs", cfg.get("plugboard", []))
    return new_enigma_machine(cfg["rotors"], cfg["positions"], cfg["rings"], plugs)


# ────────────────────────────────────────────────────────────────────────
#  2. Formatting & argument helpers
# ────────────────────────────────────────────────────────────────────────


def format_blocks(text: str, block: int) -> str:
    """Drop whitespace and regroup in blocks of *block* symbols (0 = untouched)."""
    if block <= 0:
        return text
    packed = "".join(text.split())
    return " ".join(packed[i : i + block] for i in range(0, len(packed), block))


def parse_settings(raw: str) -> List[int | str]:
    """Read 'ADU' as window letters, '0,3,20' or '0 3 20' as numbers."""
    tokens = raw.replace(",", " ").split()
    if len(tokens) == 1 and tokens[0].isalpha():
        return list(tokens[0].upper())
    return [int(t) if t.isdigit() else t.upper() for t in tokens]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with an Enigma I machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of answering prompts.")
    p.add_argument("--rotors", help="Rotors left to right, e.g. 'I II III' or '0,1,2'.")
    p.add_argument("--positions", help="Start positions, e.g. 'ADU' or '0,3,20'. Default: all A.")
    p.add_argument("--rings", help="Ring settings 0-25 or letters, e.g. 'AAA' or '0,0,0'. Default: all A.")
    p.add_argument("--plugs", default="", help="Plugboard pairs, e.g. 'AB CD'.")
    p.add_argument("--interactive", action="store_true", help="Ignore any JSON file and run the interactive prompt chain.")
    p.add_argument("--block", type=int, default=0, help="Group output in blocks of N letters. Default: 0 (as typed)")
    p.add_argument("--debug", action="append", default=[], choices=COMPONENTS, metavar="COMPONENT", help=f"Log one component ({', '.join(COMPONENTS)}); repeatable.")
    p.add_argument("--log-file", metavar="FILE", help="Also write debug log lines to FILE.")
    return p.parse_args(argv)


def parse_rotors(raw: str) -> List[int | str]:
    return [int(t) if t.isdigit() else t.upper() for t in raw.replace(",", " ").split()]


def settings_from_args(args: argparse.Namespace) -> dict:
    rotors = parse_rotors(args.rotors)
    count = len(rotors)
    return {
        "rotors": rotors,
        "positions": parse_settings(args.positions) if args.positions else [0] * count,
        "rings": parse_settings(args.rings) if args.rings else [0] * count,
        "plugs": args.plugs.upper().split(),
    }


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def resolve_settings(args: argparse.Namespace) -> dict:
    """Where do we get the machine settings? Flags, then JSON, then prompts."""
    if args.config:
        return load_config(args.config)
    if args.rotors:
        return settings_from_args(args)
    if not args.interactive and DEFAULT_CONFIG.exists():
        ans = input(f"Found '{DEFAULT_CONFIG}'.  Load it? (Y/n) ").strip().lower()
        if ans in {"", "y", "yes"}:
            return load_config(DEFAULT_CONFIG)
    return get_machine_settings(DEFAULT_ROTOR_COUNT)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)

    if args.log_file:
        debug.set_log_file(args.log_file)
    debug.enable(*args.debug)

    try:
        settings = resolve_settings(args)
        machine = build_from_cfg(settings)
    except (EnigmaError, OSError, json.JSONDecodeError) as e:
        sys.exit(f"Failed to load configuration: {e}")

    cfg = Config(block=args.block)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(format_blocks(machine.process(args.message), cfg.block))
        return

    # interactive REPL ---------------------------------------------------
    print(f"\nLoaded {machine!r}.")
    print("Every line starts again from the initial positions.")
    print("Type blank line to quit.\n")
    while True:
        txt = input("Text > ")
        if not txt.strip():
            break
        machine.reset()
        print(format_blocks(machine.process(txt), cfg.block))


if __name__ == "__main__":
    main()
