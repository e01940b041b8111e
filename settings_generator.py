# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List, Sequence

from rotor_and_reflector import ALPHABET
from utilities import DEFAULT_ROTOR_COUNT, MAX_PAIRS, ROTOR_DEFINITIONS

DEFAULT_PAIRS = 10

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, MAX_PAIRS))
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def make_key_sheet(
    rng: Random | SystemRandom,
    n_rot: int = DEFAULT_ROTOR_COUNT,
    n_pairs: int = DEFAULT_PAIRS,
) -> Dict:
    """One day's settings, shaped the way main.load_config expects them."""
    names = [d.name for d in ROTOR_DEFINITIONS]
    if not 1 <= n_rot <= len(names):
        raise ValueError(f"Rotor count must be 1–{len(names)}, got {n_rot}")

    return {
        "rotors": rng.sample(names, n_rot),
        "positions": rng.choices(ALPHABET, k=n_rot),
        "rings": [rng.randrange(len(ALPHABET)) for _ in range(n_rot)],
        "plugs": choose_pairs(n_pairs, rng),
    }


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma key sheet")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--rotors", type=int, default=DEFAULT_ROTOR_COUNT, help="Rotors in the machine (default 3)")
    p.add_argument("--pairs", type=int, default=DEFAULT_PAIRS, help=f"Plugboard pairs 0–{MAX_PAIRS} (default {DEFAULT_PAIRS})")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    rng = build_rng(args.seed)

    try:
        cfg = make_key_sheet(rng, args.rotors, args.pairs)
    except ValueError as e:
        raise SystemExit(f"❌  {e}")

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {' '.join(cfg['rotors'])}\n"
        f"   positions   : {''.join(cfg['positions'])}\n"
        f"   rings       : {cfg['rings']}\n"
        f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
