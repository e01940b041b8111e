"""Tests for key-sheet generation."""

from random import Random
from pathlib import Path

import pytest

import settings_generator as gen
from main import build_from_cfg, load_config


def test_same_seed_same_sheet() -> None:
    assert gen.make_key_sheet(Random(42)) == gen.make_key_sheet(Random(42))


def test_sheet_is_well_formed() -> None:
    sheet = gen.make_key_sheet(Random(7), n_rot=3, n_pairs=10)
    assert len(set(sheet["rotors"])) == 3
    assert len(sheet["positions"]) == 3
    assert all(0 <= r <= 25 for r in sheet["rings"])
    letters = "".join(sheet["plugs"])
    assert len(sheet["plugs"]) == 10
    assert len(set(letters)) == len(letters) == 20


def test_sheet_builds_a_machine() -> None:
    sheet = gen.make_key_sheet(Random(3), n_rot=4, n_pairs=13)
    machine = build_from_cfg(sheet)
    assert len(machine.rotors) == 4
    assert len(machine.pb.pairs) == 13


@pytest.mark.parametrize(("asked", "expected"), [(0, 0), (5, 5), (13, 13), (40, 13), (-2, 0)])
def test_choose_pairs_caps(asked: int, expected: int) -> None:
    assert len(gen.choose_pairs(asked, Random(1))) == expected


@pytest.mark.parametrize("n_rot", [0, 6])
def test_bad_rotor_count(n_rot: int) -> None:
    with pytest.raises(ValueError):
        gen.make_key_sheet(Random(1), n_rot=n_rot)


def test_build_rng_seeded_is_deterministic() -> None:
    a, b = gen.build_rng(9), gen.build_rng(9)
    assert a.random() == b.random()


def test_main_writes_loadable_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "sheet.json"
    gen.main(["--seed", "11", "--pairs", "6", "--outfile", str(out)])
    assert "Wrote" in capsys.readouterr().out

    cfg = load_config(out)
    enc, dec = build_from_cfg(cfg), build_from_cfg(cfg)
    assert dec.process(enc.process("KEY SHEET TEST")) == "KEY SHEET TEST"
    assert len(cfg["plugs"]) == 6


def test_main_rejects_bad_rotor_count(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        gen.main(["--rotors", "9", "--outfile", str(tmp_path / "x.json")])
