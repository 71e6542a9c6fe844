"""Tests for ppcalc.constants.mods."""

import pytest

from ppcalc.constants.mods import Mods


def test_from_modstr():
    assert Mods.from_modstr("HDDTRX") == Mods.HIDDEN | Mods.DOUBLETIME | Mods.RELAX


def test_from_modstr_is_case_insensitive():
    assert Mods.from_modstr("hdfl") == Mods.HIDDEN | Mods.FLASHLIGHT


def test_empty_modstr_is_nomod():
    assert Mods.from_modstr("") == Mods.NOMOD


def test_nightcore_implies_doubletime():
    mods = Mods.from_modstr("NC")
    assert mods & Mods.DOUBLETIME
    assert mods & Mods.NIGHTCORE


def test_perfect_implies_suddendeath():
    assert Mods.from_modstr("PF") & Mods.SUDDENDEATH


@pytest.mark.parametrize("modstr", ["XX", "HDD", "HDZZ"])
def test_invalid_modstr(modstr):
    with pytest.raises(ValueError):
        Mods.from_modstr(modstr)


def test_lazer_only_acronyms():
    assert Mods.from_acronym("CL") == Mods.CLASSIC
    assert Mods.from_acronym("lz") == Mods.LAZER


def test_repr():
    assert repr(Mods.NOMOD) == "NM"
    assert repr(Mods.HIDDEN | Mods.DOUBLETIME) == "HDDT"
    assert repr(Mods.from_modstr("SOFL")) == "FLSO"
