"""Tests for ppcalc.objects.modifiers."""

from ppcalc.constants.mods import Mods
from ppcalc.objects.modifiers import ClassicSettings
from ppcalc.objects.modifiers import ModSet
from ppcalc.usecases.performance import uses_classic_slider_accuracy


def test_is_active():
    mods = ModSet(Mods.HIDDEN | Mods.RELAX)
    assert mods.is_active(Mods.HIDDEN)
    assert mods.is_active(Mods.RELAX)
    assert not mods.is_active(Mods.FLASHLIGHT)


def test_missing_config_is_none():
    assert ModSet(Mods.CLASSIC).get_config(ClassicSettings) is None


def test_from_modstr_is_stable():
    mods = ModSet.from_modstr("HDHR")
    assert mods.is_active(Mods.HARDROCK)
    assert not mods.is_active(Mods.LAZER)


def test_from_acronyms_parses_settings():
    mods = ModSet.from_acronyms(
        ["HD", {"acronym": "CL", "settings": {"no_slider_head_accuracy": False}}],
    )
    assert mods.is_active(Mods.LAZER)
    assert mods.is_active(Mods.HIDDEN)
    assert mods.is_active(Mods.CLASSIC)
    assert mods.get_config(ClassicSettings) == ClassicSettings(
        no_slider_head_accuracy=False,
    )


def test_mod_sets_are_hashable():
    mods = ModSet.from_acronyms(["HD", {"acronym": "CL"}])
    assert hash(mods) == hash(ModSet.from_acronyms(["HD", {"acronym": "CL"}]))
    assert len({mods, ModSet.from_acronyms(["HD", "CL"])}) == 1


def test_classic_settings_default():
    mods = ModSet.from_acronyms([{"acronym": "CL"}])
    assert mods.get_config(ClassicSettings).no_slider_head_accuracy is True


def test_from_acronyms_without_lazer():
    mods = ModSet.from_acronyms(["DT"], lazer=False)
    assert not mods.is_active(Mods.LAZER)
    assert mods.is_active(Mods.DOUBLETIME)


def test_stable_scores_use_classic_slider_accuracy():
    assert uses_classic_slider_accuracy(ModSet())
    assert uses_classic_slider_accuracy(ModSet.from_modstr("CL"))


def test_lazer_scores_use_slider_head_accuracy():
    assert not uses_classic_slider_accuracy(ModSet.from_acronyms([]))


def test_lazer_classic_follows_settings():
    assert uses_classic_slider_accuracy(ModSet.from_acronyms(["CL"]))
    assert not uses_classic_slider_accuracy(
        ModSet.from_acronyms(
            [{"acronym": "CL", "settings": {"no_slider_head_accuracy": False}}],
        ),
    )


def test_lazer_classic_without_settings():
    assert not uses_classic_slider_accuracy(ModSet(Mods.LAZER | Mods.CLASSIC))
