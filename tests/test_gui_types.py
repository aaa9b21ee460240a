import pytest

from raygui.gui_types import (
    Action,
    Key,
    Mod,
    MouseButton,
    action_name,
    key_name,
    modifier_name,
)


def test_action_names_pinned():
    assert action_name(Action.CAM_FORWARD) == "Camera Forward"
    assert action_name(Action.DENOISE_TOGGLE_ON_OFF) == "Denoise Toggle On/Off"
    assert action_name(Action.PRINT_KEY_BINDINGS) == "Print Key Bindings"


def test_action_none_and_unknown_have_empty_name():
    assert action_name(Action.NONE) == ""
    assert action_name(len(Action)) == ""
    assert action_name(-5) == ""


def test_every_real_action_has_unique_name():
    names = [action_name(a) for a in Action if a is not Action.NONE]
    assert all(names)
    assert len(set(names)) == len(names)


def test_action_values_are_contiguous():
    for value in range(1, len(Action)):
        name = action_name(value)
        assert name
        assert name == action_name(Action(value))


def test_first_action_after_none():
    assert int(Action.CAM_TOGGLE_ACTIVE_TYPE) == 1
    assert action_name(1) == "Camera Toggle Active Type"


@pytest.mark.parametrize(
    "key, expected",
    [
        (Key.SPACE, "SPACE"),
        (Key.BACKSLASH, "\\"),
        (Key.LEFT_CONTROL, "LEFT_CTRL"),
        (Key.F12, "F12"),
        (Key.ESCAPE, "ESC"),
        (MouseButton.LEFT, "LMB"),
        (MouseButton.RIGHT, "RMB"),
        (MouseButton.MIDDLE, "MMB"),
    ],
)
def test_special_key_names(key, expected):
    assert key_name(key) == expected


def test_letters_and_digits_are_their_character():
    for key in Key:
        if Key.A <= key <= Key.Z or Key.DIGIT_0 <= key <= Key.DIGIT_9:
            assert key_name(key) == chr(key)
            assert key_name(key) == key_name(key).upper()


def test_every_key_is_named():
    names = [key_name(k) for k in Key]
    assert "UNKNOWN" not in names
    assert "" not in names
    assert len(set(names)) == len(names)


def test_unknown_key():
    assert key_name(9999) == "UNKNOWN"


def test_modifier_name_none():
    assert modifier_name(0) == ""


@pytest.mark.parametrize(
    "mod, expected",
    [
        (Mod.SHIFT, "SHIFT+"),
        (Mod.CONTROL, "CTRL+"),
        (Mod.ALT, "ALT+"),
        (Mod.SUPER, ""),
    ],
)
def test_standard_modifier_names(mod, expected):
    assert modifier_name(mod) == expected


def test_control_takes_precedence():
    assert modifier_name(Mod.CONTROL | Mod.SHIFT) == "CTRL+"


def test_keys_acting_as_modifiers():
    assert modifier_name(Key.X) == "X+"
    assert modifier_name(Key.SPACE) == "SPACE+"
    assert modifier_name(Key.BACKSLASH) == "\\+"