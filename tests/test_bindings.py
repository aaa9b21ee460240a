import pytest

from raygui.bindings import (
    INVALID_KEYMOD,
    HoudiniKeyboardBindings,
    KeyboardBindings,
    MayaKeyboardBindings,
)
from raygui.gui_types import Action, Key, Mod, MouseButton


@pytest.fixture
def bindings():
    return KeyboardBindings()


@pytest.mark.parametrize(
    "pair, action",
    [
        ((Key.W, 0), Action.CAM_FORWARD),
        ((Key.DIGIT_1, 0), Action.CHANNEL_TOGGLE_RED),
        ((Key.S, Mod.CONTROL), Action.SAVE_IMAGE),
        ((Key.S, Mod.ALT), Action.WINDOW_TOGGLE_STATUS),
        ((MouseButton.LEFT, Mod.ALT), Action.CAM_ROTATE),
        ((MouseButton.LEFT, Key.X), Action.EXPOSURE_ADJUST),
    ],
)
def test_default_bindings(bindings, pair, action):
    assert bindings.action(pair) == action
    assert bindings.key_mod_pair(action) == pair


def test_unbound(bindings):
    assert bindings.key_mod_pair(Action.IMAGE2D_ZOOM) == INVALID_KEYMOD
    assert bindings.action((Key.Z, 0)) == Action.NONE


def test_scroll_action(bindings):
    assert bindings.scroll_action() == Action.IMAGE2D_ZOOM


def test_special_modifier_input(bindings):
    lmb = (MouseButton.LEFT, 0)
    assert bindings.action_from_input(lmb) == Action.PICK_PATH_VISUALIZER_PIXEL
    assert bindings.action_from_input(lmb, {Key.X}) == Action.EXPOSURE_ADJUST
    assert bindings.action_from_input(lmb, {Key.Y}) == Action.GAMMA_ADJUST


def test_standard_modifier(bindings):
    assert bindings.is_standard_modifier(Mod.SHIFT)
    assert bindings.is_standard_modifier(Mod.ALT | Mod.CONTROL)
    assert not bindings.is_standard_modifier(Key.X)
    assert not bindings.is_standard_modifier(Mod.CAPS_LOCK)


def test_no_custom_bindings_initially(bindings):
    assert bindings.custom_bindings() == {}


def test_add_custom_binding(bindings):
    bindings.add_custom_binding((Key.J, 0), Action.CAM_FORWARD)
    assert bindings.action((Key.J, 0)) == Action.CAM_FORWARD
    assert bindings.action((Key.W, 0)) == Action.NONE
    assert bindings.custom_bindings() == {(Key.J, 0): Action.CAM_FORWARD}
    assert not bindings.is_default_binding(Action.CAM_FORWARD, (Key.J, 0))
    assert bindings.is_default_binding(Action.CAM_FORWARD, (Key.W, 0))


def test_custom_binding_evicts_previous_action(bindings):
    bindings.add_custom_binding((Key.A, 0), Action.CAM_FORWARD)
    assert bindings.action((Key.A, 0)) == Action.CAM_FORWARD
    assert bindings.key_mod_pair(Action.CAM_LEFT) == INVALID_KEYMOD


def test_reset_binding_to_default(bindings):
    bindings.add_custom_binding((Key.J, 0), Action.CAM_FORWARD)
    bindings.reset_binding_to_default(Action.CAM_FORWARD)
    assert bindings.key_mod_pair(Action.CAM_FORWARD) == (Key.W, 0)
    assert bindings.action((Key.J, 0)) == Action.NONE
    assert bindings.custom_bindings() == {}


def test_reset_without_default_keeps_binding(bindings):
    bindings.add_custom_binding((Key.Z, 0), Action.IMAGE2D_ZOOM)
    bindings.reset_binding_to_default(Action.IMAGE2D_ZOOM)
    assert bindings.action((Key.Z, 0)) == Action.IMAGE2D_ZOOM


def test_custom_special_modifier(bindings):
    bindings.add_custom_binding((MouseButton.RIGHT, Key.Z), Action.IMAGE2D_ZOOM)
    got = bindings.action_from_input((MouseButton.RIGHT, 0), {Key.Z})
    assert got == Action.IMAGE2D_ZOOM


def test_maya_bindings():
    maya = MayaKeyboardBindings()
    assert maya.key_mod_pair(Action.CAM_RESET) == (Key.HOME, Mod.ALT)
    assert maya.action((Key.R, 0)) == Action.NONE
    assert maya.action_from_input((MouseButton.RIGHT, 0), {Key.BACKSLASH}) == Action.IMAGE2D_ZOOM
    assert maya.custom_bindings() == {}
    assert maya.is_default_binding(Action.CAM_RESET, (Key.HOME, Mod.ALT))


def test_houdini_bindings():
    houdini = HoudiniKeyboardBindings()
    assert houdini.action_from_input((MouseButton.LEFT, 0), {Key.SPACE}) == Action.CAM_ROTATE
    assert houdini.action((MouseButton.LEFT, Mod.ALT)) == Action.NONE
    assert houdini.key_mod_pair(Action.CAM_RECENTER) == (Key.Z, Key.SPACE)
    assert houdini.custom_bindings() == {}


def test_format_key_bindings(bindings):
    text = bindings.format_key_bindings()
    assert text.startswith("\nKey Bindings:\n-------------\n")
    assert "Camera Forward: W\n" in text
    assert "Save Image: CTRL+S\n" in text
    assert "Exposure Adjust: X+LMB\n" in text
    assert text.endswith(" ----------------------------\n")
    assert text.index("Camera Forward") < text.index("Save Image")


def test_format_custom_bindings(bindings):
    bindings.add_custom_binding((Key.J, Mod.SHIFT), Action.CAM_FORWARD)
    text = bindings.format_custom_bindings()
    assert text == "Custom Bindings:\n----------------\nCamera Forward: SHIFT+J\n"


def test_print_key_bindings(bindings, capsys):
    bindings.print_key_bindings()
    assert capsys.readouterr().out == bindings.format_key_bindings()


def test_print_custom_bindings(bindings, capsys):
    bindings.print_custom_bindings()
    assert capsys.readouterr().out == "Custom Bindings:\n----------------\n"