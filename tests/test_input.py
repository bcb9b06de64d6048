from collections import defaultdict

import pygame
import pytest

from vaniaengine.input import Input, Key


class _Keyboard:
    def __init__(self):
        self.held = set()

    def __call__(self):
        return defaultdict(bool, {code: True for code in self.held})


@pytest.fixture
def keyboard():
    return _Keyboard()


@pytest.fixture
def controls(keyboard):
    return Input(keyboard)


def test_nothing_pressed_initially(controls):
    controls.update()
    assert not any(controls.is_key_pressed(key) for key in Key)


@pytest.mark.parametrize(
    "code, key",
    [
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_a, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_d, Key.RIGHT),
        (pygame.K_UP, Key.UP),
        (pygame.K_w, Key.UP),
        (pygame.K_DOWN, Key.DOWN),
        (pygame.K_s, Key.DOWN),
        (pygame.K_ESCAPE, Key.EXIT),
    ],
)
def test_bindings(keyboard, controls, code, key):
    keyboard.held.add(code)
    controls.update()
    assert controls.is_key_pressed(key)
    assert [k for k in Key if controls.is_key_pressed(k)] == [key]


def test_key_down_only_on_first_frame(keyboard, controls):
    keyboard.held.add(pygame.K_LEFT)
    controls.update()
    assert controls.is_key_down(Key.LEFT)
    controls.update()
    assert controls.is_key_pressed(Key.LEFT)
    assert not controls.is_key_down(Key.LEFT)


def test_key_up_only_on_release_frame(keyboard, controls):
    keyboard.held.add(pygame.K_UP)
    controls.update()
    assert not controls.is_key_up(Key.UP)
    keyboard.held.clear()
    controls.update()
    assert controls.is_key_up(Key.UP)
    assert not controls.is_key_pressed(Key.UP)
    controls.update()
    assert not controls.is_key_up(Key.UP)


def test_keys_are_independent(keyboard, controls):
    keyboard.held.update({pygame.K_LEFT, pygame.K_w})
    controls.update()
    keyboard.held.discard(pygame.K_LEFT)
    controls.update()
    assert controls.is_key_up(Key.LEFT)
    assert controls.is_key_pressed(Key.UP)
    assert not controls.is_key_down(Key.UP)