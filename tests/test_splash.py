from typing import Any

import pytest

from vaniaengine.game import WorkingDirectory
from vaniaengine.resources import ResourceAllocator
from vaniaengine.scene import Scene, SceneStateMachine
from vaniaengine.splash import SplashScreen


class FakeWindow:
    def __init__(self) -> None:
        self.draws: list[tuple[Any, tuple[float, float]]] = []

    def draw(self, surface: Any, position: tuple[float, float]) -> None:
        self.draws.append((surface, position))


class OtherScene(Scene):
    def __init__(self) -> None:
        self.activations = 0

    def on_create(self) -> None:
        pass

    def on_destroy(self) -> None:
        pass

    def on_activate(self) -> None:
        self.activations += 1


def _failing_loader(path: str) -> Any:
    raise OSError(path)


@pytest.fixture
def setup():
    machine = SceneStateMachine()
    window = FakeWindow()
    allocator = ResourceAllocator(loader=lambda p: f"tex:{p}")
    splash = SplashScreen(WorkingDirectory(), machine, window, allocator)
    other = OtherScene()
    splash_id = machine.add(splash)
    other_id = machine.add(other)
    splash.set_switch_scene(other_id)
    machine.switch_to(splash_id)
    return machine, window, splash, other


def test_draws_loaded_splash_image(setup):
    machine, window, splash, _ = setup
    machine.draw(window)
    assert window.draws == [("tex:./SplashTest.png", (0.0, 0.0))]


def test_missing_image_draws_nothing():
    machine = SceneStateMachine()
    window = FakeWindow()
    splash = SplashScreen(
        WorkingDirectory(), machine, window, ResourceAllocator(loader=_failing_loader)
    )
    machine.switch_to(machine.add(splash))
    machine.draw(window)
    assert window.draws == []


def test_stays_until_time_is_up(setup):
    machine, _, splash, other = setup
    machine.update(splash.show_for_seconds / 2)
    assert machine.current is splash
    assert other.activations == 0


def test_switches_when_time_is_up(setup):
    machine, _, splash, other = setup
    machine.update(splash.show_for_seconds / 2)
    machine.update(splash.show_for_seconds / 2)
    assert machine.current is other
    assert other.activations == 1


def test_activation_resets_countdown(setup):
    machine, _, splash, _ = setup
    splash.update(1.0)
    splash.on_activate()
    assert splash.current_seconds == 0.0


def test_default_show_time_matches_source(setup):
    _, _, splash, _ = setup
    assert splash.show_for_seconds == 3.0