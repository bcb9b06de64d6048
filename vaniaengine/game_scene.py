"""The playable level: a player character and a tile map."""

from __future__ import annotations

from typing import Any

from .animation import Animation, FacingDirection
from .animator import AnimationState, Animator
from .collider import BoxCollider, CollisionLayer
from .gameobject import GameObject
from .geometry import Rect
from .input import Input
from .movement import KeyboardMovement
from .object_collection import ObjectCollection
from .resources import ResourceAllocator
from .scene import Scene
from .sprite import Sprite
from .tilemap import TileMapParser

PLAYER_TEXTURE = "viking.png"
MAP_FILE = "testMap.tmx"
MAP_OFFSET = (-400, 128)
FRAME_WIDTH = 165
FRAME_HEIGHT = 145
IDLE_FRAME_SECONDS = 0.2
WALK_FRAME_SECONDS = 0.15
IDLE_FRAMES = ((600, 0), (800, 0), (0, 145), (200, 145))
WALK_FRAMES = ((600, 290), (800, 290), (0, 435), (200, 435), (400, 435))


class GameScene(Scene):
    """The level scene: builds the player and the map, then runs them."""

    def __init__(
        self,
        working_dir: Any,
        texture_allocator: ResourceAllocator[Any],
        input: Input | None = None,
    ) -> None:
        self.working_dir = working_dir
        self.texture_allocator = texture_allocator
        self.input = input if input is not None else Input()
        self.objects = ObjectCollection()
        self.map_parser = TileMapParser(texture_allocator)
        self.player: GameObject | None = None

    def _load_texture(self, name: str) -> int:
        try:
            return self.texture_allocator.add(self.working_dir.path + name)
        except OSError:
            return -1

    def _animation(
        self, texture_id: int, frames: tuple[tuple[int, int], ...], seconds: float
    ) -> Animation:
        animation = Animation(FacingDirection.RIGHT)
        for x, y in frames:
            animation.add_frame(texture_id, x, y, FRAME_WIDTH, FRAME_HEIGHT, seconds)
        return animation

    def on_create(self) -> None:
        player = GameObject()

        sprite = player.add_component(Sprite)
        sprite.allocator = self.texture_allocator

        movement = player.add_component(KeyboardMovement)
        movement.input = self.input

        animator = player.add_component(Animator)
        texture_id = self._load_texture(PLAYER_TEXTURE)
        animator.add_animation(
            AnimationState.IDLE,
            self._animation(texture_id, IDLE_FRAMES, IDLE_FRAME_SECONDS),
        )
        animator.add_animation(
            AnimationState.WALK,
            self._animation(texture_id, WALK_FRAMES, WALK_FRAME_SECONDS),
        )

        collider = player.add_component(BoxCollider)
        collider.set_collidable(Rect(0, 0, FRAME_WIDTH, FRAME_HEIGHT))
        collider.layer = CollisionLayer.PLAYER

        self.player = player
        self.objects.add(player)

        tiles = self.map_parser.parse(self.working_dir.path + MAP_FILE, MAP_OFFSET)
        self.objects.extend(tiles)

    def on_destroy(self) -> None:
        """Nothing to release."""

    def process_input(self) -> None:
        self.input.update()

    def update(self, delta_time: float) -> None:
        self.objects.process_removals()
        self.objects.process_new_objects()
        self.objects.update(delta_time)

    def late_update(self, delta_time: float) -> None:
        self.objects.late_update(delta_time)

    def draw(self, window: Any) -> None:
        self.objects.draw(window)