"""Loading tile maps in the TMX format into game objects."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any

from .collider import BoxCollider, CollisionLayer
from .gameobject import GameObject
from .geometry import Rect
from .resources import ResourceAllocator
from .sprite import Sprite

TILE_SCALE = 3
COLLISION_LAYER_NAME = "Collisions"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def is_integer(text: str) -> bool:
    """Return True if the whole text is an optionally signed decimal integer."""
    return _INTEGER.fullmatch(text) is not None


def _atoi(text: str) -> int:
    """Parse a leading integer, giving 0 when there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _stoi(text: str) -> int:
    """Parse a leading integer, raising ValueError when there is none."""
    match = _LEADING_INTEGER.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _c_divmod(a: int, b: int) -> tuple[int, int]:
    """Division and remainder that truncate towards zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _attr_int(node: ET.Element, name: str) -> int:
    value = node.get(name)
    if value is None:
        raise ValueError(f"<{node.tag}> has no {name!r} attribute")
    return _atoi(value)


def _child(node: ET.Element, tag: str) -> ET.Element:
    found = node.find(tag)
    if found is None:
        raise ValueError(f"<{node.tag}> has no <{tag}> element")
    return found


@dataclass
class TileInfo:
    """Data shared by every tile with the same id."""

    texture_id: int = -1
    tile_id: int = -1
    texture_rect: tuple[int, int, int, int] = (0, 0, 0, 0)


@dataclass
class Tile:
    """One placed tile: its shared properties and its grid position."""

    properties: TileInfo
    x: int
    y: int


@dataclass
class TileSheetData:
    """A tile set image and how it is divided into tiles."""

    texture_id: int
    image_size: tuple[int, int]
    columns: int
    rows: int
    tile_size: tuple[int, int]


@dataclass
class Layer:
    tiles: list[Tile] = field(default_factory=list)
    is_visible: bool = True


class TileMapParser:
    """Reads TMX maps and turns their tiles into game objects."""

    def __init__(self, texture_allocator: ResourceAllocator[Any]) -> None:
        self.texture_allocator = texture_allocator

    def parse(self, path: str, offset: tuple[float, float]) -> list[GameObject]:
        """Load the map at ``path``; tiles are placed relative to ``offset``."""
        root = ET.parse(path).getroot()
        if root.tag != "map":
            raise ValueError(f"{path!r} is not a tile map")

        layers = self._build_layers(root)
        tile_width = _attr_int(root, "tilewidth")
        tile_height = _attr_int(root, "tileheight")

        objects: list[GameObject] = []
        sort_order = len(layers) - 1
        for name in sorted(layers):
            layer = layers[name]
            for tile in layer.tiles:
                objects.append(
                    self._build_tile_object(
                        tile, name, layer.is_visible, sort_order,
                        (tile_width, tile_height), offset,
                    )
                )
            sort_order -= 1
        return objects

    def _build_tile_object(
        self,
        tile: Tile,
        layer_name: str,
        visible: bool,
        sort_order: int,
        tile_size: tuple[int, int],
        offset: tuple[float, float],
    ) -> GameObject:
        obj = GameObject()
        width = tile_size[0] * TILE_SCALE
        height = tile_size[1] * TILE_SCALE

        if visible:
            sprite = obj.add_component(Sprite)
            sprite.allocator = self.texture_allocator
            sprite.load_id(tile.properties.texture_id)
            sprite.set_texture_rect(*tile.properties.texture_rect)
            sprite.set_scale(TILE_SCALE, TILE_SCALE)
            sprite.sort_order = sort_order

        x = float(tile.x * width + offset[0])
        y = float(tile.y * height + offset[1])
        obj.transform.set_position(x, y)

        if layer_name == COLLISION_LAYER_NAME:
            collider = obj.add_component(BoxCollider)
            collider.set_collidable(
                Rect(x - width * 0.5, y - height * 0.5, width, height)
            )
            collider.layer = CollisionLayer.TILE
        return obj

    def _build_layers(self, root: ET.Element) -> dict[str, Layer]:
        sheets = self._build_tile_sheets(root)
        layers: dict[str, Layer] = {}
        # Later layers in the file win when names repeat.
        for node in reversed(root.findall("layer")):
            name, layer = self._build_layer(node, sheets)
            layers.setdefault(name, layer)
        return layers

    def _build_tile_sheets(self, root: ET.Element) -> dict[int, TileSheetData]:
        sheets: dict[int, TileSheetData] = {}
        for node in root.findall("tileset"):
            first_gid = _attr_int(node, "firstgid")
            tile_size = (_attr_int(node, "tilewidth"), _attr_int(node, "tileheight"))
            tile_count = _attr_int(node, "tilecount")
            columns = _attr_int(node, "columns")
            if columns == 0:
                raise ValueError("tile set has no columns")
            rows = _c_divmod(tile_count, columns)[0]

            image = _child(node, "image")
            source = image.get("source")
            if source is None:
                raise ValueError("<image> has no 'source' attribute")
            texture_id = self._load_texture(source)
            image_size = (_attr_int(image, "width"), _attr_int(image, "height"))

            sheets.setdefault(
                first_gid,
                TileSheetData(texture_id, image_size, columns, rows, tile_size),
            )
        return dict(sorted(sheets.items(), reverse=True))

    def _load_texture(self, source: str) -> int:
        try:
            return self.texture_allocator.add(source)
        except OSError:
            return -1

    def _build_layer(
        self, node: ET.Element, sheets: dict[int, TileSheetData]
    ) -> tuple[str, Layer]:
        width = _attr_int(node, "width")
        text = _child(node, "data").text or ""

        tile_set: dict[int, TileInfo] = {}
        layer = Layer()
        count = 0
        for item in text.split(","):
            if not is_integer(item):
                item = item.replace("\r", "").replace("\n", "")
            tile_id = _stoi(item)

            if tile_id != 0:
                info = tile_set.get(tile_id)
                if info is None:
                    sheet = next(
                        (s for gid, s in sheets.items() if tile_id >= gid), None
                    )
                    if sheet is None:
                        # Unknown tiles do not take up a grid cell.
                        continue
                    row, column = _c_divmod(tile_id, sheet.columns)
                    tile_w, tile_h = sheet.tile_size
                    info = TileInfo(
                        sheet.texture_id,
                        tile_id,
                        ((column - 1) * tile_w, row * tile_h, tile_w, tile_h),
                    )
                    tile_set[tile_id] = info

                row, column = _c_divmod(count, width)
                layer.tiles.append(Tile(info, column - 1, row))
            count += 1

        name = node.get("name")
        if name is None:
            raise ValueError("<layer> has no 'name' attribute")
        visible = node.get("visible")
        layer.is_visible = bool(_stoi(visible)) if visible is not None else True
        return name, layer