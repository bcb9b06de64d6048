from vaniaengine.collider import BoxCollider, CollisionLayer
from vaniaengine.component import Component, Drawable
from vaniaengine.gameobject import GameObject
from vaniaengine.geometry import Rect
from vaniaengine.object_collection import ObjectCollection


class Recorder(Component):
    def __init__(self, owner):
        super().__init__(owner)
        self.log = []

    def awake(self):
        self.log.append(("awake", self.owner))

    def start(self):
        self.log.append(("start", self.owner))

    def update(self, delta_time):
        self.log.append(("update", delta_time))

    def late_update(self, delta_time):
        self.log.append(("late", delta_time))


class Marker(Component, Drawable):
    def draw(self, window):
        window.append(self.owner)


def recorded(log):
    obj = GameObject()
    recorder = obj.add_component(Recorder)
    recorder.log = log
    return obj


def make_collider(x, y, layer, static=False):
    obj = GameObject()
    obj.transform.set_position(x, y)
    obj.transform.is_static = static
    collider = obj.add_component(BoxCollider)
    collider.set_collidable(Rect(0, 0, 20, 20))
    collider.layer = layer
    return obj


def test_added_objects_wait_until_processed():
    collection = ObjectCollection()
    obj = GameObject()
    collection.add(obj)
    assert collection.objects == ()
    assert collection.pending == (obj,)
    collection.process_new_objects()
    assert collection.objects == (obj,)
    assert collection.pending == ()


def test_all_objects_awake_before_any_start():
    log = []
    collection = ObjectCollection()
    first, second = recorded(log), recorded(log)
    collection.extend([first, second])
    collection.process_new_objects()
    assert log == [
        ("awake", first),
        ("awake", second),
        ("start", first),
        ("start", second),
    ]


def test_update_and_late_update_reach_live_objects():
    log = []
    collection = ObjectCollection()
    collection.add(recorded(log))
    collection.update(0.5)
    assert log == []
    collection.process_new_objects()
    log.clear()
    collection.update(0.5)
    collection.late_update(0.25)
    assert log == [("update", 0.5), ("late", 0.25)]


def test_draw_uses_drawables():
    collection = ObjectCollection()
    drawn = GameObject()
    drawn.add_component(Marker)
    collection.extend([GameObject(), drawn])
    collection.process_new_objects()
    window = []
    collection.draw(window)
    assert window == [drawn]


def test_process_removals_removes_from_everywhere():
    collection = ObjectCollection()
    keep = GameObject()
    keep.add_component(Marker)
    drop = GameObject()
    drop.add_component(Marker)
    collection.extend([keep, drop])
    collection.process_new_objects()
    drop.queue_for_removal()
    collection.process_removals()
    assert collection.objects == (keep,)
    window = []
    collection.draw(window)
    assert window == [keep]


def test_update_resolves_collisions():
    collection = ObjectCollection()
    player = make_collider(100, 100, CollisionLayer.PLAYER)
    tile = make_collider(115, 100, CollisionLayer.TILE, static=True)
    collection.extend([player, tile])
    collection.process_new_objects()
    collection.update(0.0)
    player_box = player.get_component(BoxCollider).collidable()
    tile_box = tile.get_component(BoxCollider).collidable()
    assert not player_box.intersects(tile_box)
    assert tile.transform.position == (115, 100)