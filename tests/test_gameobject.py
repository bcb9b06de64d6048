from vaniaengine.component import Component, InstanceId, Transform
from vaniaengine.gameobject import GameObject
from vaniaengine.sprite import Sprite


class Recorder(Component):
    log = []

    def awake(self):
        self.log.append(("awake", type(self).__name__))

    def start(self):
        self.log.append(("start", type(self).__name__))

    def update(self, delta_time):
        self.log.append(("update", type(self).__name__))

    def late_update(self, delta_time):
        self.log.append(("late", type(self).__name__))


class First(Recorder):
    pass


class Second(Recorder):
    pass


class RecordingWindow:
    def __init__(self):
        self.calls = []

    def draw(self, surface, position):
        self.calls.append(position)


def test_new_object_has_transform_and_id():
    obj = GameObject()
    assert obj.get_component(Transform) is obj.transform
    assert obj.get_component(InstanceId) is obj.instance_id
    assert obj.transform.owner is obj


def test_instance_ids_are_unique_and_increasing():
    a, b = GameObject(), GameObject()
    assert b.instance_id.id > a.instance_id.id


def test_add_component_twice_returns_same():
    obj = GameObject()
    first = obj.add_component(First)
    assert obj.add_component(First) is first
    assert len(obj.components) == 3


def test_get_missing_component_is_none():
    assert GameObject().get_component(First) is None


def test_components_run_in_reverse_order():
    Recorder.log = []
    obj = GameObject()
    obj.add_component(First)
    obj.add_component(Second)
    obj.awake()
    obj.start()
    obj.update(0.1)
    obj.late_update(0.1)
    log = obj.get_component(First).log
    assert log == [
        ("awake", "Second"), ("awake", "First"),
        ("start", "Second"), ("start", "First"),
        ("update", "Second"), ("update", "First"),
        ("late", "Second"), ("late", "First"),
    ]


def test_adding_sprite_sets_drawable():
    obj = GameObject()
    assert obj.drawable is None
    sprite = obj.add_component(Sprite)
    assert obj.drawable is sprite


def test_draw_without_drawable_draws_nothing():
    window = RecordingWindow()
    GameObject().draw(window)
    assert window.calls == []


def test_queue_for_removal():
    obj = GameObject()
    assert obj.queued_for_removal is False
    obj.queue_for_removal()
    assert obj.queued_for_removal is True