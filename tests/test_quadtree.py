import pytest

from vaniaengine.collider import BoxCollider
from vaniaengine.gameobject import GameObject
from vaniaengine.geometry import Rect
from vaniaengine.quadtree import QuadTree


def make_box(x, y, width, height):
    obj = GameObject()
    obj.transform.set_position(x, y)
    collider = obj.add_component(BoxCollider)
    collider.set_collidable(Rect(0, 0, width, height))
    return collider


def ids(colliders):
    return sorted(c.owner.instance_id.id for c in colliders)


def test_default_bounds_cover_window():
    tree = QuadTree()
    assert tree.bounds == Rect(0, 0, 1920, 1080)


def test_search_finds_overlapping_collider_only():
    tree = QuadTree()
    near = make_box(100, 100, 20, 20)
    far = make_box(800, 800, 20, 20)
    tree.insert(near)
    tree.insert(far)
    found = tree.search(Rect(95, 95, 10, 10))
    assert found == [near]


def test_search_whole_area_returns_everything():
    tree = QuadTree()
    boxes = [make_box(50 * i + 30, 40, 10, 10) for i in range(8)]
    for box in boxes:
        tree.insert(box)
    assert ids(tree.search(Rect(0, 0, 1920, 1080))) == ids(boxes)


def test_default_tree_does_not_split():
    tree = QuadTree()
    for i in range(10):
        tree.insert(make_box(20 * i + 15, 15, 5, 5))
    assert tree.children == ()
    assert len(tree.objects) == 10


def test_clear_removes_everything():
    tree = QuadTree()
    box = make_box(100, 100, 20, 20)
    tree.insert(box)
    tree.clear()
    assert tree.search(Rect(0, 0, 1920, 1080)) == []


def test_remove_forgets_collider():
    tree = QuadTree()
    keep = make_box(100, 100, 20, 20)
    drop = make_box(105, 100, 20, 20)
    tree.insert(keep)
    tree.insert(drop)
    tree.remove(drop)
    assert tree.search(Rect(90, 90, 40, 40)) == [keep]


@pytest.fixture
def split_tree():
    tree = QuadTree(max_objects=1, max_levels=0, level=1, bounds=Rect(0, 0, 100, 100))
    north_east = make_box(75, 25, 10, 10)
    south_west = make_box(25, 75, 10, 10)
    tree.insert(north_east)
    tree.insert(south_west)
    return tree, north_east, south_west


def test_split_moves_objects_into_children(split_tree):
    tree, north_east, south_west = split_tree
    assert len(tree.children) == 4
    assert tree.objects == ()
    assert tree.children[0].objects == (north_east,)
    assert tree.children[2].objects == (south_west,)
    assert all(child.parent is tree for child in tree.children)


def test_split_tree_search_by_quadrant(split_tree):
    tree, north_east, south_west = split_tree
    assert tree.search(Rect(60, 10, 30, 30)) == [north_east]
    assert ids(tree.search(Rect(0, 0, 100, 100))) == ids([north_east, south_west])


def test_straddling_object_stays_in_parent(split_tree):
    tree, _, _ = split_tree
    middle = make_box(50, 50, 10, 10)
    tree.insert(middle)
    assert middle in tree.objects
    assert middle in tree.search(Rect(45, 45, 10, 10))


def test_remove_from_child(split_tree):
    tree, north_east, south_west = split_tree
    tree.remove(north_east)
    assert tree.search(Rect(0, 0, 100, 100)) == [south_west]


def test_clear_drops_children(split_tree):
    tree, _, _ = split_tree
    tree.clear()
    assert tree.children == ()
    assert tree.search(Rect(0, 0, 100, 100)) == []