import logging
import math

import numpy as np
import pytest

from strafe.transform import Transform, TransformLayer, local_model_matrix


def test_default_transform_is_identity():
    np.testing.assert_allclose(local_model_matrix(Transform()), np.eye(4))


def test_translation_goes_into_last_column():
    position = np.array([1.0, 2.0, 3.0])
    matrix = local_model_matrix(Transform(local_position=position))
    np.testing.assert_allclose(matrix[:3, 3], position)
    np.testing.assert_allclose(matrix[:3, :3], np.eye(3))


def test_scale_goes_onto_diagonal():
    scale = np.array([2.0, 3.0, 4.0])
    matrix = local_model_matrix(Transform(local_scale=scale))
    np.testing.assert_allclose(np.diag(matrix)[:3], scale)


def test_quarter_turn_about_z_maps_x_to_y():
    half = math.pi / 4
    rotation = np.array([math.cos(half), 0.0, 0.0, math.sin(half)])
    matrix = local_model_matrix(Transform(local_rotation=rotation))
    np.testing.assert_allclose(matrix @ np.array([1.0, 0, 0, 1]), [0, 1, 0, 1], atol=1e-12)


def test_unit_quaternion_gives_orthonormal_rotation():
    rotation = np.array([0.5, 0.5, 0.5, 0.5])
    linear = local_model_matrix(Transform(local_rotation=rotation))[:3, :3]
    np.testing.assert_allclose(linear @ linear.T, np.eye(3), atol=1e-12)


def build_tree():
    root = Transform(local_position=np.array([1.0, 0, 0]), child="a")
    a = Transform(local_position=np.array([0, 2.0, 0]), parent="root", sibling="b")
    b = Transform(local_scale=np.array([3.0, 3.0, 3.0]), parent="root")
    transforms = {"root": root, "a": a, "b": b}
    layer = TransformLayer(transforms)
    layer.set_entity_as_root("root")
    return layer, transforms


def test_layer_name():
    assert TransformLayer({}).debug_name == "TransformLayer"


def test_children_concatenate_parent_matrix():
    layer, t = build_tree()
    layer.update(0.016)
    np.testing.assert_allclose(t["root"].model_to_world, local_model_matrix(t["root"]))
    for name in ("a", "b"):
        expected = t["root"].model_to_world @ local_model_matrix(t[name])
        np.testing.assert_allclose(t[name].model_to_world, expected)


def test_update_clears_dirty_flags():
    layer, t = build_tree()
    layer.update(0.016)
    assert [tr.dirty for tr in t.values()] == [False, False, False]


def test_clean_nodes_keep_cached_matrix():
    layer, t = build_tree()
    layer.update(0.016)
    cached = t["root"].model_to_world.copy()
    t["root"].local_position = np.array([5.0, 5.0, 5.0])
    layer.update(0.016)
    np.testing.assert_allclose(t["root"].model_to_world, cached)


def test_dirty_child_uses_cached_parent_matrix():
    layer, t = build_tree()
    layer.update(0.016)
    t["a"].local_position = np.array([0, 0, 7.0])
    t["a"].dirty = True
    layer.update(0.016)
    expected = t["root"].model_to_world @ local_model_matrix(t["a"])
    np.testing.assert_allclose(t["a"].model_to_world, expected)


def test_dirty_parent_refreshes_children():
    layer, t = build_tree()
    layer.update(0.016)
    t["root"].local_position = np.array([0, 0, -1.0])
    t["root"].dirty = True
    layer.update(0.016)
    expected = local_model_matrix(t["root"]) @ local_model_matrix(t["b"])
    np.testing.assert_allclose(t["b"].model_to_world, expected)


def test_without_root_nothing_changes():
    layer, t = build_tree()
    layer.root_entity = None
    layer.update(0.016)
    assert all(tr.dirty for tr in t.values())


def test_missing_child_is_logged(caplog):
    root = Transform(child="ghost")
    layer = TransformLayer({"root": root})
    layer.set_entity_as_root("root")
    with caplog.at_level(logging.ERROR, logger="strafe.transform"):
        layer.update(0.016)
    assert "ghost" in caplog.text
    assert root.dirty is False


@pytest.mark.parametrize("method", ["init", "shutdown"])
def test_lifecycle_hooks_leave_tree_untouched(method):
    layer, t = build_tree()
    getattr(layer, method)()
    assert all(tr.dirty for tr in t.values())