import pytest

from hideseek.components import EntityView, GuiBox, Rect, Vector2
from hideseek.render import (
    HIGHLIGHT_COLOR,
    Quad,
    RenderBatch,
    entity_color,
    mix_rgb,
    rect_quad_vertices,
)


def _rect(x, y, w, h):
    return Rect(Vector2(x, y), Vector2(w, h))


@pytest.mark.parametrize("color", [(0, 0, 0), (255, 255, 255), (12, 200, 99)])
@pytest.mark.parametrize("factor", [0.0, 0.3, 0.5, 1.0])
def test_mix_same_color_is_identity(color, factor):
    assert mix_rgb(color, color, factor) == color


def test_mix_factor_one_and_zero_pick_one_color():
    a, b = (10, 20, 30), (200, 100, 50)
    assert mix_rgb(a, b, 1.0) == a
    assert mix_rgb(a, b, 0.0) == b


def test_mix_factor_is_clamped():
    a, b = (10, 20, 30), (200, 100, 50)
    assert mix_rgb(a, b, 5.0) == mix_rgb(a, b, 1.0)
    assert mix_rgb(a, b, -3.0) == mix_rgb(a, b, 0.0)


def test_mix_half_rounds_half_away_from_zero():
    assert mix_rgb((0, 0, 0), (255, 255, 255), 0.5) == (128, 128, 128)


def test_mix_is_symmetric_at_half():
    a, b = (10, 21, 30), (200, 100, 51)
    assert mix_rgb(a, b, 0.5) == mix_rgb(b, a, 0.5)


def test_quad_vertices_layout():
    vertices, indices = rect_quad_vertices(1.0, 2.0, 3.0, 4.0)
    assert indices == (0, 1, 2, 2, 3, 0)
    assert vertices[0] == (1.0, 2.0, 1.0, 1.0)
    assert vertices[2] == (4.0, 6.0, 1.0, 1.0)
    assert [v[0] for v in vertices] == [1.0, 4.0, 4.0, 1.0]
    assert [v[1] for v in vertices] == [2.0, 2.0, 6.0, 6.0]


def test_entity_color_plain():
    view = EntityView(_rect(0, 0, 1, 1), (12, 34, 56))
    assert entity_color(view) == (12, 34, 56)


def test_entity_color_with_marker_mixes_half():
    view = EntityView(_rect(0, 0, 1, 1), (10, 20, 30), marker_color=(10, 20, 30))
    assert entity_color(view) == (10, 20, 30)
    marked = EntityView(_rect(0, 0, 1, 1), (0, 0, 0), marker_color=(0, 0, 255))
    assert entity_color(marked) == mix_rgb((0, 0, 0), (0, 0, 255), 0.5)


def test_entity_color_highlight_uses_highlight_color():
    view = EntityView(_rect(0, 0, 1, 1), HIGHLIGHT_COLOR, highlighted=True)
    assert entity_color(view) == HIGHLIGHT_COLOR
    other = EntityView(_rect(0, 0, 1, 1), (0, 0, 0), highlighted=True)
    assert entity_color(other) == mix_rgb((0, 0, 0), HIGHLIGHT_COLOR, 0.5)


def test_quad_from_rect_normalizes_color():
    quad = Quad.from_rect(0.0, 0.0, 1.0, 1.0, (255, 0, 255))
    assert quad.color == (1.0, 0.0, 1.0, 1.0)


def test_batch_defaults_and_clear():
    batch = RenderBatch()
    assert batch.camera == Vector2(0.0, 0.0)
    assert batch.world_scale == 0.05
    batch.append_gui_element(GuiBox(_rect(0, 0, 1, 1), (1, 2, 3)))
    batch.append_entity_view(EntityView(_rect(0, 0, 1, 1), (1, 2, 3)))
    batch.set_camera(Vector2(3.0, 4.0), 2.0)
    batch.clear()
    assert batch.gui_elements == []
    assert batch.entity_views == []
    assert batch.camera == Vector2(3.0, 4.0)
    assert batch.world_scale == 2.0


def test_gui_quad_full_window_covers_device_space():
    batch = RenderBatch()
    batch.append_gui_element(GuiBox(_rect(0, 0, 800, 600), (255, 255, 255)))
    (quad,) = batch.gui_quads(800.0, 600.0)
    assert [(v[0], v[1]) for v in quad.vertices] == [(-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0)]
    assert quad.color == (1.0, 1.0, 1.0, 1.0)


def test_entity_quad_at_camera_starts_at_origin():
    batch = RenderBatch()
    batch.set_camera(Vector2(5.0, 7.0), 1.0)
    batch.append_entity_view(EntityView(_rect(5.0, 7.0, 2.0, 2.0), (0, 0, 0)))
    (quad,) = batch.entity_quads(2.0)
    assert quad.vertices[0][:2] == (0.0, 0.0)
    width = quad.vertices[1][0] - quad.vertices[0][0]
    height = quad.vertices[3][1] - quad.vertices[0][1]
    assert width == pytest.approx(height / 2.0)


def test_entity_quads_preserve_order():
    batch = RenderBatch()
    colors = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]
    for c in colors:
        batch.append_entity_view(EntityView(_rect(0, 0, 1, 1), c))
    quads = batch.entity_quads(1.0)
    assert [q.color[:3] for q in quads] == [tuple(x / 255.0 for x in c) for c in colors]