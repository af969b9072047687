import pytest

from wireframe.app import Engine, Key, main
from wireframe.color import BACKGROUND
from wireframe.transform import SCALE, TILE_SIZE, Transformation


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "pyramid.fdf"
    path.write_text("0 0 0\n0 10 0\n0 0 0\n")
    return path


@pytest.fixture
def engine(map_file):
    return Engine.from_file(map_file, 200, 150)


def test_from_file_loads_map(engine):
    assert (engine.canvas.width, engine.canvas.height) == (200, 150)
    assert len(engine.heightmap) == 9
    assert engine.transformation == Transformation()


def test_redraw_paints_lines(engine):
    engine.redraw()
    assert any(p != BACKGROUND for p in engine.canvas.pixels)
    assert len(engine.projection.x) == 9


def test_translation_keys(engine):
    assert engine.handle_keys({Key.RIGHT}) is True
    engine.handle_keys({Key.UP})
    assert engine.transformation.ofst_x == TILE_SIZE
    assert engine.transformation.ofst_y == -TILE_SIZE


def test_only_first_translation_applies(engine):
    engine.handle_keys({Key.RIGHT, Key.LEFT})
    assert engine.transformation.ofst_x == TILE_SIZE


def test_rotation_key(engine):
    before = engine.transformation.rot_x
    engine.handle_keys({Key.Q})
    assert engine.transformation.rot_x == (before + 5) % 360
    engine.handle_keys({Key.A})
    assert engine.transformation.rot_x == before


def test_scaling_key(engine):
    engine.handle_keys({Key.R})
    assert engine.transformation.base_scl_z == TILE_SIZE + 1


def test_space_resets_and_overrides(engine):
    engine.handle_keys({Key.RIGHT, Key.Q, Key.R})
    engine.handle_keys({Key.SPACE, Key.RIGHT})
    assert engine.transformation == Transformation()


def test_escape_stops(engine):
    engine.handle_keys({Key.ESCAPE})
    assert engine.running is False


def test_no_keys_no_redraw(engine):
    engine.canvas.fill(0)
    assert engine.handle_keys(set()) is False
    assert set(engine.canvas.pixels) == {0}


def test_scroll_zooms(engine):
    engine.handle_scroll(1.0)
    assert engine.transformation.base_scl == SCALE * 1100 // 1000
    engine.handle_scroll(0.0)
    assert engine.transformation.base_scl == SCALE * 1100 // 1000


def test_resize(engine):
    engine.resize(80, 60)
    assert (engine.canvas.width, engine.canvas.height) == (80, 60)
    assert len(engine.canvas.pixels) == 80 * 60


def test_main_requires_one_argument(map_file):
    assert main([]) == 1
    assert main([str(map_file), str(map_file)]) == 1


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.fdf")]) == 1


def test_main_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == 1