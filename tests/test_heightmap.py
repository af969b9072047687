import pytest

from wireframe.color import FOREGROUND
from wireframe.heightmap import HeightMap, atoi, parse_lines, parse_map, split_words


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("  -42abc") == -42
    assert atoi("+7") == 7
    assert atoi("abc") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_split_words_drops_empty_pieces():
    assert split_words("  a  b ", " ") == ["a", "b"]
    assert split_words("", " ") == []


def test_parse_lines_grid_layout():
    hm = parse_lines(["0 1 2\n", "3 4 5\n"])
    assert hm.width == 3
    assert hm.height == 2
    assert len(hm) == 6
    assert hm.z == [0, 1, 2, 3, 4, 5]
    assert hm.x == [0, 0, 0, 1, 1, 1]
    assert hm.y == [0, 1, 2, 0, 1, 2]


def test_parse_lines_colours():
    hm = parse_lines(["0,0xFF0000 10\n"])
    assert hm.color == [0xFF0000, FOREGROUND]
    assert hm.z == [0, 10]


def test_parse_lines_empty_raises():
    with pytest.raises(ValueError):
        parse_lines([])
    with pytest.raises(ValueError):
        parse_lines(["   \n"])


def test_parse_map_reads_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("1 2\n3 4\n", encoding="utf-8")
    hm = parse_map(path)
    assert hm.z == [1, 2, 3, 4]
    assert (hm.width, hm.height, len(hm)) == (2, 2, 4)


def test_parse_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_map(tmp_path / "absent.fdf")


def test_size_never_exceeds_points():
    hm = parse_lines(["1\n", "1 2 3\n"])
    assert len(hm) <= len(hm.z)
    assert isinstance(hm, HeightMap) and hm.width == 3