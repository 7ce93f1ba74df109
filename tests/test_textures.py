from types import SimpleNamespace

import pytest

from cubraycaster.errors import CubError
from cubraycaster.textures import Texture, load_textures, load_xpm, parse_xpm


def _xpm(width, height, colours, rows):
    lines = [f'"{width} {height} {len(colours)} 1",']
    lines += [f'"{key} c {value}",' for key, value in colours.items()]
    lines += [f'"{row}",' for row in rows]
    return "static char *img[] = {\n" + "\n".join(lines) + "\n};\n"


def test_parse_simple_image():
    text = _xpm(2, 2, {"a": "#FF0000", "b": "None"}, ["ab", "ba"])
    tex = parse_xpm(text)
    assert (tex.width, tex.height) == (2, 2)
    assert tex.pixels == [0xFF0000, 0, 0, 0xFF0000]
    assert tex.pixel(1, 1) == 0xFF0000


def test_parse_named_and_long_hex():
    text = _xpm(2, 1, {"a": "white", "b": "#00000000FFFF"}, ["ab"])
    tex = parse_xpm(text)
    assert tex.pixels == [0xFFFFFF, 0x0000FF]


def test_parse_rejects_bad_header():
    with pytest.raises(CubError):
        parse_xpm('static char *x[] = {"a b c d"};')


def test_parse_rejects_unknown_pixel_key():
    text = _xpm(2, 1, {"a": "#000000"}, ["az"])
    with pytest.raises(CubError):
        parse_xpm(text)


def test_parse_rejects_missing_rows():
    text = _xpm(2, 3, {"a": "#000000"}, ["aa"])
    with pytest.raises(CubError):
        parse_xpm(text)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(CubError):
        load_xpm(str(tmp_path / "absent.xpm"))


def test_load_textures_order_and_square(tmp_path):
    paths = {}
    colours = {"north": "#010000", "south": "#020000", "east": "#030000", "west": "#040000"}
    for name, colour in colours.items():
        path = tmp_path / f"{name}.xpm"
        path.write_text(_xpm(3, 2, {"a": colour, "b": "None"}, ["aab", "baa"]))
        paths[name] = str(path)
    scene = SimpleNamespace(**paths)
    textures = load_textures(scene)
    assert [t.pixels[0] for t in textures] == [0x010000, 0x020000, 0x030000, 0x040000]
    for tex in textures:
        assert isinstance(tex, Texture)
        assert tex.width == tex.height == 2
        assert len(tex.pixels) == 4
        assert tex.pixels == load_xpm(paths["north"]).pixels[:4] or tex.pixels[2] == 0