import pytest

from galtonboard.font import glyph
from galtonboard.framebuffer import Framebuffer, RenderArea


def test_render_area_full_screen_length():
    assert RenderArea(0, 127, 0, 7).buffer_length() == 1024


def test_render_area_single_cell():
    assert RenderArea(5, 5, 2, 2).buffer_length() == 1


def test_default_buffer_size_matches_area():
    fb = Framebuffer()
    assert len(fb.to_bytes()) == RenderArea(0, fb.width - 1, 0, fb.pages - 1).buffer_length()
    assert fb.to_bytes() == bytes(len(fb.to_bytes()))


def test_invalid_height_rejected():
    with pytest.raises(ValueError):
        Framebuffer(128, 60)


def test_set_and_get_pixel_round_trip():
    fb = Framebuffer()
    fb.set_pixel(10, 20, True)
    assert fb.get_pixel(10, 20)
    assert not fb.get_pixel(10, 21)
    fb.set_pixel(10, 20, False)
    assert not fb.get_pixel(10, 20)


def test_origin_pixel_is_low_bit_of_first_byte():
    fb = Framebuffer()
    fb.set_pixel(0, 0, True)
    assert fb.to_bytes()[0] == 1


def test_pixel_clear_keeps_neighbours():
    fb = Framebuffer()
    for y in range(8):
        fb.set_pixel(3, y, True)
    fb.set_pixel(3, 4, False)
    assert [fb.get_pixel(3, y) for y in range(8)] == [y != 4 for y in range(8)]


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (128, 0), (0, 64)])
def test_out_of_range_pixel_raises(x, y):
    fb = Framebuffer()
    with pytest.raises(IndexError):
        fb.set_pixel(x, y, True)
    with pytest.raises(IndexError):
        fb.get_pixel(x, y)


def test_clear_turns_everything_off():
    fb = Framebuffer()
    fb.draw_line(0, 0, 127, 63, True)
    fb.clear()
    assert fb.to_bytes() == bytes(len(fb.buffer))


def test_horizontal_line_covers_span():
    fb = Framebuffer()
    fb.draw_line(5, 10, 30, 10, True)
    assert all(fb.get_pixel(x, 10) for x in range(5, 31))
    assert sum(bin(b).count("1") for b in fb.to_bytes()) == 26


def test_diagonal_line_has_one_pixel_per_column():
    fb = Framebuffer()
    fb.draw_line(0, 0, 40, 20, True)
    assert fb.get_pixel(0, 0) and fb.get_pixel(40, 20)
    for x in range(41):
        assert sum(fb.get_pixel(x, y) for y in range(fb.height)) == 1


def test_line_can_erase():
    fb = Framebuffer()
    fb.draw_line(0, 5, 20, 5, True)
    fb.draw_line(0, 5, 20, 5, False)
    assert fb.to_bytes() == bytes(len(fb.buffer))


def test_draw_char_writes_glyph_columns():
    fb = Framebuffer()
    fb.draw_char(0, 0, "A")
    assert fb.to_bytes()[0:8] == glyph("A")


def test_draw_char_lowercase_is_upper():
    upper, lower = Framebuffer(), Framebuffer()
    upper.draw_char(16, 8, "G")
    lower.draw_char(16, 8, "g")
    assert upper.to_bytes() == lower.to_bytes()


def test_draw_char_row_snaps_to_page():
    a, b = Framebuffer(), Framebuffer()
    a.draw_char(0, 8, "K")
    b.draw_char(0, 12, "K")
    assert a.to_bytes() == b.to_bytes()


def test_draw_char_past_edge_is_skipped():
    fb = Framebuffer()
    fb.draw_char(fb.width - 7, 0, "A")
    fb.draw_char(0, fb.height - 7, "A")
    assert fb.to_bytes() == bytes(len(fb.buffer))


def test_draw_string_places_characters_side_by_side():
    fb = Framebuffer()
    fb.draw_string(0, 8, "AB")
    data = fb.to_bytes()
    start = fb.width
    assert data[start : start + 8] == glyph("A")
    assert data[start + 8 : start + 16] == glyph("B")


def test_draw_string_truncates_at_right_edge():
    fb = Framebuffer()
    fb.draw_string(fb.width - 16, 0, "ABC")
    data = fb.to_bytes()
    assert data[fb.width - 16 : fb.width] == glyph("A") + glyph("B")


def test_render_text_shape_and_content():
    fb = Framebuffer(16, 8)
    fb.set_pixel(0, 0, True)
    lines = fb.render_text().split("\n")
    assert len(lines) == fb.height
    assert all(len(line) == fb.width for line in lines)
    assert lines[0][0] == "#"
    assert lines[0][1] == "."
    assert fb.render_text("X", " ").split("\n")[0].strip() == "X"