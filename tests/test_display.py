from galtonboard.display import GaltonDisplay, setup_commands
from galtonboard.font import glyph
from galtonboard.galton import Ball, GaltonBoard
from galtonboard.ssd1306 import RecordingBus


def make_display():
    bus = RecordingBus()
    return bus, GaltonDisplay(bus)


def test_setup_commands_wire_bytes():
    commands = setup_commands()
    assert commands[:2] == bytes([0x00, 0xAE])
    assert commands[-1] == 0xAF
    assert len(commands) == 41


def test_initialize_sends_setup_then_two_blank_frames():
    bus, display = make_display()
    display.initialize()
    assert bus.writes[0] == (0x3C, setup_commands())
    assert len(bus.writes) == 15
    assert bus.writes[-1] == (0x3C, bytes([0x40]) + bytes(1024))


def test_flush_selects_full_screen():
    bus, display = make_display()
    display.framebuffer.set_pixel(3, 3)
    display.flush()
    commands = [data for _, data in bus.writes[:6]]
    assert commands == [
        bytes([0x00, 0x21]), bytes([0x00, 0x00]), bytes([0x00, 0x7F]),
        bytes([0x00, 0x22]), bytes([0x00, 0x00]), bytes([0x00, 0x07]),
    ]
    assert bus.writes[6][1] == bytes([0x40]) + display.framebuffer.to_bytes()


def test_histogram_bar_shape():
    _, display = make_display()
    display.draw_histogram([4] + [0] * 15)
    fb = display.framebuffer
    assert fb.get_pixel(0, 63) and fb.get_pixel(6, 62)
    assert not fb.get_pixel(7, 63)
    assert not fb.get_pixel(0, 61)
    assert not fb.get_pixel(8, 63)


def test_histogram_bar_is_capped():
    _, display = make_display()
    display.draw_histogram([1000] + [0] * 15)
    assert display.framebuffer.get_pixel(0, 10)
    assert not display.framebuffer.get_pixel(0, 9)


def test_single_ball_draws_no_bar():
    _, display = make_display()
    display.draw_histogram([1] * 16)
    assert display.framebuffer.to_bytes() == bytes(1024)


def test_draw_ball_only_when_active():
    _, display = make_display()
    display.draw_ball(Ball(x=10.7, y=20.2, active=True))
    display.draw_ball(Ball(x=30.0, y=20.0, active=False))
    assert display.framebuffer.get_pixel(10, 20)
    assert not display.framebuffer.get_pixel(30, 20)


def test_draw_probabilities_glyphs():
    _, display = make_display()
    display.draw_probabilities(60.0)
    data = display.framebuffer.to_bytes()
    page = 3 * 128
    assert data[page : page + 8] == glyph("6")
    assert data[page + 8 : page + 16] == glyph("0")
    assert data[page + 104 : page + 112] == glyph("4")
    assert data[page + 112 : page + 120] == glyph("0")


def test_update_sends_what_was_drawn():
    bus, display = make_display()
    board = GaltonBoard()
    display.update([Ball(x=64.0, y=40.0, active=True)], board)
    assert bus.writes[-1][1][1:] == display.framebuffer.to_bytes()
    assert display.framebuffer.get_pixel(64, 40)
    assert display.framebuffer.to_bytes()[0:8] == glyph("B")