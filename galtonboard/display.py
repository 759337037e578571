"""Drawing the Galton board onto a 128x64 SSD1306 screen."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from galtonboard.framebuffer import Framebuffer
from galtonboard.galton import BOARD_HEIGHT, BOARD_WIDTH, CHANNEL_WIDTH, CHANNELS, Ball, GaltonBoard
from galtonboard.ssd1306 import DEFAULT_ADDRESS, Bus

HISTOGRAM_HEADROOM = 10
_CONTROL_COMMAND_STREAM = 0x00
_CONTROL_DATA = 0x40
_LABEL_LIMIT = 15


def setup_commands() -> bytes:
    """The single write that configures the display at power-up."""
    return bytes(
        [
            0x00, 0xAE, 0x00, 0xD5, 0x80, 0x00, 0xA8, 0x3F, 0x00, 0xD3, 0x00,
            0x00, 0x40, 0x00, 0x8D, 0x14, 0x00, 0x20, 0x00, 0x00, 0xA1, 0x00,
            0xC8, 0x00, 0xDA, 0x12, 0x00, 0x81, 0xCF, 0x00, 0xD9, 0xF1, 0x00,
            0xDB, 0x40, 0x00, 0xA4, 0x00, 0xA6, 0x00, 0xAF,
        ]
    )


class GaltonDisplay:
    """Holds the picture of the board and sends it over a bus."""

    def __init__(self, bus: Bus) -> None:
        self.bus = bus
        self.address = DEFAULT_ADDRESS
        self.framebuffer = Framebuffer(BOARD_WIDTH, BOARD_HEIGHT)

    def initialize(self) -> None:
        self.bus.write(self.address, setup_commands())
        for _ in range(2):
            self.clear()
            self.flush()

    def clear(self) -> None:
        self.framebuffer.clear()

    def flush(self) -> None:
        """Select the whole screen and send the framebuffer."""
        for command in (0x21, 0x00, 0x7F, 0x22, 0x00, 0x07):
            self.bus.write(self.address, bytes([_CONTROL_COMMAND_STREAM, command]))
        self.bus.write(self.address, bytes([_CONTROL_DATA]) + self.framebuffer.to_bytes())

    def draw_histogram(self, histogram: Sequence[int]) -> None:
        """Draw one bar per channel, a pixel high for every two balls."""
        limit = BOARD_HEIGHT - HISTOGRAM_HEADROOM
        for channel, count in enumerate(histogram[:CHANNELS]):
            if count <= 0:
                continue
            height = min(count // 2, limit)
            left = channel * CHANNEL_WIDTH
            for y in range(BOARD_HEIGHT - height, BOARD_HEIGHT):
                for x in range(left, left + CHANNEL_WIDTH - 1):
                    self.framebuffer.set_pixel(x, y, True)

    def draw_ball(self, ball: Ball) -> None:
        if ball.active:
            self.framebuffer.set_pixel(int(ball.x), int(ball.y), True)

    def draw_probabilities(self, left_probability: float) -> None:
        """Write the left and right percentages at the middle of each edge."""
        self.framebuffer.draw_string(0, 28, f"{left_probability:.0f}%")
        self.framebuffer.draw_string(104, 28, f"{100.0 - left_probability:.0f}%")

    def update(self, balls: Iterable[Ball], board: GaltonBoard) -> None:
        """Redraw balls, histogram, ball count and probabilities, then send."""
        self.clear()
        for ball in balls:
            self.draw_ball(ball)
        self.draw_histogram(board.histogram)
        self.framebuffer.draw_string(0, 0, f"Bolas: {board.total_balls}"[:_LABEL_LIMIT])
        self.draw_probabilities(board.left_probability)
        self.flush()