"""Page-organised monochrome framebuffer in the SSD1306 memory layout."""

from __future__ import annotations

from dataclasses import dataclass

from galtonboard.font import GLYPH_WIDTH, glyph

PAGE_HEIGHT = 8
DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64


@dataclass
class RenderArea:
    """A rectangle of columns and pages to be sent to the display."""

    start_column: int
    end_column: int
    start_page: int
    end_page: int

    def buffer_length(self) -> int:
        """Number of bytes covering the area."""
        return (self.end_column - self.start_column + 1) * (
            self.end_page - self.start_page + 1
        )


def _ascii_upper(character: str) -> str:
    return character.upper() if "a" <= character <= "z" else character


class Framebuffer:
    """Bytes of eight vertical pixels, one page of `width` bytes after another."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        if height <= 0 or height % PAGE_HEIGHT:
            raise ValueError(
                f"height must be a positive multiple of {PAGE_HEIGHT}, got {height}"
            )
        self.width = width
        self.height = height
        self.pages = height // PAGE_HEIGHT
        self.buffer = bytearray(self.pages * width)

    def clear(self) -> None:
        """Turn every pixel off."""
        self.buffer[:] = bytes(len(self.buffer))

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return (y // PAGE_HEIGHT) * self.width + x, 1 << (y % PAGE_HEIGHT)

    def get_pixel(self, x: int, y: int) -> bool:
        index, mask = self._locate(x, y)
        return bool(self.buffer[index] & mask)

    def set_pixel(self, x: int, y: int, on: bool = True) -> None:
        index, mask = self._locate(x, y)
        if on:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, on: bool = True) -> None:
        """Draw a straight line with Bresenham's algorithm, both ends included."""
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        error = dx + dy
        while True:
            self.set_pixel(x0, y0, on)
            if x0 == x1 and y0 == y1:
                break
            error2 = 2 * error
            if error2 >= dy:
                error += dy
                x0 += sx
            if error2 <= dx:
                error += dx
                y0 += sy

    def draw_char(self, x: int, y: int, character: str) -> None:
        """Draw a glyph at column x in the page holding row y.

        Characters that would not fit entirely are skipped.
        """
        if x < 0 or y < 0:
            return
        if x > self.width - GLYPH_WIDTH or y > self.height - PAGE_HEIGHT:
            return
        start = (y // PAGE_HEIGHT) * self.width + x
        self.buffer[start : start + GLYPH_WIDTH] = glyph(_ascii_upper(character))

    def draw_string(self, x: int, y: int, text: str) -> None:
        """Draw characters left to right, eight columns apart."""
        if x < 0 or y < 0:
            return
        if x > self.width - GLYPH_WIDTH or y > self.height - PAGE_HEIGHT:
            return
        for offset, character in enumerate(text):
            self.draw_char(x + offset * GLYPH_WIDTH, y, character)

    def to_bytes(self) -> bytes:
        return bytes(self.buffer)

    def render_text(self, on: str = "#", off: str = ".") -> str:
        """Return the picture as lines of text, one per pixel row."""
        return "\n".join(
            "".join(on if self.get_pixel(x, y) else off for x in range(self.width))
            for y in range(self.height)
        )