"""Command encoding and I2C transfer for SSD1306 OLED controllers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from galtonboard.framebuffer import PAGE_HEIGHT, RenderArea

DEFAULT_ADDRESS = 0x3C
I2C_CLOCK_KHZ = 400

CONTROL_COMMAND = 0x80
CONTROL_DATA = 0x40

SET_MEMORY_MODE = 0x20
SET_COLUMN_ADDRESS = 0x21
SET_PAGE_ADDRESS = 0x22
SET_HORIZONTAL_SCROLL = 0x26
SET_SCROLL = 0x2E
SET_DISPLAY_START_LINE = 0x40
SET_CONTRAST = 0x81
SET_CHARGE_PUMP = 0x8D
SET_SEGMENT_REMAP = 0xA0
SET_ENTIRE_ON = 0xA4
SET_ALL_ON = 0xA5
SET_NORMAL_DISPLAY = 0xA6
SET_INVERSE_DISPLAY = 0xA7
SET_MUX_RATIO = 0xA8
SET_DISPLAY = 0xAE
SET_COMMON_OUTPUT_DIRECTION = 0xC0
SET_DISPLAY_OFFSET = 0xD3
SET_DISPLAY_CLOCK_DIVIDE_RATIO = 0xD5
SET_PRECHARGE = 0xD9
SET_COMMON_PIN_CONFIGURATION = 0xDA
SET_VCOMH_DESELECT_LEVEL = 0xDB


class Bus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...


class RecordingBus:
    """A bus that keeps every write as an (address, bytes) pair."""

    def __init__(self) -> None:
        self.writes: list[tuple[int, bytes]] = []

    def write(self, address: int, data: bytes) -> None:
        self.writes.append((address, bytes(data)))


def init_commands(width: int = 128, height: int = 64) -> bytes:
    """Power-up command sequence for a display of the given size."""
    pin_configuration = 0x12 if (width, height) == (128, 64) else 0x02
    return bytes(
        [
            SET_DISPLAY,
            SET_MEMORY_MODE, 0x00,
            SET_DISPLAY_START_LINE,
            SET_SEGMENT_REMAP | 0x01,
            SET_MUX_RATIO, height - 1,
            SET_COMMON_OUTPUT_DIRECTION | 0x08,
            SET_DISPLAY_OFFSET, 0x00,
            SET_COMMON_PIN_CONFIGURATION, pin_configuration,
            SET_DISPLAY_CLOCK_DIVIDE_RATIO, 0x80,
            SET_PRECHARGE, 0xF1,
            SET_VCOMH_DESELECT_LEVEL, 0x30,
            SET_CONTRAST, 0xFF,
            SET_ENTIRE_ON,
            SET_NORMAL_DISPLAY,
            SET_CHARGE_PUMP, 0x14,
            SET_SCROLL | 0x00,
            SET_DISPLAY | 0x01,
        ]
    )


def scroll_commands(enabled: bool) -> bytes:
    """Horizontal scroll setup, followed by activating or stopping the scroll."""
    return bytes(
        [
            SET_HORIZONTAL_SCROLL | 0x00, 0x00, 0x00, 0x00, 0x03, 0x00, 0xFF,
            SET_SCROLL | (0x01 if enabled else 0x00),
        ]
    )


def render_commands(area: RenderArea) -> bytes:
    """Column and page window selection for a render area."""
    return bytes(
        [
            SET_COLUMN_ADDRESS, area.start_column, area.end_column,
            SET_PAGE_ADDRESS, area.start_page, area.end_page,
        ]
    )


class Controller:
    """Sends commands and pixel data to a display on a bus."""

    def __init__(self, bus: Bus, address: int = DEFAULT_ADDRESS) -> None:
        self.bus = bus
        self.address = address

    def send_command(self, command: int) -> None:
        self.bus.write(self.address, bytes([CONTROL_COMMAND, command]))

    def send_commands(self, commands: Iterable[int]) -> None:
        for command in commands:
            self.send_command(command)

    def send_buffer(self, data: bytes) -> None:
        self.bus.write(self.address, bytes([CONTROL_DATA]) + bytes(data))

    def initialize(self, width: int = 128, height: int = 64) -> None:
        self.send_commands(init_commands(width, height))

    def scroll(self, enabled: bool) -> None:
        self.send_commands(scroll_commands(enabled))

    def render(self, data: bytes, area: RenderArea) -> None:
        """Select the area's window and send its bytes from the start of data."""
        length = area.buffer_length()
        if len(data) < length:
            raise ValueError(f"render area needs {length} bytes, got {len(data)}")
        self.send_commands(render_commands(area))
        self.send_buffer(bytes(data[:length]))


class BitmapDisplay:
    """A display holding its own RAM image, sent whole on each update."""

    def __init__(
        self,
        bus: Bus,
        width: int = 128,
        height: int = 64,
        address: int = DEFAULT_ADDRESS,
        external_vcc: bool = False,
    ) -> None:
        if width <= 0 or height <= 0 or height % PAGE_HEIGHT:
            raise ValueError(f"unsupported display size {width}x{height}")
        self.bus = bus
        self.width = width
        self.height = height
        self.pages = height // PAGE_HEIGHT
        self.address = address
        self.external_vcc = external_vcc
        self.bufsize = self.pages * width + 1
        self.ram_buffer = bytearray(self.bufsize)
        self.ram_buffer[0] = CONTROL_DATA

    def command(self, command: int) -> None:
        self.bus.write(self.address, bytes([CONTROL_COMMAND, command]))

    def configure(self) -> None:
        for command in (
            SET_DISPLAY | 0x00,
            SET_MEMORY_MODE, 0x01,
            SET_DISPLAY_START_LINE | 0x00,
            SET_SEGMENT_REMAP | 0x01,
            SET_MUX_RATIO, self.height - 1,
            SET_COMMON_OUTPUT_DIRECTION | 0x08,
            SET_DISPLAY_OFFSET, 0x00,
            SET_COMMON_PIN_CONFIGURATION, 0x12,
            SET_DISPLAY_CLOCK_DIVIDE_RATIO, 0x80,
            SET_PRECHARGE, 0xF1,
            SET_VCOMH_DESELECT_LEVEL, 0x30,
            SET_CONTRAST, 0xFF,
            SET_ENTIRE_ON,
            SET_NORMAL_DISPLAY,
            SET_CHARGE_PUMP, 0x14,
            SET_DISPLAY | 0x01,
        ):
            self.command(command)

    def send_data(self) -> None:
        """Select the whole screen and send the RAM image."""
        for command in (
            SET_COLUMN_ADDRESS, 0, self.width - 1,
            SET_PAGE_ADDRESS, 0, self.pages - 1,
        ):
            self.command(command)
        self.bus.write(self.address, bytes(self.ram_buffer))

    def draw_bitmap(self, bitmap: bytes) -> None:
        """Copy a bitmap into RAM byte by byte, refreshing after every byte."""
        size = self.bufsize - 1
        if len(bitmap) < size:
            raise ValueError(f"bitmap needs {size} bytes, got {len(bitmap)}")
        for index, value in enumerate(bitmap[:size], start=1):
            self.ram_buffer[index] = value
            self.send_data()