"""Galton board physics: falling balls, random deflections and landing statistics."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

MAX_BALLS = 10
BOARD_WIDTH = 128
BOARD_HEIGHT = 64
CHANNELS = 16
CHANNEL_WIDTH = BOARD_WIDTH // CHANNELS
PEG_ROWS = 15
STEP = 4.0
PROBABILITY_STEP = 10.0
MIN_LEFT_PROBABILITY = 10.0
MAX_LEFT_PROBABILITY = 90.0


@dataclass
class Ball:
    """A ball's position, whether it is still falling, and pegs it has hit."""

    x: float = 0.0
    y: float = 0.0
    active: bool = False
    collisions: int = 0

    @classmethod
    def launch(cls, width: int = BOARD_WIDTH) -> Ball:
        """A new ball at the top centre of the board."""
        return cls(x=width / 2.0, y=0.0, active=True, collisions=0)


@dataclass(frozen=True)
class Statistics:
    """Summary of the landed balls, with bins numbered from 1."""

    total: int
    bins: tuple[int, ...]
    mean: float
    std_dev: float

    def format(self) -> str:
        bins = "".join(f"[{number}]: {count} " for number, count in enumerate(self.bins, 1))
        return (
            f"Total de Bolas: {self.total}\n"
            f"Bins: {bins}\n"
            f"Média: {self.mean:.2f}\n"
            f"Desvio Padrão: {self.std_dev:.2f}"
        )


class GaltonBoard:
    """Board state: the landing histogram and the chance of bouncing left."""

    def __init__(self, left_probability: float = 50.0, rng: random.Random | None = None):
        if not 0.0 <= left_probability <= 100.0:
            raise ValueError(f"left probability must be within 0..100, got {left_probability}")
        self.left_probability = float(left_probability)
        self.rng = rng if rng is not None else random.Random()
        self.width = BOARD_WIDTH
        self.height = BOARD_HEIGHT
        self.channels = CHANNELS
        self.histogram = [0] * CHANNELS
        self.total_balls = 0

    def random_direction(self) -> bool:
        """True to go left, with the board's left probability in percent."""
        return (self.rng.getrandbits(32) % 100) < self.left_probability

    def test_randomness(self, trials: int) -> tuple[int, int]:
        """Draw `trials` directions and return the (left, right) counts."""
        if trials <= 0:
            raise ValueError(f"trials must be positive, got {trials}")
        left = sum(self.random_direction() for _ in range(trials))
        return left, trials - left

    def statistics(self) -> Statistics | None:
        """Mean and standard deviation of landing bins, or None with no balls."""
        if self.total_balls == 0:
            return None
        weighted = list(enumerate(self.histogram, 1))
        mean = sum(number * count for number, count in weighted) / self.total_balls
        variance = (
            sum(count * (number - mean) ** 2 for number, count in weighted) / self.total_balls
        )
        return Statistics(
            total=self.total_balls,
            bins=tuple(self.histogram),
            mean=mean,
            std_dev=math.sqrt(variance),
        )

    def update_ball(self, ball: Ball) -> None:
        """Move a falling ball down one row, deflecting it at each peg row."""
        if not ball.active:
            return
        ball.y += 1.0
        if ball.collisions < PEG_ROWS and ball.y >= (ball.collisions + 1) * (
            self.height / float(PEG_ROWS)
        ):
            ball.x += -STEP if self.random_direction() else STEP
            ball.collisions += 1
        if ball.x < 0:
            ball.x = 0.0
        if ball.x >= self.width:
            ball.x = float(self.width - 1)
        if ball.y >= self.height:
            ball.active = False

    def register_landing(self, ball: Ball) -> bool:
        """Count a landed ball in its channel; False if it fell outside them."""
        channel = int(ball.x / (self.width // self.channels))
        if 0 <= channel < self.channels:
            self.histogram[channel] += 1
            self.total_balls += 1
            return True
        return False

    def increase_left(self) -> None:
        if self.left_probability < MAX_LEFT_PROBABILITY:
            self.left_probability += PROBABILITY_STEP

    def decrease_left(self) -> None:
        if self.left_probability > MIN_LEFT_PROBABILITY:
            self.left_probability -= PROBABILITY_STEP

    def reset(self) -> None:
        """Forget every landed ball."""
        self.histogram = [0] * self.channels
        self.total_balls = 0