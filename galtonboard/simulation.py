"""Main loop of the Galton board: buttons, ball spawning and periodic reports."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass

from galtonboard.display import GaltonDisplay
from galtonboard.galton import MAX_BALLS, Ball, GaltonBoard, Statistics

DEBOUNCE_MS = 200
SPAWN_EVERY = 5
REPORT_EVERY = 100
TICK_MS = 50


@dataclass
class Button:
    """A pulled-up push button: it reads False while held down."""

    last_state: bool = True
    last_press_ms: int = 0
    debounce_ms: int = DEBOUNCE_MS

    def poll(self, pressed_level: bool, now_ms: int) -> bool:
        """Feed the current level; True on a debounced press (falling edge)."""
        pressed = (
            not pressed_level
            and self.last_state
            and (now_ms - self.last_press_ms) > self.debounce_ms
        )
        if pressed:
            self.last_press_ms = now_ms
        self.last_state = pressed_level
        return pressed


class Simulation:
    """Advances the board one tick at a time and keeps the display current."""

    def __init__(self, board: GaltonBoard, display: GaltonDisplay | None = None):
        self.board = board
        self.display = display
        self.balls = [Ball() for _ in range(MAX_BALLS)]
        self.button_a = Button()
        self.button_b = Button()
        self.tick = 0
        board.reset()

    def step(self, now_ms: int, button_a: bool = True, button_b: bool = True) -> list[Statistics]:
        """Run one tick; return the reports due after balls landed."""
        if self.button_a.poll(button_a, now_ms):
            self.board.increase_left()
        if self.button_b.poll(button_b, now_ms):
            self.board.decrease_left()

        if self.tick % SPAWN_EVERY == 0:
            for slot, ball in enumerate(self.balls):
                if not ball.active:
                    self.balls[slot] = Ball.launch(self.board.width)
                    break

        reports: list[Statistics] = []
        for ball in self.balls:
            if not ball.active:
                continue
            self.board.update_ball(ball)
            if not ball.active:
                self.board.register_landing(ball)
                total = self.board.total_balls
                if total > 0 and total % REPORT_EVERY == 0:
                    stats = self.board.statistics()
                    if stats is not None:
                        reports.append(stats)

        self.board.histogram = [max(count, 0) for count in self.board.histogram]
        if self.display is not None:
            self.display.update(self.balls, self.board)
        self.tick += 1
        return reports


class _DiscardBus:
    def write(self, address: int, data: bytes) -> None:
        pass


def _randomness_report(left: int, right: int) -> str:
    trials = left + right
    return (
        f"Esquerda: {left} ({left / trials * 100:.2f}%), "
        f"Direita: {right} ({right / trials * 100:.2f}%)"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a Galton board.")
    parser.add_argument("--steps", type=int, default=1000, help="ticks to simulate")
    parser.add_argument("--left-probability", type=float, default=50.0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay-ms", type=int, default=0, help="pause between ticks")
    parser.add_argument("--show", action="store_true", help="print the final screen")
    parser.add_argument("--test-randomness", type=int, metavar="TRIALS", default=None)
    args = parser.parse_args(argv)

    try:
        board = GaltonBoard(args.left_probability, random.Random(args.seed))
    except ValueError as error:
        parser.error(str(error))

    if args.test_randomness is not None:
        if args.test_randomness <= 0:
            parser.error("TRIALS must be positive")
        print(_randomness_report(*board.test_randomness(args.test_randomness)))
        return 0

    print("Iniciando Galton Board...")
    display = GaltonDisplay(_DiscardBus())
    display.initialize()
    simulation = Simulation(board, display)
    for tick in range(args.steps):
        for report in simulation.step(tick * TICK_MS):
            print(report.format())
        if args.delay_ms > 0:
            time.sleep(args.delay_ms / 1000)
    if args.show:
        print(display.framebuffer.render_text())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())