"""Window that fits the model to a data file and plots the fit as it learns."""

from __future__ import annotations

import argparse
import math
import sys

from nlregress.config import EDGE, HEIGHT, SIZE, WIDTH, initial_parameters
from nlregress.formulas import (
    batch_gradient_descent_step,
    find_max,
    find_min,
    hypothesis,
    load_data_from_file,
    loss_func,
)

_RED = (255, 0, 0)
_GREEN = (0, 255, 0)
_BLACK = (0, 0, 0)
_REPORT_EVERY = 1000


def _to_screen(x, y, lo, hi):
    span_x = hi.x - lo.x
    span_y = hi.y - lo.y
    if span_x == 0 or span_y == 0:
        raise ValueError("data range is degenerate; cannot scale to the screen")
    screen_x = (x - lo.x) / span_x * (WIDTH - EDGE)
    screen_y = HEIGHT - EDGE - (y - lo.y) / span_y * (HEIGHT - EDGE)
    return screen_x, screen_y


def scale_points(data, lo, hi):
    """Map data points into screen coordinates between the given bounds."""
    return [_to_screen(p.x, p.y, lo, hi) for p in data]


def sample_curve(para, lo, hi):
    """Sample the model once per screen column and map it to screen coordinates."""
    samples = []
    for column in range(WIDTH):
        x = lo.x + (hi.x - lo.x) * (column / (WIDTH - EDGE))
        samples.append(_to_screen(x, hypothesis(x, para), lo, hi))
    return samples


def format_parameters(para):
    """Render parameters as a bracketed, comma-separated list."""
    return "[" + ", ".join(f"{value:g}" for value in para) + "]"


def _plot(surface, points, colour):
    width, height = surface.get_size()
    for x, y in points:
        if math.isfinite(x) and math.isfinite(y):
            px, py = int(x), int(y)
            if 0 <= px < width and 0 <= py < height:
                surface.set_at((px, py), colour)


def _run(data, para):
    import pygame

    lo = find_min(data)
    hi = find_max(data)
    points = scale_points(data, lo, hi)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Non-linear regression")
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if pygame.key.get_pressed()[pygame.K_ESCAPE]:
                running = False
            if not running:
                break

            screen = pygame.display.get_surface()
            screen.fill(_BLACK)
            _plot(screen, points, _RED)

            if frames > _REPORT_EVERY:
                print(f"\nloss: {loss_func(para, data):.6f}", end="", flush=True)
                frames = 0
            frames += 1

            curve = sample_curve(para, lo, hi)
            para = batch_gradient_descent_step(para, data)
            _plot(screen, curve, _GREEN)
            pygame.display.flip()
    finally:
        pygame.quit()
    return para


def main(argv=None):
    """Fit the model to a data file while showing the fit; print the final parameters."""
    parser = argparse.ArgumentParser(
        prog="nlregress",
        description="Fit a non-linear model to data points by gradient descent.",
    )
    parser.add_argument("data", nargs="?", default="data.txt", help="file of x,y lines")
    parser.add_argument("--size", type=int, default=SIZE, help="number of points to read")
    args = parser.parse_args(argv)

    if args.size < 1:
        parser.error("--size must be positive")
    try:
        data = load_data_from_file(args.data, args.size)
    except OSError as exc:
        print(f"Could not open data file: {args.data} ({exc})", file=sys.stderr)
        return 1

    try:
        para = _run(data, initial_parameters())
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"\nFinal parameters:\n{format_parameters(para)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())