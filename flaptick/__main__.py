"""flaptick - play in a pygame window.

Controls:
  Space / Left-click  Flap (starts a run from the menu)
  Escape              Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from flaptick.game import FlapLatch, GameConfig, build_engine
from flaptick.ui.constants import FPS, MAX_FRAME_DT, TITLE
from flaptick.ui.renderer import draw_hud, draw_world

logger = logging.getLogger("flaptick")


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="flaptick: flap through the gates")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--width", type=float, default=400.0, help="Viewport width (default: 400)")
    p.add_argument("--height", type=float, default=700.0, help="Viewport height (default: 700)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.debug)

    config = GameConfig(width=args.width, height=args.height)
    engine = build_engine(config, seed=args.seed)
    logger.info("Starting with seed %d", engine.seed)

    pygame.init()
    screen = pygame.display.set_mode((int(config.width), int(config.height)))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 20, bold=True)
    latch = FlapLatch()

    running = True
    while running:
        dt = min(clock.tick(args.fps) / 1000.0, MAX_FRAME_DT)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        keys = pygame.key.get_pressed()
        pressed = keys[pygame.K_SPACE] or pygame.mouse.get_pressed()[0]
        engine.step(dt, flap=latch.update(bool(pressed)))

        draw_world(screen, engine.world, config)
        draw_hud(screen, font, engine.mode, config)
        pygame.display.flip()

    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
