import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import command_for_key, dispatch
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import ShapeRandom

logger = logging.getLogger(__name__)

TICK = pygame.USEREVENT + 1
EXPOSE_EVENTS = (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED)


def _positive_int(value):
    n = int(value)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling-block puzzle game")
    parser.add_argument(
        "--tick-ms",
        type=_positive_int,
        default=CONFIG["TICK_MS"],
        help="Milliseconds between gravity ticks"
    )
    parser.add_argument(
        "--cell-size",
        type=_positive_int,
        default=CONFIG["CELL_SIZE"],
        help="Pixel size of one grid cell"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=CONFIG["SEED"],
        help="Seed for the shape randomizer (random if omitted)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=CONFIG["LOG_LEVEL"],
        help="Logging verbosity"
    )
    args = parser.parse_args(argv)
    CONFIG["TICK_MS"] = args.tick_ms
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["SEED"] = args.seed
    CONFIG["LOG_LEVEL"] = args.log_level
    return args


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, CONFIG["LOG_LEVEL"]),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def handle_event(game, e) -> bool:
    """Apply one queued event to the game; True if the window needs a redraw."""
    if e.type == TICK:
        game.tick()
        return True
    if e.type == pygame.KEYDOWN:
        cmd = command_for_key(e.key)
        if cmd is None:
            return False
        dispatch(game, cmd)
        return True
    return e.type in EXPOSE_EVENTS


def main(argv=None):
    parse_args(argv)
    setup_logging()

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK, *EXPOSE_EVENTS])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    render = RenderAssets(dims)

    game = Game(ShapeRandom(CONFIG["SEED"]))
    logger.info("starting: tick=%dms seed=%s", CONFIG["TICK_MS"], CONFIG["SEED"])

    # ticks and key presses share this one queue, so the engine sees them one at a time
    pygame.time.set_timer(TICK, CONFIG["TICK_MS"])
    render.draw(screen, game.snapshot())
    pygame.display.flip()

    while True:
        e = pygame.event.wait()
        if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
            pygame.quit(); sys.exit()
        if not handle_event(game, e):
            continue
        render.draw(screen, game.snapshot())
        pygame.display.flip()


if __name__ == '__main__':
    main()
