import argparse
import logging
import random
import time

import pygame

import dodger
from dodger import HEIGHT, WIDTH


log = logging.getLogger(__name__)

FPS = 60
TITLE = "Space Dodger"

COCKPIT_WIDTH = 4
COCKPIT_HEIGHT = 5

COLORS = {
    "bg": (0, 0, 20),
    "ship": (0, 255, 0),
    "cockpit": (255, 255, 0),
    "bullet": (255, 255, 0),
    "asteroid": (150, 75, 0),
    "ui": (255, 255, 255),
}

GAME_OVER_TEXT = "GAME OVER - Press R to restart"


def seed_from_time():
    return int(time.time()) & 0xFFFFFFFF


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Dodge and shoot falling asteroids.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for asteroid sizes and positions (default: current time)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def read_controls(keys, prev_keys):
    """Build the per-tick input snapshot.

    Directions are held-state; fire and restart are edge-triggered against
    ``prev_keys`` so a held key only counts on the frame it went down.
    """

    def pressed(key):
        return bool(keys[key])

    def just_pressed(key):
        return bool(keys[key]) and not prev_keys[key]

    return {
        "left": pressed(pygame.K_LEFT) or pressed(pygame.K_a),
        "right": pressed(pygame.K_RIGHT) or pressed(pygame.K_d),
        "up": pressed(pygame.K_UP) or pressed(pygame.K_w),
        "down": pressed(pygame.K_DOWN) or pressed(pygame.K_s),
        "fire": just_pressed(pygame.K_SPACE),
        "restart": just_pressed(pygame.K_r),
    }


def draw_ship(surface, player):
    pos = player["pos"]
    width = player["width"]
    pygame.draw.rect(surface, COLORS["ship"], pygame.Rect(pos.x, pos.y, width, player["height"]))
    cockpit = pygame.Rect(pos.x + width / 2 - COCKPIT_WIDTH / 2, pos.y - COCKPIT_HEIGHT, COCKPIT_WIDTH, COCKPIT_HEIGHT)
    pygame.draw.rect(surface, COLORS["cockpit"], cockpit)


def draw_frame(surface, state, font):
    surface.fill(COLORS["bg"])

    draw_ship(surface, state["player"])

    for bullet in state["bullets"]:
        if bullet["active"]:
            rect = pygame.Rect(bullet["pos"].x, bullet["pos"].y, dodger.BULLET_WIDTH, dodger.BULLET_HEIGHT)
            pygame.draw.rect(surface, COLORS["bullet"], rect)

    for asteroid in state["asteroids"]:
        if asteroid["active"]:
            size = asteroid["size"]
            pygame.draw.rect(surface, COLORS["asteroid"], pygame.Rect(asteroid["pos"].x, asteroid["pos"].y, size, size))

    text = font.render(f"Score: {state['score']}", True, COLORS["ui"])
    surface.blit(text, (10, 10))

    if state["game_over"]:
        msg = font.render(GAME_OVER_TEXT, True, COLORS["ui"])
        surface.blit(msg, (WIDTH // 2 - msg.get_width() // 2, HEIGHT // 2))


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    seed = args.seed if args.seed is not None else seed_from_time()
    log.info("starting with seed %d", seed)
    rng = random.Random(seed)

    pygame.init()
    try:
        # SCALED keeps the logical 640x480 resolution whatever the window size
        screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.SCALED | pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        font = pygame.font.SysFont("Consolas", 18)

        state = dodger.new_game()
        prev_keys = pygame.key.get_pressed()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            keys = pygame.key.get_pressed()
            if keys[pygame.K_ESCAPE]:
                running = False

            controls = read_controls(keys, prev_keys)
            prev_keys = keys

            dodger.tick(state, controls, rng)
            draw_frame(screen, state, font)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
