import logging

import pygame


log = logging.getLogger(__name__)

WIDTH = 640
HEIGHT = 480

PLAYER_SIZE = 30
PLAYER_SPEED = 5

BULLET_WIDTH = 4
BULLET_HEIGHT = 10
BULLET_SPEED = 7

ASTEROID_MIN_SIZE = 20
ASTEROID_MAX_SIZE = 50  # exclusive
ASTEROID_SPEED = 7
SPAWN_INTERVAL = 60  # ticks

DODGE_POINTS = 1
HIT_POINTS = 5


def rects_overlap(x1, y1, w1, h1, x2, y2, w2, h2):
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


def new_player():
    return {
        "pos": pygame.Vector2(WIDTH / 2 - PLAYER_SIZE / 2, HEIGHT - 40),
        "width": PLAYER_SIZE,
        "height": PLAYER_SIZE,
    }


def new_game():
    return reset_game({})


def reset_game(state):
    """Put every field of ``state`` back to its starting value and return it."""
    state["player"] = new_player()
    state["bullets"] = []
    state["asteroids"] = []
    state["score"] = 0
    state["spawn_timer"] = 0
    state["game_over"] = False
    return state


def no_controls():
    return {
        "left": False,
        "right": False,
        "up": False,
        "down": False,
        "fire": False,
        "restart": False,
    }


def spawn_bullet(player):
    return {
        "pos": pygame.Vector2(player["pos"].x + player["width"] / 2 - BULLET_WIDTH / 2, player["pos"].y),
        "active": True,
    }


def spawn_asteroid(rng):
    size = rng.randint(ASTEROID_MIN_SIZE, ASTEROID_MAX_SIZE - 1)
    x = rng.randint(0, WIDTH - size - 1)
    return {
        "pos": pygame.Vector2(x, -size),
        "size": size,
        "active": True,
    }


def move_player(player, controls):
    pos = player["pos"]
    max_x = WIDTH - player["width"]
    max_y = HEIGHT - player["height"]
    if controls["left"] and pos.x > 0:
        pos.x -= PLAYER_SPEED
    if controls["right"] and pos.x < max_x:
        pos.x += PLAYER_SPEED
    if controls["up"] and pos.y > 0:
        pos.y -= PLAYER_SPEED
    if controls["down"] and pos.y < max_y:
        pos.y += PLAYER_SPEED
    pos.x = max(0, min(max_x, pos.x))
    pos.y = max(0, min(max_y, pos.y))


def advance_bullets(bullets):
    for bullet in bullets:
        if not bullet["active"]:
            continue
        bullet["pos"].y -= BULLET_SPEED
        if bullet["pos"].y < 0:
            bullet["active"] = False


def advance_asteroids(asteroids):
    """Move asteroids down and return the points earned for the ones dodged."""
    points = 0
    for asteroid in asteroids:
        if not asteroid["active"]:
            continue
        asteroid["pos"].y += ASTEROID_SPEED
        if asteroid["pos"].y > HEIGHT:
            asteroid["active"] = False
            points += DODGE_POINTS
    return points


def bullet_hits_asteroid(bullet, asteroid):
    size = asteroid["size"]
    return rects_overlap(
        bullet["pos"].x, bullet["pos"].y, BULLET_WIDTH, BULLET_HEIGHT,
        asteroid["pos"].x, asteroid["pos"].y, size, size,
    )


def player_hits_asteroid(player, asteroid):
    size = asteroid["size"]
    return rects_overlap(
        player["pos"].x, player["pos"].y, player["width"], player["height"],
        asteroid["pos"].x, asteroid["pos"].y, size, size,
    )


def resolve_bullet_hits(bullets, asteroids):
    points = 0
    for bullet in bullets:
        if not bullet["active"]:
            continue
        for asteroid in asteroids:
            if not asteroid["active"]:
                continue
            if bullet_hits_asteroid(bullet, asteroid):
                bullet["active"] = False
                asteroid["active"] = False
                points += HIT_POINTS
                log.debug("asteroid destroyed at (%.0f, %.0f)", asteroid["pos"].x, asteroid["pos"].y)
                # a spent bullet cannot score twice in the same tick
                break
    return points


def cleanup(state):
    state["bullets"] = [b for b in state["bullets"] if b["active"]]
    state["asteroids"] = [a for a in state["asteroids"] if a["active"]]


def tick(state, controls, rng):
    """Advance ``state`` by one frame.

    ``controls`` is the input snapshot for this frame (see ``no_controls``);
    ``fire`` and ``restart`` must already be edge-triggered. ``rng`` only needs
    ``randint``. The state is mutated in place and returned.
    """
    if state["game_over"]:
        if controls["restart"]:
            log.info("restarting")
            reset_game(state)
        return state

    player = state["player"]
    move_player(player, controls)

    if controls["fire"]:
        state["bullets"].append(spawn_bullet(player))

    advance_bullets(state["bullets"])

    state["spawn_timer"] += 1
    if state["spawn_timer"] >= SPAWN_INTERVAL:
        state["spawn_timer"] = 0
        asteroid = spawn_asteroid(rng)
        state["asteroids"].append(asteroid)
        log.debug("spawned asteroid size=%d x=%.0f", asteroid["size"], asteroid["pos"].x)

    state["score"] += advance_asteroids(state["asteroids"])
    state["score"] += resolve_bullet_hits(state["bullets"], state["asteroids"])

    for asteroid in state["asteroids"]:
        if asteroid["active"] and player_hits_asteroid(player, asteroid):
            state["game_over"] = True
            log.info("game over, score %d", state["score"])
            break

    cleanup(state)
    return state
