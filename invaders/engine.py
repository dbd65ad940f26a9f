"""
Simulation engine for Grid Invaders.

``advance`` moves the world forward by one fixed tick.  Each rule is a
small function from ``World`` to ``World`` and ``advance`` chains them in
a fixed order, stopping early when a rule ends the tick.

Player input is applied between ticks through ``apply_intent``.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from invaders.config import (
    ALIEN_FIRE_INTERVAL_NS,
    ALIEN_LEFT_LIMIT,
    ALIEN_RIGHT_LIMIT,
    ALIEN_SHOT_MAX_Y,
    MAX_SHOTS,
    PLAYER_MAX_X,
    PLAYER_SHOT_MIN_Y,
    PLAYER_START_X,
    POINTS_PER_ALIEN,
    TICK_INTERVAL_NS,
)
from invaders.models.wave import spawn_wave
from invaders.models.world import (
    Alien,
    AlienShot,
    Direction,
    GameOverCause,
    Player,
    Shot,
    World,
)
from invaders.utils.functions import elapsed_ns, front_rank, pick_shooter
from invaders.utils.input_handler import Intent


# ── Per-tick update ─────────────────────────────────────────────────────────


def advance(world: World, now: int) -> World:
    """Advance *world* by one tick at monotonic time *now* (ns).

    Terminal worlds are returned unchanged.
    """
    if world.game_over:
        return world

    # 1. Projectiles
    world = move_projectiles(world)

    # 2. Alien shots vs player
    world = resolve_player_hits(world)
    if world.game_over:
        return world

    # 3. Player shots vs aliens
    world = resolve_alien_hits(world)

    # 4. Alien fire
    world = alien_fire(world, now)

    # 5. Level progression
    if not world.aliens:
        return spawn_wave(world)

    # 6. Swarm
    return move_swarm(world)


def move_projectiles(world: World) -> World:
    """Move every shot one cell and drop the ones that left the board."""
    shots = tuple(
        Shot(s.x, s.y - 1) for s in world.shots
        if s.y - 1 > PLAYER_SHOT_MIN_Y
    )
    alien_shots = tuple(
        AlienShot(s.x, s.y + 1) for s in world.alien_shots
        if s.y + 1 < ALIEN_SHOT_MAX_Y
    )
    return world.evolve(shots=shots, alien_shots=alien_shots)


def resolve_player_hits(world: World) -> World:
    """Consume alien shots inside the player box.

    Any number of hits in one tick costs a single life.
    """
    player = world.player
    remaining = tuple(s for s in world.alien_shots if not player.covers(s.x, s.y))
    if len(remaining) == len(world.alien_shots):
        return world

    lives = world.lives - 1
    world = world.evolve(
        alien_shots=remaining,
        lives=lives,
        player=Player(PLAYER_START_X, player.y),
    )
    if lives > 0:
        logger.debug(f"Player hit, {lives} lives left")
        return world

    logger.debug(f"Game over: out of lives, final score {world.score}")
    return world.evolve(game_over=True, cause=GameOverCause.LIVES)


def resolve_alien_hits(world: World) -> World:
    """Match player shots against aliens.

    Shots are checked in order against aliens in order.  A shot kills
    the first live alien it overlaps and is spent; an alien dies at
    most once.  Dead aliens and spent shots are removed after the pass.
    """
    if not world.shots or not world.aliens:
        return world

    aliens_alive = [True] * len(world.aliens)
    shots_kept = [True] * len(world.shots)
    kills = 0

    for i, shot in enumerate(world.shots):
        for j, alien in enumerate(world.aliens):
            if aliens_alive[j] and alien.covers(shot.x, shot.y):
                aliens_alive[j] = False
                shots_kept[i] = False
                kills += 1
                break

    if not kills:
        return world

    return world.evolve(
        aliens=tuple(a for a, alive in zip(world.aliens, aliens_alive) if alive),
        shots=tuple(s for s, kept in zip(world.shots, shots_kept) if kept),
        score=world.score + kills * POINTS_PER_ALIEN,
    )


def alien_fire(world: World, now: int) -> World:
    """Let one front-rank alien fire once the cooldown has expired."""
    if not world.aliens:
        return world
    since = elapsed_ns(now, world.last_alien_shot)
    if since <= ALIEN_FIRE_INTERVAL_NS:
        return world

    candidates = front_rank(world.aliens)
    if not candidates:
        return world

    shooter: Alien = pick_shooter(candidates, since)
    return world.evolve(
        alien_shots=world.alien_shots + (AlienShot(shooter.x + 1, shooter.y + 2),),
        last_alien_shot=now,
    )


def at_boundary(world: World) -> bool:
    """Return True if any alien touches the wall it is heading for."""
    if world.direction is Direction.LEFT:
        return any(a.x == ALIEN_LEFT_LIMIT for a in world.aliens)
    return any(a.x >= ALIEN_RIGHT_LIMIT for a in world.aliens)


def move_swarm(world: World) -> World:
    """Shift the swarm sideways, or drop it a row and reverse at a wall."""
    if not at_boundary(world):
        dx = world.direction.dx
        return world.evolve(
            aliens=tuple(Alien(a.x + dx, a.y) for a in world.aliens),
        )

    aliens = tuple(Alien(a.x, a.y + 1) for a in world.aliens)
    world = world.evolve(aliens=aliens, direction=world.direction.flipped())
    if any(a.y + 1 >= world.player.y for a in aliens):
        logger.debug(f"Game over: invasion, final score {world.score}")
        return world.evolve(game_over=True, cause=GameOverCause.INVASION)
    return world


# ── Player actions ──────────────────────────────────────────────────────────


def move_player(world: World, dx: int) -> World:
    """Move the player horizontally, clamped to the board."""
    if world.game_over:
        return world
    x = min(max(world.player.x + dx, 0), PLAYER_MAX_X)
    if x == world.player.x:
        return world
    return world.evolve(player=Player(x, world.player.y))


def fire(world: World) -> World:
    """Launch a shot from the vessel's centre unless at the fire cap."""
    if world.game_over or len(world.shots) >= MAX_SHOTS:
        return world
    shot = Shot(world.player.x + 1, world.player.y - 1)
    return world.evolve(shots=world.shots + (shot,))


def apply_intent(world: World, intent: Intent) -> World:
    """Apply a player intent.  QUIT and NONE leave the world unchanged."""
    if intent is Intent.MOVE_LEFT:
        return move_player(world, -1)
    if intent is Intent.MOVE_RIGHT:
        return move_player(world, 1)
    if intent is Intent.FIRE:
        return fire(world)
    return world


# ── Driver cadence ──────────────────────────────────────────────────────────


@dataclass
class TickClock:
    """Fixed simulation cadence driven by a monotonic clock.

    ``due`` fires at most once per call.  A late driver skips ticks
    instead of replaying them.
    """

    last: int = 0
    interval: int = TICK_INTERVAL_NS

    def due(self, now: int) -> bool:
        if now - self.last >= self.interval:
            self.last = now
            return True
        return False
