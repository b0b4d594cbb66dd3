"""Draw the world from component state.

World coordinates have their origin at the viewport centre with y up; the
screen has its origin at the top-left with y down.
"""
from __future__ import annotations

import math

import pygame

from flaptick.core import GameMode, World
from flaptick.game import AnimationFrames, Avatar, GameConfig, Scrolling, Sprite
from flaptick.physics import AABBCollider, Transform
from flaptick.ui.constants import (
    AVATAR_EYE,
    AVATAR_FRAME_COLORS,
    BG_COLOR,
    GROUND_EDGE,
    TEXT_COLOR,
    TEXT_SHADOW,
    TEXTURE_COLORS,
)


def world_to_screen(pos: tuple[float, ...], config: GameConfig) -> tuple[int, int]:
    return round(pos[0] + config.half_width), round(config.half_height - pos[1])


def _sprite_size(world: World, eid: int, config: GameConfig) -> tuple[float, float]:
    if world.has(eid, AABBCollider):
        hx, hy = world.get(eid, AABBCollider).half_extents
        return hx * 2, hy * 2
    if world.has(eid, Scrolling):
        scrolling = world.get(eid, Scrolling)
        if scrolling.layer == "ground":
            return scrolling.segment_width, config.floor_height
        return scrolling.segment_width, config.height
    return 0.0, 0.0


def _draw_avatar(
    surface: pygame.Surface, world: World, eid: int, transform: Transform, config: GameConfig
) -> None:
    w, h = _sprite_size(world, eid, config)
    frame = world.get(eid, AnimationFrames).index if world.has(eid, AnimationFrames) else 0
    body = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
    color = AVATAR_FRAME_COLORS[frame % len(AVATAR_FRAME_COLORS)]
    pygame.draw.ellipse(body, color, body.get_rect())
    pygame.draw.circle(body, AVATAR_EYE, (int(w * 0.7), int(h * 0.35)), max(2, int(w * 0.12)))
    rotated = pygame.transform.rotate(body, math.degrees(transform.rotation))
    rect = rotated.get_rect(center=world_to_screen(transform.position, config))
    surface.blit(rotated, rect)


def draw_world(surface: pygame.Surface, world: World, config: GameConfig) -> None:
    """Draw every Sprite entity in ascending z order."""
    surface.fill(BG_COLOR)
    drawables = sorted(
        world.query(Sprite, Transform), key=lambda item: item[1][0].z
    )
    for eid, (sprite, transform) in drawables:
        if world.has(eid, Avatar):
            _draw_avatar(surface, world, eid, transform, config)
            continue
        w, h = _sprite_size(world, eid, config)
        x, y = world_to_screen(transform.position, config)
        if sprite.anchor == "center":
            x, y = x - round(w / 2), y - round(h / 2)
        rect = pygame.Rect(x, y, round(w), round(h))
        pygame.draw.rect(surface, TEXTURE_COLORS.get(sprite.texture, (255, 0, 255)), rect)
        if sprite.texture == "floor.png":
            pygame.draw.line(surface, GROUND_EDGE, rect.topleft, rect.topright, 4)


def draw_hud(
    surface: pygame.Surface, font: pygame.font.Font, mode: GameMode, config: GameConfig
) -> None:
    if mode is not GameMode.MENU:
        return
    text = "Press Space to flap"
    shadow = font.render(text, True, TEXT_SHADOW)
    label = font.render(text, True, TEXT_COLOR)
    rect = label.get_rect(center=(round(config.half_width), round(config.height * 0.3)))
    surface.blit(shadow, rect.move(2, 2))
    surface.blit(label, rect)
