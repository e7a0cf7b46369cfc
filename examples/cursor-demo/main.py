"""Cursor Demo - scripted cursor tour over a row of buttons.

Exercises tick-cursor: waypoint timeline, click windows, hover onset
tracking and the parallax camera.

Controls:
  Space   Pause / resume
  R       Restart from frame 0
  P       Toggle parallax follow
  Esc     Quit

Usage:
  python main.py [script.json]
"""
from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import pygame

from tick_cursor import (
    ElementRect,
    ElementRef,
    FrameContext,
    FrameResult,
    LiveGeometry,
    ParallaxConfig,
    RenderSession,
    Viewport,
    cursor_scale,
    load_mouse_config,
)

FPS = 30
SCREEN_W = 960
SCREEN_H = 540
BG_COLOR = (20, 20, 30)
GRID_COLOR = (35, 35, 50)
BUTTON_COLOR = (60, 60, 90)
HOVER_COLOR = (80, 130, 220)
TEXT_COLOR = (200, 200, 210)
CURSOR_COLOR = (250, 250, 250)

BUTTONS = {
    "open": pygame.Rect(140, 220, 160, 60),
    "render": pygame.Rect(400, 220, 160, 60),
    "export": pygame.Rect(660, 220, 160, 60),
}

SCRIPT = Path(__file__).with_name("tour.json")

logger = logging.getLogger("cursor_demo")


class DemoState:
    """Holds the session and the hover events log."""

    def __init__(self, script: Path) -> None:
        mouse = load_mouse_config(script)
        # The demo window is smaller than the render viewport the script targets.
        mouse = replace(mouse, viewport=Viewport(SCREEN_W, SCREEN_H))

        self.geometry = LiveGeometry()
        for name, rect in BUTTONS.items():
            self.geometry.set(name, _to_element_rect(rect))

        self.mouse = mouse
        self.parallax = ParallaxConfig(parallax_strength=0.03)
        self.session = self._build_session(start_frame=0)

        self.last: FrameResult | None = None
        self.events: list[str] = []
        self.paused = False

    def _on_enter(self, element: ElementRef, frame: int) -> None:
        self.events.append(f"{frame:4d} enter {element.element_id}")
        logger.info("enter %s at %d", element.element_id, frame)

    def _on_leave(self, element: ElementRef, frame: int) -> None:
        self.events.append(f"{frame:4d} leave {element.element_id}")

    def _remember(self, result: FrameResult, ctx: FrameContext) -> None:
        self.last = result

    def restart(self) -> None:
        self.session.close()
        self.events.clear()

    def toggle_follow(self) -> None:
        follow = not self.session.camera.config.follow
        self.parallax = replace(self.parallax, follow=follow)
        self.session.set_parallax(self.parallax)

    def _build_session(self, start_frame: int) -> RenderSession:
        session = RenderSession(
            self.mouse,
            parallax=self.parallax,
            geometry=self.geometry,
            fps=FPS,
            start_frame=start_frame,
            cache_size=256,
        )
        for name in BUTTONS:
            session.track(ElementRef(name), on_enter=self._on_enter, on_leave=self._on_leave)
        session.add_stage(self._remember)
        return session


def _to_element_rect(rect: pygame.Rect) -> ElementRect:
    return ElementRect.from_size(rect.x, rect.y, rect.width, rect.height)


def draw(screen: pygame.Surface, font: pygame.font.Font, state: DemoState) -> None:
    result = state.last
    if result is None:
        return
    dx, dy = result.camera.translate_x, result.camera.translate_y

    screen.fill(BG_COLOR)
    for x in range(-40, SCREEN_W + 40, 40):
        pygame.draw.line(screen, GRID_COLOR, (x + dx, 0), (x + dx, SCREEN_H))
    for y in range(-40, SCREEN_H + 40, 40):
        pygame.draw.line(screen, GRID_COLOR, (0, y + dy), (SCREEN_W, y + dy))

    for name, rect in BUTTONS.items():
        hover = result.hovers[name]
        color = HOVER_COLOR if hover.is_hovered else BUTTON_COLOR
        pygame.draw.rect(screen, color, rect, border_radius=8)
        label = font.render(name, True, TEXT_COLOR)
        screen.blit(label, label.get_rect(center=rect.center))
        held = hover.hover_frames(result.frame)
        if held is not None:
            timer = font.render(f"{held}f", True, TEXT_COLOR)
            screen.blit(timer, (rect.x, rect.bottom + 6))

    size = 14 * cursor_scale(result.mouse)
    x, y = result.mouse.x, result.mouse.y
    pygame.draw.polygon(
        screen,
        CURSOR_COLOR,
        [(x, y), (x, y + size * 1.4), (x + size * 0.4, y + size), (x + size, y + size)],
    )

    status = f"frame {result.frame}  follow={'on' if state.parallax.follow else 'off'}"
    screen.blit(font.render(status, True, TEXT_COLOR), (10, SCREEN_H - 24))
    for i, line in enumerate(state.events[-6:]):
        screen.blit(font.render(line, True, TEXT_COLOR), (10, 10 + i * 16))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    script = Path(sys.argv[1]) if len(sys.argv) > 1 else SCRIPT

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Cursor Demo - tick-cursor")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState(script)
    running = True

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.paused = not state.paused
                elif event.key == pygame.K_r:
                    state.restart()
                elif event.key == pygame.K_p:
                    state.toggle_follow()

        if not state.paused:
            state.session.step()

        draw(screen, font, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
