"""Simple ``pygame`` window for drawing grid cells and text."""

from __future__ import annotations

import pygame


Colour = tuple[int, int, int]


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int], *, caption: str = "A* Visualization") -> None:
        self.size = size

        if not pygame.get_init(): pygame.init()
        if not pygame.font.get_init(): pygame.font.init()
        if not pygame.display.get_init(): pygame.display.init()

        self._surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption)
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        font = self._fonts.get(key)
        if font is None:
            try:
                font = pygame.font.SysFont("arial", size, bold=bold)
            except pygame.error:
                font = pygame.font.Font(None, size)
            self._fonts[key] = font
        return font

    def draw_rect(self, x: int, y: int, width: int, height: int, colour: Colour, alpha: int = 255) -> None:
        if alpha >= 255:
            pygame.draw.rect(self._surface, colour, pygame.Rect(x, y, width, height))
            return
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((*colour, alpha))
        self._surface.blit(overlay, (x, y))

    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        colour: Colour = (255, 255, 255),
        size: int = 16,
        bold: bool = False,
        anchor: str = "topleft",
    ) -> None:
        text_surf = self._font(size, bold).render(text, True, colour)
        rect = text_surf.get_rect(**{anchor: (x, y)})
        self._surface.blit(text_surf, rect)

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, colour: Colour = (0, 0, 0)) -> None:
        self._surface.fill(colour)


__all__ = ["Window"]
