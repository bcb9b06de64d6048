"""The game window: event polling and frame presentation."""

from __future__ import annotations

import pygame

DEFAULT_SIZE = (1920, 1080)
BACKGROUND = (255, 255, 255)


class Window:
    """A display surface that is cleared, drawn on and presented each frame."""

    def __init__(self, title: str, size: tuple[int, int] = DEFAULT_SIZE) -> None:
        pygame.display.init()
        self._surface = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        self._open = True

    @property
    def surface(self) -> pygame.Surface:
        """The surface everything is drawn onto."""
        return self._surface

    def update(self) -> None:
        """Handle pending window events; a close request closes the window."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()

    def close(self) -> None:
        self._open = False

    def begin_draw(self) -> None:
        """Clear the frame to the background colour."""
        self._surface.fill(BACKGROUND)

    def draw(self, surface: pygame.Surface, position: tuple[float, float]) -> None:
        """Draw an image with its top-left corner at ``position``."""
        x, y = position
        self._surface.blit(surface, (int(x), int(y)))

    def end_draw(self) -> None:
        """Present what has been drawn this frame."""
        if self._open:
            pygame.display.flip()

    def is_open(self) -> bool:
        return self._open

    def center(self) -> tuple[int, int]:
        """Return the middle point of the window."""
        width, height = self._surface.get_size()
        return (width // 2, height // 2)