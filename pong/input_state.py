"""Held-key tracking fed by pygame keyboard events."""

import pygame

# Browser-style names for the keys the game reads
_SPECIAL_KEYS = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}


def key_name(key: int) -> str:
    """Name for a pygame key code, e.g. K_UP -> 'ArrowUp', K_w -> 'w'."""
    if key in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[key]
    return pygame.key.name(key)


class InputState:
    """Which keys are currently held. Latest event wins."""

    def __init__(self):
        self._held = {}

    def press(self, name: str):
        self._held[name] = True

    def release(self, name: str):
        self._held[name] = False

    def clear(self):
        self._held.clear()

    def is_held(self, name: str, case_sensitive: bool = True) -> bool:
        if case_sensitive:
            return self._held.get(name, False)
        return any(held for key, held in self._held.items() if key.lower() == name.lower())

    def any_held(self, names, case_sensitive: bool = True) -> bool:
        return any(self.is_held(n, case_sensitive) for n in names)

    def handle_event(self, event) -> bool:
        """Apply a KEYDOWN/KEYUP event; returns True if it was a key event."""
        if event.type == pygame.KEYDOWN:
            self.press(key_name(event.key))
            return True
        if event.type == pygame.KEYUP:
            self.release(key_name(event.key))
            return True
        return False
