import pygame

# pygame key constants -> lowercased key names the game polls.
# Arrows use the browser-style names so bindings read the same everywhere.
KEY_NAMES = {
    pygame.K_w: 'w',
    pygame.K_s: 's',
    pygame.K_UP: 'arrowup',
    pygame.K_DOWN: 'arrowdown',
    pygame.K_LEFT: 'arrowleft',
    pygame.K_RIGHT: 'arrowright',
    pygame.K_ESCAPE: 'escape',
    pygame.K_SPACE: ' ',
}


def key_name(key):
    if key in KEY_NAMES:
        return KEY_NAMES[key]
    return pygame.key.name(key).lower()


class InputState:
    """
    Sampled input. Held keys are polled by the game every tick,
    the mouse fields just mirror the last pointer event.
    """
    def __init__(self):
        self.keys = {}
        self.mouse_x = 0
        self.mouse_y = 0
        self.clicked = False

    def press(self, name):
        self.keys[name.lower()] = True

    def release(self, name):
        self.keys[name.lower()] = False

    def is_held(self, name):
        return self.keys.get(name, False)

    def move_mouse(self, x, y):
        self.mouse_x = x
        self.mouse_y = y


class PongController:
    """
    Base class for anything that feeds input into a PongGame.
    """
    def __init__(self, game):
        self.game = game

    def handle_event(self, event):
        """
        Process a single host event (key, mouse).
        """
        pass

    def update(self):
        """
        Called every frame before the game updates.
        """
        pass


class HumanController(PongController):
    """
    Keyboard + mouse. Key events only flip held flags, the game reads them on its own tick.
    Left clicks are hit-tested by the game right away.
    """
    def handle_event(self, event):
        state = self.game.input

        if event.type == pygame.KEYDOWN:
            state.press(key_name(event.key))
        elif event.type == pygame.KEYUP:
            state.release(key_name(event.key))
        elif event.type == pygame.MOUSEMOTION:
            state.move_mouse(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:
                return
            x, y = event.pos
            state.move_mouse(x, y)
            state.clicked = True
            self.game.handle_click(x, y)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                state.clicked = False
