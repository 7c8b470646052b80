import pygame
import random
from enum import Enum
from pong_data import *
from pong_controller import InputState, HumanController


def _debug(msg):
    if DEBUG:
        print(f"DEBUG: {msg}")


class GameState(Enum):
    MAIN_MENU = 0
    PLAYING = 1
    GAME_OVER = 2


# --- GAME OBJECTS ---
class Paddle:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.width = PADDLE_WIDTH
        self.height = PADDLE_HEIGHT
        self.speed = PADDLE_SPEED

    def move_up(self):
        # The last step is clipped so y lands on 0, never below
        if self.y > 0:
            self.y = max(0, self.y - self.speed)

    def move_down(self):
        if self.y + self.height < SCREEN_HEIGHT:
            self.y = min(SCREEN_HEIGHT - self.height, self.y + self.speed)

    def draw(self, canvas):
        canvas.fill_rect((self.x, self.y, self.width, self.height), WHITE)


class Ball:
    def __init__(self, rng=None):
        self.rng = rng or random
        self.width = BALL_SIZE
        self.height = BALL_SIZE
        self.reset()

    def reset(self):
        """Recenter and pick a random diagonal. Each axis gets its own coin flip."""
        self.x = SCREEN_WIDTH / 2
        self.y = SCREEN_HEIGHT / 2
        self.speed_x = BALL_SPEED * (1 if self.rng.random() > 0.5 else -1)
        self.speed_y = BALL_SPEED * (1 if self.rng.random() > 0.5 else -1)

    def update(self):
        self.x += self.speed_x
        self.y += self.speed_y

        # Bounce off top and bottom (no position correction)
        if self.y <= 0 or self.y + self.height >= SCREEN_HEIGHT:
            self.speed_y = -self.speed_y

    def collides_with(self, paddle):
        """Strict AABB overlap. Touching edges is not a hit."""
        return (self.x < paddle.x + paddle.width and
                self.x + self.width > paddle.x and
                self.y < paddle.y + paddle.height and
                self.y + self.height > paddle.y)

    def draw(self, canvas):
        canvas.fill_rect((self.x, self.y, self.width, self.height), WHITE)


# --- EFFECT PARTICLES ---
class Particle:
    """Explosion spark. Falls under gravity and fades out over PARTICLE_LIFE ticks."""
    def __init__(self, x, y, color, rng=None):
        rng = rng or random
        self.x = x
        self.y = y
        self.color = color
        self.vx = (rng.random() - 0.5) * PARTICLE_SPREAD
        self.vy = (rng.random() - 0.5) * PARTICLE_SPREAD
        self.life = PARTICLE_LIFE
        self.max_life = PARTICLE_LIFE
        self.size = rng.random() * PARTICLE_SIZE_RANGE + PARTICLE_MIN_SIZE

    @property
    def alive(self):
        return self.life > 0

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.vy += PARTICLE_GRAVITY
        self.life -= 1

    def draw(self, canvas):
        alpha = self.life / self.max_life
        canvas.circle(self.x, self.y, self.size * alpha, self.color, alpha)


class ParticleSystem:
    """Owns the live particles. advance() steps them and drops the expired ones."""
    def __init__(self, rng=None):
        self.rng = rng or random
        self.particles = []

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def add(self, particle):
        self.particles.append(particle)

    def spawn_burst(self, x, y, count=EXPLOSION_COUNT, colors=EXPLOSION_COLORS):
        for _ in range(count):
            self.add(Particle(x, y, self.rng.choice(colors), rng=self.rng))

    def advance(self):
        alive = []
        for p in self.particles:
            p.update()
            if p.alive:
                alive.append(p)
        self.particles = alive
        return alive

    def clear(self):
        self.particles = []

    def draw(self, canvas):
        for p in self.particles:
            p.draw(canvas)


# --- UI ---
class Button:
    def __init__(self, rect, label, size=24, outlined=True, label_offset=30):
        self.rect = rect
        self.label = label
        self.size = size
        self.outlined = outlined
        self.label_offset = label_offset

    def contains(self, x, y):
        bx, by, bw, bh = self.rect
        return bx < x < bx + bw and by < y < by + bh

    def draw(self, canvas):
        bx, by, bw, bh = self.rect
        if self.outlined:
            canvas.stroke_rect(self.rect, WHITE)
        canvas.text(self.label, bx + bw / 2, by + self.label_offset, self.size, WHITE)


START_BTN = Button(START_BUTTON, 'START GAME')
SCORE_DOWN_BTN = Button(SCORE_LEFT_ARROW, '<', size=32, outlined=False, label_offset=20)
SCORE_UP_BTN = Button(SCORE_RIGHT_ARROW, '>', size=32, outlined=False, label_offset=20)
PLAY_AGAIN_BTN = Button(PLAY_AGAIN_BUTTON, 'PLAY AGAIN')
MENU_BTN = Button(MAIN_MENU_BUTTON, 'MAIN MENU')


class PongGame:
    def __init__(self, input_state=None, rng=None, score_options=SCORE_OPTIONS,
                 score_index=DEFAULT_SCORE_INDEX):
        if not score_options:
            raise ValueError("score_options must not be empty")
        if not 0 <= score_index < len(score_options):
            raise ValueError(f"score_index {score_index} out of range")

        self.rng = rng or random
        self.input = input_state or InputState()
        self.state = GameState.MAIN_MENU

        # Match settings
        self.score_options = list(score_options)
        self.selected_score_index = score_index

        self.left_score = 0
        self.right_score = 0
        self.winner = ''

        self.left_paddle = Paddle(LEFT_PADDLE_X, PADDLE_START_Y)
        self.right_paddle = Paddle(RIGHT_PADDLE_X, PADDLE_START_Y)
        self.ball = Ball(rng=self.rng)
        self.particles = ParticleSystem(rng=self.rng)

    @property
    def win_score(self):
        return self.score_options[self.selected_score_index]

    def cycle_score_option(self, direction):
        """direction: -1 for the left arrow, 1 for the right arrow. Wraps around."""
        self.selected_score_index = (self.selected_score_index + direction) % len(self.score_options)
        _debug(f"Win target -> {self.win_score}")

    def start_game(self):
        self.state = GameState.PLAYING
        self.left_score = 0
        self.right_score = 0
        self.winner = ''
        self.particles.clear()
        self.ball.reset()
        _debug(f"New game, first to {self.win_score}")

    def handle_click(self, x, y):
        if self.state == GameState.MAIN_MENU:
            if START_BTN.contains(x, y):
                self.start_game()
            if SCORE_DOWN_BTN.contains(x, y):
                self.cycle_score_option(-1)
            if SCORE_UP_BTN.contains(x, y):
                self.cycle_score_option(1)
        elif self.state == GameState.GAME_OVER:
            if PLAY_AGAIN_BTN.contains(x, y):
                self.start_game()
            # Scores stay on record until the next start_game()
            if MENU_BTN.contains(x, y):
                self.state = GameState.MAIN_MENU

    def update(self):
        if self.state == GameState.PLAYING:
            self.update_game()

        # Particles keep running in every state
        self.particles.advance()

    def update_game(self):
        # Input (both directions may apply in the same tick)
        if self.input.is_held(LEFT_UP_KEY): self.left_paddle.move_up()
        if self.input.is_held(LEFT_DOWN_KEY): self.left_paddle.move_down()
        if self.input.is_held(RIGHT_UP_KEY): self.right_paddle.move_up()
        if self.input.is_held(RIGHT_DOWN_KEY): self.right_paddle.move_down()

        self.ball.update()

        # Flip on any paddle hit. No cooldown, so a ball still inside the box
        # next tick flips again.
        if self.ball.collides_with(self.left_paddle) or self.ball.collides_with(self.right_paddle):
            self.ball.speed_x = -self.ball.speed_x

        # Scoring
        if self.ball.x < 0:
            self.right_score += 1
            self._on_score()
        elif self.ball.x > SCREEN_WIDTH:
            self.left_score += 1
            self._on_score()

    def _on_score(self):
        _debug(f"Score {self.left_score} - {self.right_score}")
        self.create_explosion(self.ball.x, self.ball.y)
        self.check_win_condition()
        # A winning point leaves the ball where it went out
        if self.state == GameState.PLAYING:
            self.ball.reset()

    def create_explosion(self, x, y):
        self.particles.spawn_burst(x, y, EXPLOSION_COUNT, EXPLOSION_COLORS)

    def check_win_condition(self):
        if self.left_score >= self.win_score:
            self.winner = LEFT_WINS_TEXT
            self.state = GameState.GAME_OVER
        elif self.right_score >= self.win_score:
            self.winner = RIGHT_WINS_TEXT
            self.state = GameState.GAME_OVER

        if self.state == GameState.GAME_OVER:
            _debug(self.winner)

    def draw(self, canvas):
        canvas.clear(BLACK)

        if self.state == GameState.MAIN_MENU:
            draw_main_menu(canvas, self)
        elif self.state == GameState.PLAYING:
            draw_game(canvas, self)
        elif self.state == GameState.GAME_OVER:
            draw_game_over(canvas, self)
        else:
            raise ValueError(f"Unknown game state: {self.state}")


# --- CANVAS ---
class Canvas:
    """
    Drawing capability the game renders against.
    The base class draws nothing, which is enough to run the game headless.
    """
    def clear(self, color):
        pass

    def fill_rect(self, rect, color):
        pass

    def stroke_rect(self, rect, color):
        pass

    def dashed_vline(self, x, y0, y1, color, dash=10, gap=10):
        pass

    def text(self, text, x, y, size, color):
        """Draw text horizontally centered on x with its baseline at y."""
        pass

    def circle(self, x, y, radius, color, alpha=1.0):
        pass


class PygameCanvas(Canvas):
    def __init__(self, surface):
        self.surface = surface
        if not pygame.font.get_init():
            pygame.font.init()
        self.fonts = {}

    def _font(self, size):
        if size not in self.fonts:
            self.fonts[size] = pygame.font.SysFont(FONT_NAME, size)
        return self.fonts[size]

    def clear(self, color):
        self.surface.fill(color)

    def fill_rect(self, rect, color):
        pygame.draw.rect(self.surface, color, pygame.Rect(rect))

    def stroke_rect(self, rect, color):
        pygame.draw.rect(self.surface, color, pygame.Rect(rect), 1)

    def dashed_vline(self, x, y0, y1, color, dash=10, gap=10):
        y = y0
        while y < y1:
            pygame.draw.line(self.surface, color, (x, y), (x, min(y + dash, y1)))
            y += dash + gap

    def text(self, text, x, y, size, color):
        if not text: return
        surf = self._font(size).render(text, True, color)
        rect = surf.get_rect(midbottom=(int(x), int(y)))
        self.surface.blit(surf, rect)

    def circle(self, x, y, radius, color, alpha=1.0):
        r = int(radius)
        if r < 1: r = 1
        s = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
        pygame.draw.circle(s, (*color, int(255 * alpha)), (r, r), r)
        self.surface.blit(s, (int(x - r), int(y - r)))


# --- RENDERER ---
def draw_main_menu(canvas, game):
    canvas.text('EPIC PONG', SCREEN_WIDTH / 2, 100, 48, WHITE)

    # Win target selector
    canvas.text('First to Win:', SCREEN_WIDTH / 2, 160, 24, WHITE)
    canvas.text(str(game.win_score), SCREEN_WIDTH / 2, 200, 32, YELLOW)
    SCORE_DOWN_BTN.draw(canvas)
    SCORE_UP_BTN.draw(canvas)

    START_BTN.draw(canvas)


def draw_game(canvas, game):
    canvas.dashed_vline(SCREEN_WIDTH / 2, 0, SCREEN_HEIGHT, WHITE, 10, 10)

    game.left_paddle.draw(canvas)
    game.right_paddle.draw(canvas)
    game.ball.draw(canvas)

    canvas.text(str(game.left_score), SCREEN_WIDTH / 4, 80, 48, WHITE)
    canvas.text(str(game.right_score), 3 * SCREEN_WIDTH / 4, 80, 48, WHITE)
    canvas.text(f'First to {game.win_score}', SCREEN_WIDTH / 2, 30, 16, GRAY)

    game.particles.draw(canvas)


def draw_game_over(canvas, game):
    canvas.text(game.winner, SCREEN_WIDTH / 2, 200, 36, YELLOW)
    canvas.text(f'Final Score: {game.left_score} - {game.right_score}', SCREEN_WIDTH / 2, 250, 24, WHITE)

    PLAY_AGAIN_BTN.draw(canvas)
    MENU_BTN.draw(canvas)


def main():
    pygame.init()

    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(CAPTION)
    clock = pygame.time.Clock()

    game = PongGame()
    controller = HumanController(game)
    canvas = PygameCanvas(screen)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                controller.handle_event(event)

        controller.update()
        game.update()
        game.draw(canvas)

        pygame.display.flip()
        clock.tick(FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
