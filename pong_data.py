# Pong Data & Definitions
# Screen layout, entity tuning, colors and menu hit-boxes shared by the game and controller.

# --- SCREEN ---
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60 # Motion is pixels-per-frame, so this is also the game speed
CAPTION = "EPIC PONG"

# --- ENTITIES ---
PADDLE_WIDTH = 10
PADDLE_HEIGHT = 100
PADDLE_SPEED = 7
LEFT_PADDLE_X = 50
RIGHT_PADDLE_X = SCREEN_WIDTH - 60
PADDLE_START_Y = SCREEN_HEIGHT // 2 - PADDLE_HEIGHT // 2

BALL_SIZE = 20
BALL_SPEED = 5

# --- PARTICLES ---
PARTICLE_LIFE = 10        # ticks
PARTICLE_GRAVITY = 0.2    # added to vy every tick
PARTICLE_SPREAD = 16      # velocity range per axis (centered on 0)
PARTICLE_MIN_SIZE = 3
PARTICLE_SIZE_RANGE = 5
EXPLOSION_COUNT = 8

# Colors (R, G, B)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
ORANGE = (255, 165, 0)
YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
PURPLE = (128, 0, 128)
GRAY = (128, 128, 128)

EXPLOSION_COLORS = [RED, ORANGE, YELLOW, WHITE]

# --- MATCH ---
SCORE_OPTIONS = [3, 5, 7, 11, 15, 21]
DEFAULT_SCORE_INDEX = 1 # 5 points

LEFT_WINS_TEXT = 'LEFT PLAYER WINS!'
RIGHT_WINS_TEXT = 'RIGHT PLAYER WINS!'

# --- BUTTONS ---
# (x, y, w, h). Hit tests are strict, so clicks on the border do not count.
START_BUTTON = (300, 250, 200, 50)
SCORE_LEFT_ARROW = (250, 180, 40, 40)
SCORE_RIGHT_ARROW = (510, 180, 40, 40)
PLAY_AGAIN_BUTTON = (300, 400, 200, 50)
MAIN_MENU_BUTTON = (300, 470, 200, 50)

# --- CONTROLS ---
# Lowercased key names, as the controller reports them
LEFT_UP_KEY = 'w'
LEFT_DOWN_KEY = 's'
RIGHT_UP_KEY = 'arrowup'
RIGHT_DOWN_KEY = 'arrowdown'

# Font
FONT_NAME = 'Arial'

# Prints "DEBUG: ..." lines on state changes and scoring
DEBUG = False
