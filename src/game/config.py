# --- Grid (terminal cells) ---
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# --- Host window ---
CELL_PX = 12                # pixels per terminal cell
FPS = 60
SEED_DEFAULT = None         # None -> fresh random gaps every launch

# --- Timing ---
FRAME_DURATION = 50.0       # ms of real time per physics tick

# --- Player ---
PLAYER_START_X = 5
PLAYER_START_Y = 25.0
GRAVITY = 0.2               # velocity gained per tick
TERMINAL_VELOCITY = 2.0
FLAP_VELOCITY = -2.0
FLAP_CYCLE_MAX = 3.9        # animation phase right after a flap
PLAYER_SPRITE_WIDTH = 8
PLAYER_SPRITE_HEIGHT = 8
DRAGON_FRAMES = 4

# --- Obstacles ---
GAP_Y_MIN = 10              # inclusive
GAP_Y_MAX = 40              # exclusive
GAP_SIZE_START = 20
GAP_SIZE_MIN = 8
WALL_SPRITE_WIDTH = 2
WALL_SPRITE_HEIGHT = 2

# --- Layers (consoles) ---
LAYER_TEXT = 0
LAYER_PLAYER = 1
LAYER_WALLS = 2
LAYER_COUNT = 3

# --- Sprite sheets ---
SHEET_DRAGON = "dragon"
SHEET_WALL = "wall"

# --- Colors (RGB) ---
NAVY = (0, 0, 128)
BLACK = (0, 0, 0)
COLOR_FG = (220, 232, 255)
COLOR_DRAGON = (196, 64, 48)
COLOR_DRAGON_BELLY = (240, 180, 90)
COLOR_WING = (150, 40, 36)
COLOR_WALL = (92, 64, 40)
COLOR_WALL_EDGE = (58, 38, 22)
