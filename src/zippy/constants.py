"""
constants.py: Centralized configuration for the game world and client.
"""

# -------- Reference Viewport --------
# All sizes below are expressed at this resolution and scaled at runtime.
BASE_WIDTH = 360
BASE_HEIGHT = 640

# -------- Physics Config (pixels / tick) --------
GRAVITY = 0.55                  # Added to velocity every running tick
FLAP_SPEED = -8.0               # Velocity after a flap (negative = up)

# -------- Bird Config --------
BIRD_SIZE = 50
BIRD_START_X = 60
BIRD_START_Y = 240

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_GAP = 200
PIPE_SPEED = 2                  # Horizontal speed (pixels/tick)
PIPE_SPAWN_INTERVAL_MS = 1500   # Spawn attempt every 1.5 seconds
MIN_PIPE_DISTANCE = 200         # Last pipe must be this far from the right edge
MIN_PIPE_HEIGHT = 60            # Clearance above and below the gap

# -------- World Config --------
GROUND_HEIGHT = 100

# -------- Pause Config --------
PAUSE_COUNTDOWN_STEPS = 3       # 0 disables the resume countdown
PAUSE_COUNTDOWN_STEP_SECONDS = 1.0

# -------- Persistence Config --------
DB_FILE = "zippy_scores.db"
HIGH_SCORE_KEY = "highScore"

# -------- Client Config --------
RENDER_FPS = 60
WINDOW_TITLE = "Zippy Bird"
ASSET_DIR = "assets"
IMAGE_FILES = {
    "bird": "bird.png",
    "pipe": "pipe.png",
    "background": "background.png",
    "ground": "ground.png",
}
SOUND_FILES = {
    "jump": "jump.wav",
    "game_over": "game-over.wav",
    "score": "score.wav",
}
FONT_FILE = "PressStart2P-Regular.ttf"
