"""
constants.py: Centralized configuration for the simulation and its host.
"""

from dataclasses import dataclass

# -------- Time Step Config --------
NOMINAL_STEP_MS = 16.0          # One ~60fps frame; dt is normalized against this
MAX_STEP_FACTOR = 2.0           # Clamp for long pauses (tab switch, debugger)
RENDER_FPS = 60

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GROUND_Y_RATIO = 0.82           # Ground starts at 82% of the play area height
BIRD_X_RATIO = 0.28             # Fixed bird X as a fraction of the width
BIRD_START_RATIO = 0.5          # Bird starts halfway between sky and ground

# -------- Pipe Config --------
PIPE_WIDTH = 64
PIPE_GAP = 160
MIN_GAP_Y = 120                 # Highest the gap may start
GAP_MARGIN = 80                 # Clearance kept above the ground

# -------- Difficulty Config --------
PIPE_SPEED_INITIAL = 3.2        # Pixels per nominal step
SPEED_GAIN_PER_POINT = 0.02
PIPE_SPAWN_INTERVAL = 1800.0    # ms between pipe pairs
MIN_SPAWN_INTERVAL = 1200.0
SPAWN_INTERVAL_DECAY = 25.0     # ms shaved off the interval per point

# -------- Physics Config (pixels / nominal step) --------
GRAVITY = 0.45
FLAP_IMPULSE = -8.2
MAX_FALL_SPEED = 10.0
BIRD_RADIUS = 14                # Circular hitbox

# Rotation is a low-pass filtered function of vertical velocity
TILT_UP = 0.4
TILT_DOWN_MAX = 0.6
TILT_GAIN = 0.08
ROTATION_SMOOTHING = 0.15


@dataclass(frozen=True)
class GameConfig:
    """Every tunable of one simulation instance. Defaults mirror the constants above."""
    nominal_step_ms: float = NOMINAL_STEP_MS
    max_step_factor: float = MAX_STEP_FACTOR

    ground_y_ratio: float = GROUND_Y_RATIO
    bird_x_ratio: float = BIRD_X_RATIO
    bird_start_ratio: float = BIRD_START_RATIO

    pipe_width: float = PIPE_WIDTH
    pipe_gap: float = PIPE_GAP
    min_gap_y: float = MIN_GAP_Y
    gap_margin: float = GAP_MARGIN

    pipe_speed_initial: float = PIPE_SPEED_INITIAL
    speed_gain_per_point: float = SPEED_GAIN_PER_POINT
    spawn_interval: float = PIPE_SPAWN_INTERVAL
    min_spawn_interval: float = MIN_SPAWN_INTERVAL
    spawn_interval_decay: float = SPAWN_INTERVAL_DECAY

    gravity: float = GRAVITY
    flap_impulse: float = FLAP_IMPULSE
    max_fall_speed: float = MAX_FALL_SPEED
    bird_radius: float = BIRD_RADIUS

    tilt_up: float = TILT_UP
    tilt_down_max: float = TILT_DOWN_MAX
    tilt_gain: float = TILT_GAIN
    rotation_smoothing: float = ROTATION_SMOOTHING


DEFAULT_CONFIG = GameConfig()
