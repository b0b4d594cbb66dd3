"""Window and color constants for the pygame front-end."""

# Timing
FPS = 60
MAX_FRAME_DT = 0.25  # seconds; longer stalls (window drag) are clamped

TITLE = "Flappy Bird"

# Colors
BG_COLOR = (78, 192, 202)
TEXT_COLOR = (255, 255, 255)
TEXT_SHADOW = (40, 40, 40)

# Texture key -> flat color stand-in
TEXTURE_COLORS: dict[str, tuple[int, int, int]] = {
    "bg.png": (112, 197, 206),
    "floor.png": (222, 216, 149),
    "pipe.png": (84, 176, 56),
}
GROUND_EDGE = (96, 160, 40)

# Avatar frames cycle through these body colors to suggest wing beats
AVATAR_FRAME_COLORS = [
    (250, 200, 40),
    (245, 180, 30),
    (240, 160, 20),
    (245, 180, 30),
]
AVATAR_EYE = (255, 255, 255)
