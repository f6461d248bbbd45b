# config.py
import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# =========================
# Server
# =========================
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", 3000))
SECRET_KEY = os.environ.get("ROY_SECRET_KEY", "change-me-please")  # replace in production
PUBLIC_DIR = os.environ.get("ROY_PUBLIC_DIR", os.path.join(BASE_DIR, "public"))
LOG_LEVEL = os.environ.get("ROY_LOG_LEVEL", "INFO")

# Static assets other than HTML
STATIC_MAX_AGE = 60

# =========================
# Durable counter
# =========================
COUNTER_KEY = "yesClickCount"
COUNTER_LIFETIME_DAYS = 365

# =========================
# Escalation tuning
# =========================
SHRINK_NO_AT = 3
GROW_YES_AT = 5
PRIMARY_CONTROL_ID = "yesBtn"
CLOSE_CONTROL_ID = "closeSuccessBtn"

# =========================
# Celebration tuning
# =========================
PARTICLE_COUNT = 80
GRAVITY = 0.3
OFFSCREEN_MARGIN = 20
MAX_FRAMES = 600
CONFETTI_COLORS = ["#5b9a8b", "#7eb8a8", "#f4c430", "#e8a87c", "#9dc6d8"]
DEFAULT_VIEWPORT = (1280, 720)
MAX_VIEWPORT = 4096

APPROVAL_START = 47
APPROVAL_TARGET = 99
APPROVAL_EASING = 0.15
