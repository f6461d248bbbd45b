# celebration.py
"""Confetti simulation, approval meter and annoyance slider.

The renderer never owns a clock. It asks a frame scheduler for the next
frame (the browser's requestAnimationFrame, or SynchronousScheduler here)
and paints onto whatever drawing surface it was given.
"""
import logging
import math
import random

import config
from capabilities import prefers_reduced_motion
from messages import ANNOYANCE_COMMENTARY

logger = logging.getLogger(__name__)

IDLE = "idle"
ANIMATING = "animating"


# =========================
# Particles
# =========================
class Particle:
    def __init__(self, x, y, vx, vy, color, size, rotation, rotation_speed):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.color = color
        self.size = size
        self.rotation = rotation
        self.rotation_speed = rotation_speed

    @classmethod
    def spawn(cls, x, y, rng, colors):
        return cls(
            x=x,
            y=y,
            vx=(rng.random() - 0.5) * 12,
            vy=(rng.random() - 0.5) * 12 - 4,
            color=rng.choice(colors),
            size=rng.random() * 8 + 4,
            rotation=rng.random() * 360,
            rotation_speed=(rng.random() - 0.5) * 10,
        )

    def update(self, gravity):
        self.x += self.vx
        self.y += self.vy
        self.vy += gravity
        self.rotation += self.rotation_speed

    def offscreen(self, width, height, margin):
        return self.y > height + margin or self.x < -margin or self.x > width + margin


# =========================
# Frame scheduler / drawing surface
# =========================
class SynchronousScheduler:
    """Runs requested frames back to back instead of waiting for a display refresh."""

    def __init__(self, max_frames=config.MAX_FRAMES):
        self.max_frames = max_frames
        self.frames_run = 0
        self._pending = {}
        self._next_handle = 1

    def request_frame(self, callback):
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle):
        self._pending.pop(handle, None)

    @property
    def pending(self):
        return len(self._pending)

    def step(self):
        if not self._pending:
            return False
        handle = next(iter(self._pending))
        callback = self._pending.pop(handle)
        self.frames_run += 1
        callback()
        return True

    def run(self):
        while self._pending and self.frames_run < self.max_frames:
            self.step()
        if self._pending:
            logger.warning("Frame cap of %d reached with %d callbacks pending",
                           self.max_frames, len(self._pending))
        return self.frames_run


class RecordingSurface:
    """Records every painted frame so the browser can replay it on a canvas.

    Particle colour and size never change during a flight, so they are kept
    once in `styles`; each frame is a flat list of x, y, rotation triples.
    """

    def __init__(self):
        self.width = 0
        self.height = 0
        self.styles = []
        self.frames = []
        self.cleared = True

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.styles = []
        self.frames = []
        self.cleared = True

    def clear(self):
        self.cleared = True

    def draw(self, particles):
        if not self.styles:
            self.styles = [{"color": p.color, "size": round(p.size, 1)} for p in particles]
        frame = []
        for p in particles:
            frame.extend((round(p.x, 1), round(p.y, 1), round(p.rotation, 1)))
        self.frames.append(frame)
        self.cleared = False

    def to_dict(self):
        return {
            "width": self.width,
            "height": self.height,
            "particles": self.styles,
            "frames": self.frames,
        }


# =========================
# Renderer
# =========================
class CelebrationRenderer:
    def __init__(self, surface=None, scheduler=None, reduced_motion=None, rng=None,
                 viewport=config.DEFAULT_VIEWPORT, particle_count=config.PARTICLE_COUNT,
                 gravity=config.GRAVITY, margin=config.OFFSCREEN_MARGIN,
                 colors=config.CONFETTI_COLORS):
        self.surface = surface
        self.scheduler = scheduler
        self.reduced_motion = reduced_motion
        self.rng = rng or random.Random()
        self.viewport = viewport
        self.particle_count = particle_count
        self.gravity = gravity
        self.margin = margin
        self.colors = colors
        self.state = IDLE
        self.particles = []
        self._frame = None

    @property
    def animating(self):
        return self.state == ANIMATING

    def launch(self):
        """Seed a burst at the viewport centre and start the frame loop.

        Returns False when nothing was launched (reduced motion, or no
        surface/scheduler to draw with).
        """
        if prefers_reduced_motion(self.reduced_motion):
            logger.debug("Reduced motion preferred, skipping confetti")
            return False
        if self.surface is None or self.scheduler is None:
            logger.debug("No drawing surface, skipping confetti")
            return False

        self._cancel_pending()
        width, height = self.viewport
        try:
            self.surface.resize(width, height)
        except Exception as exc:
            logger.debug("Drawing surface unavailable: %s", exc)
            self.state = IDLE
            return False

        self.particles = [
            Particle.spawn(width / 2, height / 2, self.rng, self.colors)
            for _ in range(self.particle_count)
        ]
        self.state = ANIMATING
        self._frame = self.scheduler.request_frame(self.step)
        return True

    def step(self):
        self._frame = None
        if self.state != ANIMATING:
            return
        width, height = self.viewport
        try:
            self.surface.clear()
            for p in self.particles:
                p.update(self.gravity)
            self.surface.draw(self.particles)
        except Exception as exc:
            logger.debug("Confetti frame failed, stopping: %s", exc)
            self._finish()
            return

        if all(p.offscreen(width, height, self.margin) for p in self.particles):
            self._finish()
            return
        self._frame = self.scheduler.request_frame(self.step)

    def dismiss(self):
        """Stop any flight, wipe the surface. Returns the control to focus."""
        self._cancel_pending()
        self._finish()
        if self.surface is not None:
            try:
                self.surface.clear()
            except Exception as exc:
                logger.debug("Could not clear drawing surface: %s", exc)
        return config.PRIMARY_CONTROL_ID

    def _finish(self):
        self.state = IDLE
        self.particles = []

    def _cancel_pending(self):
        if self._frame is not None and self.scheduler is not None:
            self.scheduler.cancel_frame(self._frame)
        self._frame = None


# =========================
# Approval meter / annoyance slider
# =========================
def approval_meter_steps(current=config.APPROVAL_START, target=config.APPROVAL_TARGET,
                         easing=config.APPROVAL_EASING):
    """Per-frame meter widths easing from `current` to `target`, ending exactly on it."""
    width = float(current)
    steps = []
    while True:
        width += (target - width) * easing
        if width < target - 0.5:
            steps.append(round(width, 2))
        else:
            steps.append(target)
            return steps


def annoyance_reading(value, commentary=ANNOYANCE_COMMENTARY):
    try:
        value = float(value)
    except (TypeError, ValueError):
        value = 0.0
    if math.isnan(value):
        value = 0.0
    value = max(0.0, min(100.0, value))
    # len(commentary) equal buckets; 100 belongs to the last one
    index = min(int(value * len(commentary) / 100), len(commentary) - 1)
    return {
        "value": value,
        "fill_pct": value,
        "comment": commentary[index],
        "index": index,
    }
