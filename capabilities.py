# capabilities.py
"""Optional client capabilities: durable counter store, tones, motion preference.

Every capability may be missing or broken. The safe_* helpers below are the
only way the rest of the code touches them; failures are logged and the
enhancement is skipped.
"""
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

# =========================
# Durable counter store
# =========================
class MappingCounterStore:
    """Counter store over any dict-like object (a Flask session, a plain dict)."""

    def __init__(self, mapping=None):
        self.mapping = {} if mapping is None else mapping

    def get(self, key):
        return self.mapping.get(key)

    def set(self, key, value):
        self.mapping[key] = value

    def delete(self, key):
        self.mapping.pop(key, None)


class NullCounterStore:
    """No durable storage at all: nothing is remembered."""

    def get(self, key):
        return None

    def set(self, key, value):
        pass

    def delete(self, key):
        pass


def load_counter(store, key):
    """Read a non-negative integer stored as text. Anything else loads as 0."""
    try:
        raw = store.get(key)
    except Exception as exc:
        logger.debug("Counter store read failed for %r: %s", key, exc)
        return 0
    if raw is None:
        return 0
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        logger.debug("Ignoring malformed counter %r=%r", key, raw)
        return 0
    return value if value >= 0 else 0


def save_counter(store, key, value):
    try:
        store.set(key, str(int(value)))
    except Exception as exc:
        logger.debug("Counter store write failed for %r: %s", key, exc)


def clear_counter(store, key):
    try:
        store.delete(key)
    except Exception as exc:
        logger.debug("Counter store delete failed for %r: %s", key, exc)


# =========================
# Tones
# =========================
# notes are (frequency Hz, offset seconds); gain ramps from gain to 0.01 over duration
ToneSequence = namedtuple("ToneSequence", ["name", "wave", "notes", "gain", "duration"])

SUCCESS_TONE = ToneSequence(
    "success", "sine", ((523.25, 0.0), (659.25, 0.1), (783.99, 0.2)), 0.15, 0.4
)
DECLINE_TONE = ToneSequence(
    "decline", "sawtooth", ((311.13, 0.0), (233.08, 0.15)), 0.08, 0.35
)


def tone_cue(tone):
    return {
        "name": tone.name,
        "wave": tone.wave,
        "notes": [{"frequency": f, "at": at} for f, at in tone.notes],
        "gain": tone.gain,
        "duration": tone.duration,
    }


class NullTonePlayer:
    def play(self, tone):
        pass


class CueTonePlayer:
    """Collects tone cues; the browser plays them through Web Audio."""

    def __init__(self):
        self.cues = []

    def play(self, tone):
        self.cues.append(tone_cue(tone))


def safe_play(player, tone):
    if player is None:
        return
    try:
        player.play(tone)
    except Exception as exc:
        logger.debug("Tone %s not played: %s", tone.name, exc)


# =========================
# Reduced motion
# =========================
def no_motion_preference():
    return False


def prefers_reduced_motion(query):
    if query is None:
        return False
    try:
        return bool(query())
    except Exception as exc:
        logger.debug("Reduced-motion query failed: %s", exc)
        return False
