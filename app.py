# app.py
import logging
from datetime import timedelta

from flask import Flask, jsonify, request, session

import config
from capabilities import CueTonePlayer, MappingCounterStore
from celebration import (
    CelebrationRenderer,
    RecordingSurface,
    SynchronousScheduler,
    annoyance_reading,
)
from escalation import EscalationController, ReviewState, decline_message
from static_server import static_bp

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("roy_review")

app = Flask(__name__, static_folder=None)
app.secret_key = config.SECRET_KEY
# The session cookie doubles as the durable client-side counter store
app.permanent_session_lifetime = timedelta(days=config.COUNTER_LIFETIME_DAYS)
app.config["PUBLIC_DIR"] = config.PUBLIC_DIR
app.register_blueprint(static_bp)

# =========================
# Helpers
# =========================
def _payload():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}

def _flag(data, name):
    return data.get(name) in (True, 1, "1", "true")

def _dimension(value, default):
    try:
        value = int(value)
    except (TypeError, ValueError):
        return default
    return max(1, min(value, config.MAX_VIEWPORT))

def _viewport(data):
    width, height = config.DEFAULT_VIEWPORT
    return _dimension(data.get("width"), width), _dimension(data.get("height"), height)

def _controller(data=None, page_load=False):
    data = data or {}
    session.permanent = True
    renderer = CelebrationRenderer(
        surface=RecordingSurface(),
        scheduler=SynchronousScheduler(),
        reduced_motion=lambda: _flag(data, "reduced_motion"),
        viewport=_viewport(data),
    )
    return EscalationController(
        # Only the Yes counter outlives a page; everything else starts over on load
        state=ReviewState() if page_load else ReviewState.from_dict(session.get("review")),
        store=MappingCounterStore(session),
        tones=CueTonePlayer(),
        renderer=renderer,
    )

def _respond(ctl, **extra):
    session["review"] = ctl.state.to_dict()
    body = {
        "no_clicks": ctl.state.no_clicks,
        "yes_clicks": ctl.state.yes_clicks,
        "modal_open": ctl.state.modal_open,
        "celebration_active": ctl.state.celebration_active,
        "approval": ctl.state.approval,
        "shrink_no": ctl.shrink_no,
        "grow_yes": ctl.grow_yes,
        "focus": ctl.focus,
        "tones": ctl.tones.cues,
    }
    body.update(extra)
    return jsonify(body)

# =========================
# Routes
# =========================
@app.get("/api/state")
def state():
    # The page calls this once on load
    return _respond(_controller(page_load=True))

@app.post("/api/decline")
def decline():
    ctl = _controller(_payload())
    return _respond(ctl, message=ctl.decline())

@app.post("/api/decline/confirm")
def confirm_decline():
    ctl = _controller(_payload())
    return _respond(ctl, message=ctl.confirm_decline())

@app.post("/api/modal/cancel")
def cancel_modal():
    ctl = _controller(_payload())
    ctl.cancel_modal()
    message = None
    if ctl.state.modal_open:
        message = decline_message(ctl.state.no_clicks)
    return _respond(ctl, message=message)

@app.post("/api/accept")
def accept():
    ctl = _controller(_payload())
    celebration = ctl.accept()
    ctl.renderer.scheduler.run()
    frames = ctl.renderer.surface.to_dict()
    return _respond(
        ctl,
        celebration=celebration._asdict(),
        meter=ctl.meter_steps,
        confetti=frames if frames["frames"] else None,
    )

@app.post("/api/dismiss")
def dismiss():
    ctl = _controller(_payload())
    ctl.dismiss()
    return _respond(ctl)

@app.post("/api/reset")
def reset():
    ctl = _controller(_payload())
    ctl.reset()
    return _respond(ctl)

@app.get("/api/annoyance")
def annoyance():
    return jsonify(annoyance_reading(request.args.get("value", 0)))

if __name__ == "__main__":
    logger.info("Roy Review System running at http://localhost:%s", config.PORT)
    app.run(host=config.HOST, port=config.PORT)
