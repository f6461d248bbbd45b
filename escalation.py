# escalation.py
"""Escalation controller: the No/Yes click logic behind the review page."""
import logging

import config
from capabilities import (
    DECLINE_TONE,
    SUCCESS_TONE,
    NullCounterStore,
    clear_counter,
    load_counter,
    safe_play,
    save_counter,
)
from celebration import CelebrationRenderer, approval_meter_steps
from messages import DECLINE_MESSAGES, REPEAT_MESSAGES, SUCCESS_MESSAGES

logger = logging.getLogger(__name__)


# =========================
# Catalog selection
# =========================
def decline_message(no_clicks, catalog=DECLINE_MESSAGES):
    """Message for the `no_clicks`-th decline (1-based), wrapping forever."""
    return catalog[(no_clicks - 1) % len(catalog)]


def celebration_for(yes_clicks, primary=SUCCESS_MESSAGES, repeat=REPEAT_MESSAGES):
    """Payload for an acceptance when `yes_clicks` acceptances happened before it."""
    if yes_clicks < len(primary):
        return primary[yes_clicks]
    return repeat[(yes_clicks - len(primary)) % len(repeat)]


# =========================
# State
# =========================
class ReviewState:
    def __init__(self, no_clicks=0, yes_clicks=0, modal_open=False,
                 celebration_active=False, approval=config.APPROVAL_START):
        self.no_clicks = no_clicks
        self.yes_clicks = yes_clicks
        self.modal_open = modal_open
        self.celebration_active = celebration_active
        self.approval = approval

    @classmethod
    def from_dict(cls, data):
        # yes_clicks lives in the durable counter store, not here
        data = data or {}
        try:
            no_clicks = max(0, int(data.get("no_clicks", 0)))
        except (TypeError, ValueError):
            no_clicks = 0
        try:
            approval = float(data.get("approval", config.APPROVAL_START))
        except (TypeError, ValueError):
            approval = config.APPROVAL_START
        return cls(
            no_clicks=no_clicks,
            modal_open=bool(data.get("modal_open", False)),
            celebration_active=bool(data.get("celebration_active", False)),
            approval=approval,
        )

    def to_dict(self):
        return {
            "no_clicks": self.no_clicks,
            "modal_open": self.modal_open,
            "celebration_active": self.celebration_active,
            "approval": self.approval,
        }


# =========================
# Controller
# =========================
class EscalationController:
    def __init__(self, state=None, store=None, tones=None, renderer=None,
                 counter_key=config.COUNTER_KEY, shrink_no_at=config.SHRINK_NO_AT,
                 grow_yes_at=config.GROW_YES_AT):
        self.state = state or ReviewState()
        self.store = store if store is not None else NullCounterStore()
        self.tones = tones
        self.renderer = renderer or CelebrationRenderer()
        self.counter_key = counter_key
        self.shrink_no_at = shrink_no_at
        self.grow_yes_at = grow_yes_at
        self.state.yes_clicks = load_counter(self.store, counter_key)

        self.message = None
        self.celebration = None
        self.meter_steps = []

    # --- escalation effects ---
    @property
    def shrink_no(self):
        return self.state.no_clicks >= self.shrink_no_at

    @property
    def grow_yes(self):
        return self.state.no_clicks >= self.grow_yes_at

    @property
    def focus(self):
        if self.state.celebration_active:
            return config.CLOSE_CONTROL_ID
        return config.PRIMARY_CONTROL_ID

    # --- No ---
    def decline(self):
        self.state.no_clicks += 1
        self.state.modal_open = True
        self.message = decline_message(self.state.no_clicks)
        logger.info("Decline #%d", self.state.no_clicks)
        return self.message

    def confirm_decline(self):
        """User doubled down on No from inside the modal."""
        if not self.state.modal_open:
            return self.decline()
        self.state.no_clicks += 1
        safe_play(self.tones, DECLINE_TONE)
        self.message = decline_message(self.state.no_clicks)
        logger.info("Decline confirmed #%d", self.state.no_clicks)
        return self.message

    def cancel_modal(self):
        # Escape / backdrop clicks never close the modal; a choice is required
        return self.state.modal_open

    # --- Yes ---
    def accept(self):
        self.state.modal_open = False
        self.celebration = celebration_for(self.state.yes_clicks)
        self.state.yes_clicks += 1
        save_counter(self.store, self.counter_key, self.state.yes_clicks)

        self.meter_steps = approval_meter_steps(self.state.approval)
        self.state.approval = self.meter_steps[-1]
        self.state.celebration_active = True
        self.renderer.launch()
        safe_play(self.tones, SUCCESS_TONE)
        logger.info("Accept #%d: %s", self.state.yes_clicks, self.celebration.title)
        return self.celebration

    def dismiss(self):
        self.state.celebration_active = False
        return self.renderer.dismiss()

    def reset(self):
        self.state.yes_clicks = 0
        clear_counter(self.store, self.counter_key)
        logger.info("Acceptance counter reset")
