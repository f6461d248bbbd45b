import random

import pytest

import app as review_app
from capabilities import CueTonePlayer, MappingCounterStore
from celebration import CelebrationRenderer, RecordingSurface, SynchronousScheduler
from escalation import EscalationController


@pytest.fixture
def public_dir(tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>Roy Review</h1>")
    (root / "styles.css").write_text("body { color: teal; }")
    (root / "about.html").write_text("<p>About Roy</p>")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n")
    (root / "notes.xyz").write_text("raw")
    return root


@pytest.fixture
def client(public_dir):
    review_app.app.config.update(TESTING=True, PUBLIC_DIR=str(public_dir))
    with review_app.app.test_client() as c:
        yield c


@pytest.fixture
def store():
    return MappingCounterStore({})


@pytest.fixture
def tones():
    return CueTonePlayer()


@pytest.fixture
def scheduler():
    return SynchronousScheduler()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def renderer(surface, scheduler):
    return CelebrationRenderer(surface=surface, scheduler=scheduler, rng=random.Random(7),
                               viewport=(800, 600))


@pytest.fixture
def controller(store, tones, renderer):
    return EscalationController(store=store, tones=tones, renderer=renderer)
