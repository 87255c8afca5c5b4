import pytest

from flappy_core.collaborators import MemoryScoreStore
from flappy_core.data_models import Viewport
from flappy_core.frame_loop import FrameScheduler
from flappy_core.simulation import SimulationContext, SimulationController


class RecordingAudio:
    def __init__(self):
        self.events = []

    def play(self, event):
        self.events.append(event)


class RecordingRenderer:
    def __init__(self):
        self.snapshots = []

    def render(self, snapshot):
        self.snapshots.append(snapshot)


class FixedRandom:
    """Stands in for random.Random with a constant draw."""

    def __init__(self, value=0.5):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def make_controller(audio, renderer, store, scheduler):
    def factory(viewport=None, rng=None, **overrides):
        context = SimulationContext(viewport or Viewport(), rng=rng or FixedRandom())
        kwargs = dict(renderer=renderer, audio=audio, store=store, scheduler=scheduler)
        kwargs.update(overrides)
        return SimulationController(context, **kwargs)
    return factory
