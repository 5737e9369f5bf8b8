import pytest

from apps.name_service import NameHandler
from apps.name_service.composer import NameComposer, RandomSource


class ScriptedSource:
    """Randomness stand-in: fixed template id, first entry of every list."""

    def __init__(self, template_id: int):
        self.template_id = template_id
        self.calls = []

    def randint(self, a, b):
        self.calls.append(("randint", a, b))
        return self.template_id

    def choice(self, seq):
        self.calls.append(("choice", len(seq)))
        return seq[0]


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def seeded_composer():
    return NameComposer(source=RandomSource(seed=1234))


@pytest.fixture
def scripted_handler():
    def make(template_id: int) -> NameHandler:
        return NameHandler(composer=NameComposer(source=ScriptedSource(template_id)))

    return make
