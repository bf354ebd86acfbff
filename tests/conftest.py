import pytest

from fakes import FakeDirectory, RecordingResponder, channels


@pytest.fixture
def responder():
    return RecordingResponder()


@pytest.fixture
def directory():
    return FakeDirectory(
        users={"U111": "Alice", "U222": "Bob", "U333": "Carol"},
        pages={
            "U111": [channels(("C1", "general"), ("C2", "eng"))],
            "U222": [channels(("C2", "eng"), ("C3", "random"))],
            "U333": [[]],
        },
    )
