import pytest

from hashparams.locations.memory import MemoryLocation

testURL = "https://example.com/app/index.html?lang=en"


@pytest.fixture
def location():
    return MemoryLocation.fromURL(testURL + "#view")


@pytest.fixture
def diagnostics():
    return []
