import pytest

from hashparams.core.classes import HistoryEntry, URLParts
from hashparams.core.errors import HistoryError
from hashparams.core.protocols import LocationProvider
from hashparams.locations.memory import MemoryLocation


def test_fromURL():
    location = MemoryLocation.fromURL("https://example.com:8443/a/b.html?q=1#view/x:1")
    assert isinstance(location, LocationProvider)
    assert "#view/x:1" == location.getHash()
    assert (
        URLParts(
            protocol="https:",
            hostname="example.com",
            port="8443",
            pathname="/a/b.html",
            search="?q=1",
        )
        == location.getURLParts()
    )
    assert "https://example.com:8443/a/b.html?q=1#view/x:1" == location.href


def test_emptyFragment():
    location = MemoryLocation.fromURL("http://localhost")
    assert "" == location.getHash()
    assert "http://localhost/" == location.href


def test_getURLPartsReturnsCopy():
    location = MemoryLocation()
    parts = location.getURLParts()
    parts.pathname = "/changed"
    assert "/" == location.getURLParts().pathname


def test_setHashPushesEntry():
    location = MemoryLocation.fromURL("http://localhost/#a")
    location.setHash("#b")
    location.setHash("c")
    assert "#c" == location.getHash()
    assert [
        "http://localhost/#a",
        "http://localhost/#b",
        "http://localhost/#c",
    ] == [entry.url for entry in location.history]
    location.setHash("c")
    assert 3 == len(location.history)


def test_backForward():
    location = MemoryLocation.fromURL("http://localhost/#a")
    location.setHash("b")
    location.back()
    assert "#a" == location.getHash()
    location.back()
    assert "#a" == location.getHash()
    location.forward()
    assert "#b" == location.getHash()
    location.back()
    location.setHash("c")
    # navigating after going back drops the forward entries
    assert ["#a", "#c"] == [
        "#" + entry.url.split("#")[1] for entry in location.history
    ]


def test_replaceState():
    location = MemoryLocation.fromURL("http://localhost/page?x=1#a")
    location.replaceState({"k": 1}, "/page?x=1#b")
    assert "#b" == location.getHash()
    assert [
        HistoryEntry(url="http://localhost/page?x=1#b", state={"k": 1})
    ] == location.history
    assert {"k": 1} == location.state


def test_replaceState_otherOrigin():
    location = MemoryLocation.fromURL("http://localhost/#a")
    with pytest.raises(HistoryError):
        location.replaceState(None, "https://example.com/#b")
    assert "#a" == location.getHash()


def test_urlParts():
    parts = URLParts(protocol="file:", hostname="", pathname="/tmp/index.html")
    assert "file://" == parts.origin
    assert "file:///tmp/index.html#x/" == parts.buildURL("x/")
    assert "/tmp/index.html#x/" == parts.buildURL("x/", absolute=False)


def test_fromURL_invalidPort():
    with pytest.raises(ValueError):
        MemoryLocation.fromURL("http://localhost:abc/")
