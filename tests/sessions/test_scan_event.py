import pytest

from timekeeping.core.enums import ScanType
from timekeeping.core.exceptions import ValidationError
from timekeeping.sessions.model import ScanEvent
from timekeeping.sessions.registry import SessionRegistry


def test_payload_is_parsed_without_touching_token():
    event = ScanEvent.from_payload({"type": "CheckIn", "decodedText": "https://example.test/qr/abc?x=1"})

    assert event.scan_type == ScanType.CHECKIN
    assert event.decoded_text == "https://example.test/qr/abc?x=1"


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "lunch", "decodedText": "x"},
        {"decodedText": "x"},
        {"type": "checkout", "decodedText": "   "},
        {"type": "checkout"},
    ],
)
def test_invalid_payloads_are_rejected(payload):
    with pytest.raises(ValidationError):
        ScanEvent.from_payload(payload)


def test_registry_keeps_one_tracker_per_employee():
    registry = SessionRegistry()

    a = registry.get(1)
    assert registry.get(1) is a
    assert registry.get(2) is not a
    assert len(registry) == 2


def test_discard_closes_the_active_session():
    registry = SessionRegistry()
    tracker = registry.get(1)
    tracker.begin_session()

    registry.discard(1)

    assert tracker.session is None
    assert len(registry) == 0
    registry.discard(1)
