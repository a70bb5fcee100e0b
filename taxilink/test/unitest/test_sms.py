import pytest
from pydantic import ValidationError

from taxilink.channels.domain import MISSING_LOCATIONS, TextDraft
from taxilink.channels.sms import generate_command, send_targets


@pytest.mark.parametrize("time,passengers,expected", [
    ("now", 1, "BOOK Church Square TO Menlyn NOW 1P"),
    ("30min", 2, "BOOK Church Square TO Menlyn 30MIN 2P"),
    ("1hour", 4, "BOOK Church Square TO Menlyn 1HOUR 4P"),
])
def test_command_format(time, passengers, expected):
    draft = TextDraft(pickup="Church Square", destination="Menlyn", time=time, passengers=passengers)
    assert generate_command(draft) == expected


@pytest.mark.parametrize("pickup,destination", [("", "Menlyn"), ("Church Square", ""), ("", "")])
def test_missing_location_gives_guidance(pickup, destination):
    draft = TextDraft(pickup=pickup, destination=destination, time="1hour", passengers=3)
    assert generate_command(draft) == MISSING_LOCATIONS


def test_command_is_idempotent():
    draft = TextDraft(pickup="Sandton", destination="Rosebank")
    assert generate_command(draft) == generate_command(draft)
    assert draft == TextDraft(pickup="Sandton", destination="Rosebank")


def test_draft_rejects_bad_values():
    with pytest.raises(ValidationError):
        TextDraft(pickup="A", destination="B", passengers=0)
    with pytest.raises(ValidationError):
        TextDraft(pickup="A", destination="B", time="later")


def test_send_targets():
    assert send_targets() == {"sms": "40404", "ussd": "*120*8294#"}
