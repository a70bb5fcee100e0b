import pytest

from taxilink.channels.ussd import KEYPAD, USSD_STEPS, UssdSession


def test_starts_at_welcome_menu():
    session = UssdSession()
    assert session.step_index == 0
    assert session.current.options == ["1", "2", "3", "4"]
    assert session.current.text.startswith("Welcome to TaxiLink")


@pytest.mark.parametrize("key", KEYPAD)
def test_any_keypad_key_advances_one_step(key):
    session = UssdSession()
    assert session.press(key) is True
    assert session.step_index == 1
    assert session.current.input is True


def test_walks_to_terminal_step():
    session = UssdSession()
    for expected in range(1, len(USSD_STEPS)):
        session.press("1")
        assert session.step_index == expected

    assert session.is_final()
    assert session.current.final is True
    assert "Driver: Thabo M." in session.current.text


def test_terminal_step_ignores_keys():
    session = UssdSession()
    for _ in range(len(USSD_STEPS) - 1):
        session.press("#")

    assert session.press("9") is False
    assert session.step_index == len(USSD_STEPS) - 1


def test_non_keypad_input_is_ignored():
    session = UssdSession()
    assert session.press("a") is False
    assert session.press("") is False
    assert session.step_index == 0


def test_screen_shows_step_counter():
    session = UssdSession()
    session.press("1")
    assert session.screen() == f"TaxiLink USSD  Step 2/{len(USSD_STEPS)}\nEnter pickup location:"
