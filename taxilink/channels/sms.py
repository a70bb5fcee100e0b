from typing import Dict

from taxilink.channels.domain import MISSING_LOCATIONS, TextDraft
from taxilink.config import conf


def generate_command(draft: TextDraft) -> str:
    """
    The SMS a rider sends to book, e.g. ``BOOK Church Square TO Menlyn 30MIN 2P``.
    Returns guidance text instead when pickup or destination is missing.
    """
    if not draft.pickup or not draft.destination:
        return MISSING_LOCATIONS
    return f"BOOK {draft.pickup} TO {draft.destination} {draft.time.value.upper()} {draft.passengers}P"


def send_targets() -> Dict[str, str]:
    return {"sms": conf.SMS_SHORT_CODE, "ussd": conf.USSD_DIAL_CODE}
