import logging
from typing import List, Optional

from pydantic import BaseModel

from taxilink.channels.domain import MenuState

logger = logging.getLogger(__name__)

KEYPAD = ("1", "2", "3", "4", "5", "6", "7", "8", "9", "*", "0", "#")


class MenuStep(BaseModel):
    text: str
    options: Optional[List[str]] = None
    input: bool = False
    final: bool = False


USSD_STEPS = [
    MenuStep(text="Welcome to TaxiLink\n1. Book a ride\n2. Check booking\n3. Cancel ride\n4. Help",
             options=["1", "2", "3", "4"]),
    MenuStep(text="Enter pickup location:", input=True),
    MenuStep(text="Enter destination:", input=True),
    MenuStep(text="When do you need the ride?\n1. Now\n2. In 30 min\n3. In 1 hour",
             options=["1", "2", "3"]),
    MenuStep(text="How many passengers?\n1. 1 person\n2. 2-3 people\n3. 4+ people",
             options=["1", "2", "3"]),
    # Fixed placeholder, no booking is created from the menu
    MenuStep(text="Booking confirmed!\nDriver: Thabo M.\nETA: 5 minutes\nPrice: R15\n\n"
                  "Thank you for using TaxiLink!", final=True),
]


class UssdSession:
    """
    Linear menu walk-through. Any keypad key moves one step forward, the
    key itself is not kept. The last step is terminal.
    """

    def __init__(self, steps: Optional[List[MenuStep]] = None):
        self.steps = steps or USSD_STEPS
        self.state = MenuState()

    @property
    def step_index(self) -> int:
        return self.state.step_index

    @property
    def current(self) -> MenuStep:
        return self.steps[self.state.step_index]

    def is_final(self) -> bool:
        return self.state.step_index >= len(self.steps) - 1

    def press(self, key: str) -> bool:
        """Returns True when the key moved the menu forward."""
        if key not in KEYPAD:
            logger.debug(f"Ignoring non-keypad input {key!r}")
            return False
        if self.is_final():
            return False
        self.state.step_index += 1
        return True

    def screen(self) -> str:
        return f"TaxiLink USSD  Step {self.step_index + 1}/{len(self.steps)}\n{self.current.text}"
