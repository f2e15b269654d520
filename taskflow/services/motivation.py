import random
from typing import Sequence

MESSAGES = (
    "Excellent work! Keep it up.",
    "Task completed! You're unstoppable.",
    "One step closer to your goals!",
    "Well done! Every task counts.",
    "Fantastic! Your effort is paying off.",
    "You did it! Take a breather.",
    "Amazing! Keep conquering your tasks.",
)

FALLBACK_MESSAGE = "Keep going!"


class MotivationService:
    """Picks an encouraging message when a task gets completed."""

    def __init__(self, messages: Sequence[str] = MESSAGES):
        self._messages = tuple(messages)

    @property
    def messages(self) -> Sequence[str]:
        return self._messages

    def random_message(self) -> str:
        if not self._messages:
            return FALLBACK_MESSAGE
        return random.choice(self._messages)


_motivation_service = MotivationService()


def get_motivation_service() -> MotivationService:
    """Dependency returning the shared, read-only message provider."""
    return _motivation_service
