import logging
from datetime import date
from typing import Callable, List

from src.core.exceptions import NotFoundError
from src.models.domain.reminder import Reminder
from src.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ReminderRepository(BaseRepository[Reminder]):
    """The authoritative set of reminders for the lifetime of the process.

    Every listing raises NotFoundError when it would come back empty, each
    with its own message.
    """

    def __init__(self, today: Callable[[], date] = date.today):
        super().__init__(Reminder)
        self._today = today

    def create(self, reminder: Reminder) -> Reminder:
        return self.save(reminder)

    def update(self, reminder_id: str, changes: dict) -> Reminder:
        return self.patch(reminder_id, changes)

    def set_completed(self, reminder_id: str, value: bool) -> Reminder:
        return self.patch(reminder_id, {"isCompleted": value})

    def list_all(self) -> List[Reminder]:
        return self._non_empty(self.get_all(), "Not Found: No reminders available.")

    def list_completed(self) -> List[Reminder]:
        return self._non_empty(
            self.filter(lambda r: r.isCompleted),
            "Not Found: No completed reminders.",
        )

    def list_not_completed(self) -> List[Reminder]:
        return self._non_empty(
            self.filter(lambda r: not r.isCompleted),
            "Not Found: No uncompleted reminders.",
        )

    def list_due_today(self) -> List[Reminder]:
        today = self._today()
        return self._non_empty(
            self.filter(lambda r: r.due_on == today),
            "Not Found: No reminders due today.",
        )

    @staticmethod
    def _non_empty(reminders: List[Reminder], message: str) -> List[Reminder]:
        if not reminders:
            logger.info(message)
            raise NotFoundError(message=message)
        return reminders
