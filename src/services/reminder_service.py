from typing import Any, List

import structlog
from pydantic import ValidationError

from src.core.exceptions import InvalidInputError
from src.models.domain.reminder import MessageResponse, Reminder, ReminderCreate, ReminderUpdate
from src.repositories.reminder_repository import ReminderRepository

logger = structlog.get_logger(__name__)


class ReminderService:
    def __init__(self, repository: ReminderRepository):
        self.repository = repository

    async def create_reminder(self, reminder_data: ReminderCreate) -> MessageResponse:
        reminder = self.repository.create(reminder_data.to_reminder())
        logger.info("reminder_created", reminder_id=reminder.id, due_date=reminder.dueDate)
        return MessageResponse(message="Reminder created successfully.")

    async def get_reminder(self, reminder_id: str) -> Reminder:
        return self.repository.get_by_id(reminder_id)

    async def get_reminders(self) -> List[Reminder]:
        return self.repository.list_all()

    async def update_reminder(self, reminder_id: str, payload: Any) -> MessageResponse:
        # Unknown ids answer 404 before the body is looked at.
        self.repository.get_by_id(reminder_id)
        try:
            changes = ReminderUpdate.model_validate(payload if payload is not None else {})
        except ValidationError as exc:
            raise InvalidInputError(details=exc.errors(include_context=False)) from exc

        fields = changes.changes()
        self.repository.update(reminder_id, fields)
        logger.info("reminder_updated", reminder_id=reminder_id, fields=sorted(fields))
        return MessageResponse(message="Reminder updated successfully.")

    async def delete_reminder(self, reminder_id: str) -> MessageResponse:
        self.repository.delete(reminder_id)
        logger.info("reminder_deleted", reminder_id=reminder_id)
        return MessageResponse(message="Reminder deleted successfully.")

    async def mark_completed(self, reminder_id: str) -> MessageResponse:
        self.repository.set_completed(reminder_id, True)
        logger.info("reminder_marked_completed", reminder_id=reminder_id)
        return MessageResponse(message="Reminder marked as completed.")

    async def unmark_completed(self, reminder_id: str) -> MessageResponse:
        self.repository.set_completed(reminder_id, False)
        logger.info("reminder_unmarked_completed", reminder_id=reminder_id)
        return MessageResponse(message="Reminder unmarked as completed.")

    async def get_completed(self) -> List[Reminder]:
        return self.repository.list_completed()

    async def get_not_completed(self) -> List[Reminder]:
        return self.repository.list_not_completed()

    async def get_due_today(self) -> List[Reminder]:
        return self.repository.list_due_today()
