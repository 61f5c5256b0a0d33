"""
FastAPI dependencies for dependency injection.

The reminder store is owned by the application (app.state), not by a module
global, so each app instance, and each test, gets its own store.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request

from src.repositories.reminder_repository import ReminderRepository
from src.services.reminder_service import ReminderService


def get_reminder_repository(request: Request) -> ReminderRepository:
    """Return the store attached to the running application."""
    return request.app.state.reminder_repository


async def get_reminder_service(
    repository: Annotated[ReminderRepository, Depends(get_reminder_repository)]
) -> AsyncGenerator[ReminderService, None]:
    yield ReminderService(repository)


# Type aliases for cleaner endpoint signatures
ReminderRepositoryDep = Annotated[ReminderRepository, Depends(get_reminder_repository)]
ReminderServiceDep = Annotated[ReminderService, Depends(get_reminder_service)]
