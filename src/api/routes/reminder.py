from typing import Annotated, Any, List

from fastapi import APIRouter, Body, status

from src.api.dependencies import ReminderServiceDep
from src.models.domain.reminder import (
    ErrorResponse,
    MessageResponse,
    Reminder,
    ReminderCreate,
)

router = APIRouter(prefix="/reminders", tags=["reminder"])

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


@router.post('', status_code=status.HTTP_201_CREATED, response_model=MessageResponse, responses=BAD_REQUEST)
async def create_reminder(payload: ReminderCreate, service: ReminderServiceDep):
    return await service.create_reminder(payload)


@router.get('', response_model=List[Reminder], responses=NOT_FOUND)
async def get_reminders(service: ReminderServiceDep):
    return await service.get_reminders()


# Literal sub-paths must be registered before /{reminder_id}.

@router.get('/completed', response_model=List[Reminder], responses=NOT_FOUND)
async def get_completed_reminders(service: ReminderServiceDep):
    return await service.get_completed()


@router.get('/not-completed', response_model=List[Reminder], responses=NOT_FOUND)
async def get_not_completed_reminders(service: ReminderServiceDep):
    return await service.get_not_completed()


@router.get('/due-today', response_model=List[Reminder], responses=NOT_FOUND)
async def get_reminders_due_today(service: ReminderServiceDep):
    return await service.get_due_today()


@router.get('/{reminder_id}', response_model=Reminder, responses=NOT_FOUND)
async def get_reminder(reminder_id: str, service: ReminderServiceDep):
    return await service.get_reminder(reminder_id)


@router.patch('/{reminder_id}', response_model=MessageResponse, responses={**NOT_FOUND, **BAD_REQUEST})
async def update_reminder(
    reminder_id: str,
    service: ReminderServiceDep,
    payload: Annotated[Any, Body(description="Fields to change, all optional")] = None,
):
    return await service.update_reminder(reminder_id, payload)


@router.delete('/{reminder_id}', response_model=MessageResponse, responses=NOT_FOUND)
async def delete_reminder(reminder_id: str, service: ReminderServiceDep):
    return await service.delete_reminder(reminder_id)


@router.post('/{reminder_id}/mark-completed', response_model=MessageResponse, responses=NOT_FOUND)
async def mark_reminder_completed(reminder_id: str, service: ReminderServiceDep):
    return await service.mark_completed(reminder_id)


@router.post('/{reminder_id}/unmark-completed', response_model=MessageResponse, responses=NOT_FOUND)
async def unmark_reminder_completed(reminder_id: str, service: ReminderServiceDep):
    return await service.unmark_completed(reminder_id)
