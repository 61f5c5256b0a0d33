from src.repositories.base_repository import BaseRepository
from src.repositories.reminder_repository import ReminderRepository

__all__ = ["BaseRepository", "ReminderRepository"]
