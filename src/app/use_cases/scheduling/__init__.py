"""Use cases de agendamento."""

from .create_event import CreateCalendarEventUseCase, CreateEventResult

__all__ = ["CreateCalendarEventUseCase", "CreateEventResult"]
