"""Service layer — configured facades over the domain types."""

from civiltime.services.calendar import CalendarService

__all__ = ["CalendarService"]
