"""Protocolos e contratos do core da aplicação."""

from .calendar_service import CalendarServiceProtocol

__all__ = ["CalendarServiceProtocol"]
