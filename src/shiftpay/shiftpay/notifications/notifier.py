from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..core.constants import MANAGEMENT_DEPARTMENT
from ..noshow.model import NoShowRecord
from ..staff.repository import StaffRepository
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def notify_no_show(self, record: NoShowRecord, staff_name: str) -> None:
        raise NotImplementedError


class ManagerNotifier:
    """Sends one in-app notification to every member of management."""

    def __init__(self, notifications: NotificationRepository, staff: StaffRepository):
        self._notifications = notifications
        self._staff = staff

    def notify_no_show(self, record: NoShowRecord, staff_name: str) -> None:
        start = record.scheduled_start_time.strftime("%H:%M")
        managers = self._staff.list_by_department(MANAGEMENT_DEPARTMENT)
        for manager in managers:
            self._notifications.create(
                recipient_id=manager.staff_id,
                kind="no_show",
                title=f"{staff_name} is a no-show",
                message=f"Scheduled at {start} but hasn't clocked in",
                related_staff_id=record.staff_id,
                reference_id=record.no_show_id,
            )
        logger.info("No-show %s sent to %d manager(s)", record.no_show_id, len(managers))


class LoggingNotifier:
    """Fallback used when no notification store is configured."""

    def __init__(self, name: Optional[str] = None):
        self._logger = logging.getLogger(name or __name__)

    def notify_no_show(self, record: NoShowRecord, staff_name: str) -> None:
        self._logger.warning(
            "No-show: %s (staff=%s) shift=%s date=%s start=%s",
            staff_name, record.staff_id, record.shift_id, record.shift_date, record.scheduled_start_time,
        )
