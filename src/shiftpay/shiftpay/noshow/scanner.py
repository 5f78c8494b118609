"""Background no-show detection.

Every interval the scanner loads today's shifts and today's clock-ins, and
records a no-show for each shift whose staff member has not clocked in
within the threshold. The existing-record lookup per (shift, date) makes
repeated scans idempotent; the in-process latch stops two scans from
overlapping. The scanner is assumed to run as a single instance.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from ..attendance.lateness import is_no_show
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import business_day_bounds, business_now, business_today, ensure_utc
from ..core.exceptions import ConflictError
from ..core.policy import EnginePolicy
from ..notifications.notifier import Notifier
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from ..staff.repository import StaffRepository
from .model import NoShowRecord
from .repository import NoShowRepository

logger = logging.getLogger(__name__)


class NoShowScanner:
    def __init__(
        self,
        shifts: ShiftRepository,
        attendance: AttendanceRepository,
        no_shows: NoShowRepository,
        staff: StaffRepository,
        notifier: Notifier,
        *,
        policy: EnginePolicy | None = None,
        clock: Callable[[], datetime] = business_now,
    ):
        self._shifts = shifts
        self._attendance = attendance
        self._no_shows = no_shows
        self._staff = staff
        self._notifier = notifier
        self._policy = policy or EnginePolicy()
        self._clock = clock

        self._scan_latch = threading.Lock()
        self._state = threading.Lock()
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stopped.is_set()

    @property
    def is_scanning(self) -> bool:
        return self._scan_latch.locked()

    def scan(self, *, now: datetime | None = None) -> list[NoShowRecord]:
        """Run one scan now. Returns [] without scanning if one is in flight."""

        if not self._scan_latch.acquire(blocking=False):
            logger.debug("No-show scan already in progress; skipping")
            return []
        try:
            return self._scan(ensure_utc(now or self._clock()))
        finally:
            self._scan_latch.release()

    def _scan(self, now: datetime) -> list[NoShowRecord]:
        today = business_today(now)
        try:
            shifts = self._shifts.list_for_date(today)
            day_start, day_end = business_day_bounds(today)
            present = self._attendance.list_staff_ids_clocked_in_between(day_start, day_end)
        except Exception:
            logger.exception("No-show scan for %s could not load shifts or attendance", today)
            return []

        threshold = self._policy.no_show_threshold_minutes
        created: list[NoShowRecord] = []
        for shift in shifts:
            if shift.staff_id in present:
                continue
            if not is_no_show(shift.start_time, shift.shift_date, now, threshold):
                continue
            try:
                record = self._record_no_show(shift, now)
            except ConflictError:
                logger.debug("No-show for shift %s on %s recorded concurrently", shift.shift_id, shift.shift_date)
                continue
            except Exception:
                logger.exception("No-show check failed for shift %s on %s", shift.shift_id, shift.shift_date)
                continue
            if record:
                created.append(record)

        logger.debug("No-show scan for %s: %d shift(s), %d new no-show(s)", today, len(shifts), len(created))
        return created

    def _record_no_show(self, shift: Shift, now: datetime) -> Optional[NoShowRecord]:
        if self._no_shows.get_for_shift(shift_id=shift.shift_id, shift_date=shift.shift_date):
            return None

        record = self._no_shows.create(
            staff_id=shift.staff_id,
            shift_id=shift.shift_id,
            shift_date=shift.shift_date,
            scheduled_start_time=shift.start_time,
            detected_at=now,
        )
        logger.info("Created no-show record %s for shift %s", record.no_show_id, shift.shift_id)
        self._notify(record)
        return record

    def _notify(self, record: NoShowRecord) -> None:
        try:
            staff = self._staff.get_by_id(record.staff_id)
            self._notifier.notify_no_show(record, staff.name if staff else "Staff member")
        except Exception:
            logger.exception("Failed to notify managers about no-show %s", record.no_show_id)

    def _tick(self) -> None:
        with self._state:
            if self._stopped.is_set():
                return
            if not self._scan_latch.acquire(blocking=False):
                logger.debug("Previous no-show scan still running; skipping tick")
                return
        try:
            self._scan(ensure_utc(self._clock()))
        finally:
            self._scan_latch.release()

    def _run(self) -> None:
        interval = self._policy.no_show_scan_interval_seconds
        while not self._stopped.is_set():
            try:
                self._tick()
            except Exception:
                logger.exception("Unexpected error in no-show scan")
            if self._stopped.wait(interval):
                break

    def start(self) -> None:
        """Scan now, then every interval, on a daemon thread."""

        with self._state:
            if self._thread is not None and self._thread.is_alive():
                return
            self._stopped.clear()
            self._thread = threading.Thread(target=self._run, name="no-show-scanner", daemon=True)
            self._thread.start()
        logger.info("No-show scanner started (every %ss)", self._policy.no_show_scan_interval_seconds)

    def stop(self, timeout: float | None = None) -> None:
        """No scan starts after this returns; an in-flight scan is allowed to finish."""

        with self._state:
            self._stopped.set()
            thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.info("No-show scanner stopped")
