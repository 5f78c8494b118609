from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import ClockInStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .compliance.service import ComplianceService
from .core.policy import EnginePolicy
from .database.connection import DBConfig, DatabaseConnection
from .noshow.mysql_noshow_repository import MySQLNoShowRepository
from .noshow.repository import NoShowRepository
from .noshow.scanner import NoShowScanner
from .noshow.service import NoShowService
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.notifier import LoggingNotifier, ManagerNotifier, Notifier
from .payroll.service import PayrollService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository


@dataclass(frozen=True)
class Container:
    policy: EnginePolicy

    staff_repo: StaffRepository
    shifts_repo: ShiftRepository
    attendance_repo: AttendanceRepository
    no_show_repo: NoShowRepository

    attendance_service: AttendanceService
    payroll_service: PayrollService
    compliance_service: ComplianceService
    no_show_service: NoShowService
    no_show_scanner: NoShowScanner

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    policy: EnginePolicy,
    staff_repo: StaffRepository,
    shifts_repo: ShiftRepository,
    attendance_repo: AttendanceRepository,
    no_show_repo: NoShowRepository,
    notifier: Optional[Notifier] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories (MySQL or in-memory).

    Without a notifier, no-shows are only logged.
    """

    return Container(
        policy=policy,
        staff_repo=staff_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        no_show_repo=no_show_repo,
        attendance_service=AttendanceService(
            attendance_repo,
            staff_repo,
            shifts_repo,
            strategy_factory=ClockInStrategyFactory(),
            policy=policy,
        ),
        payroll_service=PayrollService(attendance_repo, staff_repo, policy=policy),
        compliance_service=ComplianceService(shifts_repo, staff_repo, policy=policy),
        no_show_service=NoShowService(no_show_repo),
        no_show_scanner=NoShowScanner(
            shifts_repo,
            attendance_repo,
            no_show_repo,
            staff_repo,
            notifier or LoggingNotifier(),
            policy=policy,
        ),
        conn=conn,
    )


def build_container(*, db_config: dict, policy: Optional[EnginePolicy] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    staff_repo = MySQLStaffRepository(conn)
    notifier = ManagerNotifier(MySQLNotificationRepository(conn), staff_repo)

    return wire_services(
        policy=policy or EnginePolicy(),
        staff_repo=staff_repo,
        shifts_repo=MySQLShiftRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        no_show_repo=MySQLNoShowRepository(conn),
        notifier=notifier,
        conn=conn,
    )
