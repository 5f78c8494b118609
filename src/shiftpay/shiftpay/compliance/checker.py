"""Working-time checks over published shifts.

Both checks are pure: they only read the shift and staff lists they are
given, one staff member at a time.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional

from ..common.datetime_utils import format_day_time
from ..common.money import round2
from ..core.enums import WarningType
from ..core.policy import EnginePolicy
from ..shifts.model import Shift
from ..staff.model import StaffProfile
from .model import ComplianceWarning


def _group_by_staff(shifts: Iterable[Shift]) -> dict[int, list[Shift]]:
    grouped: dict[int, list[Shift]] = defaultdict(list)
    for s in shifts:
        grouped[s.staff_id].append(s)
    return grouped


def check_rest_period_violations(
    shifts: Iterable[Shift],
    staff_profiles: Iterable[StaffProfile],
    policy: Optional[EnginePolicy] = None,
) -> list[ComplianceWarning]:
    """Warn when two consecutive shifts leave less than the minimum rest.

    Rest is the real elapsed time, in whole hours, between the end of one
    shift and the start of the next, so a clock change shortens or lengthens
    it. Labels stay on the UK wall clock. Shifts of unknown staff are ignored.
    """

    policy = policy or EnginePolicy()
    staff_by_id = {p.staff_id: p for p in staff_profiles}
    warnings: list[ComplianceWarning] = []

    for staff_id, staff_shifts in _group_by_staff(shifts).items():
        staff = staff_by_id.get(staff_id)
        if staff is None:
            continue

        ordered = sorted(staff_shifts, key=lambda s: (s.shift_date, s.start_time))
        for current, following in zip(ordered, ordered[1:]):
            gap = following.start_instant() - current.end_instant()
            rest_hours = int(gap.total_seconds() / 3600)

            if rest_hours < policy.min_rest_hours:
                warnings.append(
                    ComplianceWarning(
                        kind=WarningType.REST_PERIOD_VIOLATION,
                        staff_id=staff_id,
                        staff_name=staff.name,
                        message=(
                            f"Only {rest_hours}h rest between shifts "
                            f"(minimum {policy.min_rest_hours}h required)"
                        ),
                        shift_date=following.shift_date,
                        previous_shift_end=format_day_time(current.local_end),
                        next_shift_start=format_day_time(following.local_start),
                        rest_hours=rest_hours,
                    )
                )

    return warnings


def check_weekly_hours(
    shifts: Iterable[Shift],
    staff_profiles: Iterable[StaffProfile],
    policy: Optional[EnginePolicy] = None,
) -> list[ComplianceWarning]:
    """Warn when a staff member is scheduled over the weekly maximum.

    Weeks are ISO weeks (Monday to Sunday) keyed by shift start date.
    """

    policy = policy or EnginePolicy()
    staff_by_id = {p.staff_id: p for p in staff_profiles}
    warnings: list[ComplianceWarning] = []

    for staff_id, staff_shifts in _group_by_staff(shifts).items():
        staff = staff_by_id.get(staff_id)
        if staff is None:
            continue

        weeks: dict[tuple[int, int], list[Shift]] = defaultdict(list)
        for s in staff_shifts:
            iso = s.shift_date.isocalendar()
            weeks[(iso[0], iso[1])].append(s)

        for key in sorted(weeks):
            week_shifts = weeks[key]
            hours = round2(sum(s.scheduled_hours for s in week_shifts))
            if hours <= policy.max_weekly_hours:
                continue

            first_day = min(s.shift_date for s in week_shifts)
            warnings.append(
                ComplianceWarning(
                    kind=WarningType.OVERTIME_WARNING,
                    staff_id=staff_id,
                    staff_name=staff.name,
                    message=(
                        f"Scheduled for {hours:g}h in week {key[1]} "
                        f"(maximum {policy.max_weekly_hours:g}h)"
                    ),
                    shift_date=first_day,
                    weekly_hours=hours,
                )
            )

    return warnings
