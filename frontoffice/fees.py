# frontoffice/fees.py
#
# Fee policy: suggested early/late arrival and late departure fees shipped
# with the check-in / checkout snapshot. Staff can override them on the form.

import math
from datetime import timedelta
from decimal import Decimal

from django.conf import settings
from django.utils import timezone

from .constants import DEFAULT_FEE_POLICY, ZERO

HOUR = 60 * 60
DAY = 24 * HOUR


def fee_policy():
    """DEFAULT_FEE_POLICY merged with settings.FRONT_DESK_FEES."""
    policy = dict(DEFAULT_FEE_POLICY)
    policy.update(getattr(settings, "FRONT_DESK_FEES", None) or {})
    return policy


def _rate(policy, key) -> Decimal:
    return Decimal(str(policy[key]))


def early_checkin_fee(scheduled_check_in, now=None) -> Decimal:
    """Every started hour before the scheduled check-in is charged."""
    now = now or timezone.now()
    if now >= scheduled_check_in:
        return ZERO
    hours_early = math.ceil((scheduled_check_in - now).total_seconds() / HOUR)
    return hours_early * _rate(fee_policy(), "EARLY_CHECKIN_PER_HOUR")


def is_late_checkin(scheduled_check_in, now=None) -> bool:
    now = now or timezone.now()
    return (now - scheduled_check_in) > timedelta(days=1)


def late_checkin_fee(scheduled_check_in, now=None) -> Decimal:
    """More than one day late: every started day after the first is charged."""
    now = now or timezone.now()
    if not is_late_checkin(scheduled_check_in, now):
        return ZERO
    days_late = math.ceil((now - scheduled_check_in).total_seconds() / DAY) - 1
    return days_late * _rate(fee_policy(), "LATE_CHECKIN_PER_DAY")


def standard_checkout_time(scheduled_check_out):
    """Scheduled checkout date at the standard checkout hour, local time."""
    policy = fee_policy()
    local = timezone.localtime(scheduled_check_out)
    return local.replace(hour=int(policy["STANDARD_CHECKOUT_HOUR"]), minute=0, second=0, microsecond=0)


def late_checkout_fee(scheduled_check_out, now=None) -> Decimal:
    """Every started hour past the standard checkout time is charged."""
    now = now or timezone.now()
    deadline = standard_checkout_time(scheduled_check_out)
    if now <= deadline:
        return ZERO
    hours_late = math.ceil((now - deadline).total_seconds() / HOUR)
    return hours_late * _rate(fee_policy(), "LATE_CHECKOUT_PER_HOUR")


def stay_days(check_in, now=None) -> int:
    now = now or timezone.now()
    return max(math.ceil((now - check_in).total_seconds() / DAY), 0)
