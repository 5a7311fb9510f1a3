# frontoffice/billing.py
#
# Stay billing calculator used by check-in, checkout and the live quote
# endpoint. Pure functions over Decimal amounts; callers validate input
# (non-negative, finite) before calling in.

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .constants import PaymentMethod, ZERO


def _money(v) -> Decimal:
    """Coerce to Decimal, safe for None."""
    if v is None:
        return ZERO
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


@dataclass(frozen=True)
class StayCharges:
    """Read-only snapshot of what a reservation already owes and has paid."""

    base_total_amount: Decimal = ZERO
    advance_paid: Decimal = ZERO
    prior_adjustments_total: Decimal = ZERO

    def __post_init__(self):
        object.__setattr__(self, "base_total_amount", _money(self.base_total_amount))
        object.__setattr__(self, "advance_paid", _money(self.advance_paid))
        object.__setattr__(self, "prior_adjustments_total", _money(self.prior_adjustments_total))


@dataclass
class BillingAdjustments:
    """Staff-entered fees and payment for one check-in or checkout session."""

    early_arrival_fee: Decimal = ZERO
    late_arrival_fee: Decimal = ZERO
    late_departure_fee: Decimal = ZERO
    damage_fee: Decimal = ZERO
    misc_additional_charges: Decimal = ZERO
    payment_collected_now: Decimal = ZERO
    payment_method: str = PaymentMethod.CASH

    FEE_FIELDS = (
        "early_arrival_fee",
        "late_arrival_fee",
        "late_departure_fee",
        "damage_fee",
        "misc_additional_charges",
    )

    def __post_init__(self):
        for name in self.FEE_FIELDS + ("payment_collected_now",):
            setattr(self, name, _money(getattr(self, name)))

    def fees_total(self) -> Decimal:
        return sum((getattr(self, name) for name in self.FEE_FIELDS), ZERO)


@dataclass(frozen=True)
class BillingResult:
    final_total: Decimal
    remaining_balance: Decimal

    @property
    def is_settled(self) -> bool:
        return self.remaining_balance == ZERO


@dataclass(frozen=True)
class CheckinChecklist:
    identity_verified: bool = False
    guest_confirmed: bool = False
    room_inspected: bool = False
    key_card_issued: bool = False


def compute_final_total(charges: StayCharges, adjustments: BillingAdjustments,
                        rounding: Optional[Decimal] = None) -> Decimal:
    """
    base_total_amount + every fee on the adjustments.

    No rounding is applied unless `rounding` is given as a quantum
    (e.g. Decimal("0.01")), in which case the total is quantized HALF_UP.
    """
    total = charges.base_total_amount + adjustments.fees_total()
    if rounding is not None:
        total = total.quantize(rounding, rounding=ROUND_HALF_UP)
    return total


def compute_remaining_balance(final_total: Decimal, charges: StayCharges,
                              adjustments: BillingAdjustments) -> Decimal:
    """
    final_total - advance - payment collected now, never negative.
    Overpayment clamps to zero; it is not carried as a credit.
    """
    balance = _money(final_total) - charges.advance_paid - adjustments.payment_collected_now
    if balance < ZERO:
        return ZERO
    return balance


def settle(charges: StayCharges, adjustments: BillingAdjustments,
           rounding: Optional[Decimal] = None) -> BillingResult:
    final_total = compute_final_total(charges, adjustments, rounding=rounding)
    return BillingResult(
        final_total=final_total,
        remaining_balance=compute_remaining_balance(final_total, charges, adjustments),
    )


def can_finalize(checklist: CheckinChecklist) -> bool:
    # room_inspected / key_card_issued are recorded but do not gate check-in
    return bool(checklist.identity_verified and checklist.guest_confirmed)
