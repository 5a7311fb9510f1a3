# frontoffice/services.py
#
# Check-in / checkout transactions. The views validate input with the forms,
# then hand the calculator inputs and the acting staff member to these.

import logging

from django.db import transaction
from django.utils import timezone

from .billing import BillingAdjustments, CheckinChecklist, can_finalize, settle
from .constants import (
    CashFlowDirection,
    IncidentStatus,
    IncidentType,
    PaymentStatus,
    PaymentType,
    ReservationStatus,
    RoomStatus,
    ZERO,
)
from .models import CashFlow, IncidentLog, Payment, Reservation
from .realtime import push_front_desk_board

logger = logging.getLogger(__name__)


class FrontDeskError(Exception):
    status_code = 400

    def __init__(self, message, **extra):
        super().__init__(message)
        self.message = message
        self.extra = extra


class ReservationNotFound(FrontDeskError):
    status_code = 404


class ReservationNotEligible(FrontDeskError):
    """Reservation is not in a state that allows the requested transition."""


class CheckinNotVerified(FrontDeskError):
    pass


def _locked_reservation(reservation_id):
    reservation = (
        Reservation.objects.select_for_update()
        .select_related("room", "customer")
        .filter(pk=reservation_id)
        .first()
    )
    if reservation is None:
        raise ReservationNotFound("Reservation not found")
    return reservation


def _record_payment(reservation, adjustments, actor, payment_type, remarks):
    amount = adjustments.payment_collected_now
    Payment.objects.create(
        reservation=reservation,
        customer=reservation.customer,
        amount=amount,
        payment_method=adjustments.payment_method,
        payment_type=payment_type,
        remarks=remarks,
        received_by=actor,
    )
    CashFlow.objects.create(
        staff=actor,
        transaction_type=CashFlowDirection.INFLOW,
        amount=amount,
        payment_method=adjustments.payment_method,
        reference_type="RESERVATION",
        reference_id=reservation.id,
        remarks=f"{PaymentType(payment_type).label} for reservation {reservation.booking_number}",
    )


def _apply_billing(reservation, charges, adjustments):
    """Post fees and payment onto the reservation. Returns the BillingResult."""
    result = settle(charges, adjustments)

    reservation.extra_charges = reservation.extra_charges + adjustments.fees_total()
    reservation.total_amount = result.final_total
    reservation.balance_amount = result.remaining_balance

    if adjustments.payment_collected_now > ZERO:
        reservation.advance_amount = reservation.advance_amount + adjustments.payment_collected_now
        reservation.payment_method = adjustments.payment_method
        reservation.payment_status = PaymentStatus.PAID if result.is_settled else PaymentStatus.PARTIAL
    return result


def perform_checkin(reservation_id, adjustments: BillingAdjustments, checklist: CheckinChecklist,
                    actor, *, payment_remarks="", staff_notes=""):
    """
    CONFIRMED -> CHECKED_IN, room AVAILABLE -> OCCUPIED.
    Raises CheckinNotVerified when identity/guest confirmation is missing.
    """
    if not can_finalize(checklist):
        raise CheckinNotVerified("Guest confirmation and identity verification are required")

    with transaction.atomic():
        reservation = _locked_reservation(reservation_id)
        reason = reservation.checkin_block_reason()
        if reason:
            logger.warning("check-in refused for reservation %s: %s", reservation.id, reason)
            raise ReservationNotEligible(
                reason, current_status=reservation.status, room_status=reservation.room.status
            )

        charges = reservation.checkin_charges()
        result = _apply_billing(reservation, charges, adjustments)

        reservation.status = ReservationStatus.CHECKED_IN
        reservation.actual_check_in = timezone.now()
        reservation.checked_in_by = actor
        if staff_notes:
            reservation.append_remarks("Check-in Notes", staff_notes)
        reservation.save()

        room = reservation.room
        room.status = RoomStatus.OCCUPIED
        room.save(update_fields=["status", "updated_at"])

        if adjustments.payment_collected_now > ZERO:
            _record_payment(
                reservation, adjustments, actor,
                PaymentType.CHECKIN_PAYMENT, payment_remarks or "Check-in payment",
            )

        transaction.on_commit(push_front_desk_board)

    logger.info(
        "reservation %s checked in by user %s (total=%s balance=%s)",
        reservation.id, getattr(actor, "pk", None), result.final_total, result.remaining_balance,
    )
    return reservation, {
        "original_amount": charges.base_total_amount,
        "early_checkin_fee": adjustments.early_arrival_fee,
        "late_checkin_fee": adjustments.late_arrival_fee,
        "additional_charges": adjustments.misc_additional_charges,
        "total_additional_charges": adjustments.fees_total(),
        "updated_total_amount": result.final_total,
        "advance_paid": charges.advance_paid,
        "checkin_payment": adjustments.payment_collected_now,
        "final_balance": result.remaining_balance,
        "key_card_issued": checklist.key_card_issued,
        "room_inspected": checklist.room_inspected,
    }


def perform_checkout(reservation_id, adjustments: BillingAdjustments, actor, *,
                     payment_remarks="", staff_notes="", damage_description=""):
    """
    CHECKED_IN -> CHECKED_OUT, room OCCUPIED -> AVAILABLE.
    Never blocked by an outstanding balance.
    """
    with transaction.atomic():
        reservation = _locked_reservation(reservation_id)
        reason = reservation.checkout_block_reason()
        if reason:
            logger.warning("checkout refused for reservation %s: %s", reservation.id, reason)
            raise ReservationNotEligible(reason, current_status=reservation.status)

        quick_orders_total = reservation.quick_orders_total()
        complementary_total = reservation.complementary_total()
        original_amount = reservation.total_amount
        charges = reservation.checkout_charges(quick_orders_total, complementary_total)
        result = _apply_billing(reservation, charges, adjustments)

        reservation.status = ReservationStatus.CHECKED_OUT
        reservation.actual_check_out = timezone.now()
        reservation.checked_out_by = actor
        if staff_notes:
            reservation.append_remarks("Checkout Notes", staff_notes)
        reservation.save()

        room = reservation.room
        room.status = RoomStatus.AVAILABLE
        room.save(update_fields=["status", "updated_at"])

        if adjustments.payment_collected_now > ZERO:
            _record_payment(
                reservation, adjustments, actor,
                PaymentType.CHECKOUT_PAYMENT, payment_remarks or "Checkout payment",
            )

        if adjustments.damage_fee > ZERO:
            IncidentLog.objects.create(
                reservation=reservation,
                room=room,
                incident_type=IncidentType.DAMAGE,
                description=damage_description,
                amount=adjustments.damage_fee,
                status=IncidentStatus.RESOLVED,
            )

        transaction.on_commit(push_front_desk_board)

    if not result.is_settled:
        logger.info("reservation %s checked out with balance %s", reservation.id, result.remaining_balance)
    logger.info("reservation %s checked out by user %s", reservation.id, getattr(actor, "pk", None))
    return reservation, {
        "original_amount": original_amount,
        "quick_orders_total": quick_orders_total,
        "complementary_total": complementary_total,
        "additional_charges": adjustments.misc_additional_charges,
        "late_checkout_fee": adjustments.late_departure_fee,
        "damage_fee": adjustments.damage_fee,
        "final_total_amount": result.final_total,
        "advance_paid": charges.advance_paid,
        "checkout_payment": adjustments.payment_collected_now,
        "final_balance": result.remaining_balance,
    }
