# frontoffice/views.py
#
# Check-in / checkout JSON endpoints keyed by reservation id.

import json
import logging

from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods, require_POST

from frontoffice.decorators import front_desk_required

from . import fees
from .billing import BillingAdjustments, can_finalize, settle
from .constants import QuickOrderStatus
from .forms import CheckinForm, CheckoutForm
from .models import Reservation
from .services import FrontDeskError, perform_checkin, perform_checkout

logger = logging.getLogger(__name__)


def _f(val):
    return float(val or 0)


def _iso(dt):
    return dt.isoformat() if dt else None


def _payload(request):
    """POST body as a dict: JSON when sent as JSON, form data otherwise."""
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body or b"{}")
        except ValueError:
            return None
        return data if isinstance(data, dict) else None
    return request.POST


def _error(message, status=400, **extra):
    return JsonResponse({"success": False, "error": message, **extra}, status=status)


def _form_errors(form):
    return JsonResponse(
        {"success": False, "error": "Please correct the highlighted fields.", "errors": form.errors},
        status=400,
    )


def _get_reservation(pk):
    return (
        Reservation.objects
        .select_related("customer", "room", "room__room_class", "room_class", "booked_by")
        .filter(pk=pk)
        .first()
    )


def _serialize_reservation(r):
    c = r.customer
    return {
        "id": r.id,
        "booking_number": r.booking_number,
        "status": r.status,
        "check_in_date": _iso(r.check_in_date),
        "check_out_date": _iso(r.check_out_date),
        "actual_check_in": _iso(r.actual_check_in),
        "actual_check_out": _iso(r.actual_check_out),
        "total_amount": _f(r.total_amount),
        "advance_amount": _f(r.advance_amount),
        "extra_charges": _f(r.extra_charges),
        "balance_amount": _f(r.balance_amount),
        "payment_method": r.payment_method,
        "payment_status": r.payment_status,
        "remarks": r.remarks,
        "customer": {
            "id": c.id,
            "name": c.full_name,
            "phone": c.phone,
            "email": c.email,
            "is_vip": c.is_vip,
            "nationality": c.nationality,
            "identity_type": c.identity_type,
            "identity_number": c.identity_number,
        },
        "room": {
            "id": r.room.id,
            "number": r.room.number,
            "floor": r.room.floor,
            "status": r.room.status,
        },
        "room_class": {
            "id": r.room_class.id,
            "name": r.room_class.name,
            "rate_per_night": _f(r.room_class.rate_per_night),
            "rate_day_use": _f(r.room_class.rate_day_use),
        },
        "complementary_items": [
            {"id": it.id, "name": it.name, "rate": _f(it.rate), "is_optional": it.is_optional}
            for it in r.complementary_items.all()
        ],
    }


def _summary_json(summary):
    return {k: (v if isinstance(v, bool) else _f(v)) for k, v in summary.items()}


# -----------------------------
# Check-in
# -----------------------------
def _checkin_snapshot(reservation):
    now = timezone.now()
    data = _serialize_reservation(reservation)
    early_fee = fees.early_checkin_fee(reservation.check_in_date, now)
    late_fee = fees.late_checkin_fee(reservation.check_in_date, now)
    data.update({
        "is_early_check_in": now < reservation.check_in_date,
        "is_late_check_in": fees.is_late_checkin(reservation.check_in_date, now),
        "early_checkin_fee": _f(early_fee),
        "late_checkin_fee": _f(late_fee),
        "current_date_time": now.isoformat(),
    })
    return data


@login_required
@front_desk_required
@require_http_methods(["GET", "POST"])
def reservation_checkin(request, pk):
    """
    GET: check-in snapshot with suggested early/late fees.
    POST: validate the form and check the guest in.
    """
    if request.method == "GET":
        reservation = _get_reservation(pk)
        if reservation is None:
            return _error("Reservation not found", status=404)
        reason = reservation.checkin_block_reason()
        if reason:
            return _error(reason, current_status=reservation.status, room_status=reservation.room.status)
        return JsonResponse({"success": True, "reservation": _checkin_snapshot(reservation)})

    data = _payload(request)
    if data is None:
        return _error("Invalid request body")
    form = CheckinForm(data)
    if not form.is_valid():
        return _form_errors(form)

    try:
        reservation, summary = perform_checkin(
            pk,
            form.to_adjustments(),
            form.to_checklist(),
            request.user,
            payment_remarks=form.cleaned_data["payment_remarks"],
            staff_notes=form.cleaned_data["staff_notes"],
        )
    except FrontDeskError as exc:
        return _error(exc.message, status=exc.status_code, **exc.extra)
    except DatabaseError:
        logger.exception("check-in failed for reservation %s", pk)
        return _error("Could not save the check-in. Please try again.", status=503)

    return JsonResponse({
        "success": True,
        "message": "Guest checked in successfully",
        "reservation": _serialize_reservation(reservation),
        "checkin_summary": _summary_json(summary),
    })


# -----------------------------
# Checkout
# -----------------------------
def _checkout_snapshot(reservation):
    now = timezone.now()
    data = _serialize_reservation(reservation)
    quick_orders_total = reservation.quick_orders_total()
    complementary_total = reservation.complementary_total()
    charges = reservation.checkout_charges(quick_orders_total, complementary_total)
    late_fee = fees.late_checkout_fee(reservation.check_out_date, now)
    suggested = settle(charges, BillingAdjustments(late_departure_fee=late_fee))
    quick_orders = reservation.quick_orders.exclude(status=QuickOrderStatus.CANCELLED).order_by("-created_at")

    data.update({
        "quick_orders": [
            {
                "id": o.id,
                "description": o.description,
                "quantity": o.quantity,
                "unit_price": _f(o.unit_price),
                "total_amount": _f(o.total_amount),
                "status": o.status,
                "created_at": _iso(o.created_at),
                "delivered_at": _iso(o.delivered_at),
            }
            for o in quick_orders
        ],
        "quick_orders_total": _f(quick_orders_total),
        "complementary_total": _f(complementary_total),
        "late_checkout_fee": _f(late_fee),
        "actual_stay_days": fees.stay_days(reservation.check_in_date, now),
        "base_total_amount": _f(charges.base_total_amount),
        "updated_total_amount": _f(suggested.final_total),
        "final_balance_amount": _f(suggested.remaining_balance),
    })
    return data


@login_required
@front_desk_required
@require_http_methods(["GET", "POST"])
def reservation_checkout(request, pk):
    """
    GET: checkout snapshot (quick orders, late fee, running totals).
    POST: settle and check the guest out. An unpaid balance does not block.
    """
    if request.method == "GET":
        reservation = _get_reservation(pk)
        if reservation is None:
            return _error("Reservation not found", status=404)
        reason = reservation.checkout_block_reason()
        if reason:
            return _error(reason, current_status=reservation.status)
        return JsonResponse({"success": True, "reservation": _checkout_snapshot(reservation)})

    data = _payload(request)
    if data is None:
        return _error("Invalid request body")
    form = CheckoutForm(data)
    if not form.is_valid():
        return _form_errors(form)

    try:
        reservation, summary = perform_checkout(
            pk,
            form.to_adjustments(),
            request.user,
            payment_remarks=form.cleaned_data["payment_remarks"],
            staff_notes=form.cleaned_data["staff_notes"],
            damage_description=form.cleaned_data["damage_description"],
        )
    except FrontDeskError as exc:
        return _error(exc.message, status=exc.status_code, **exc.extra)
    except DatabaseError:
        logger.exception("checkout failed for reservation %s", pk)
        return _error("Could not save the checkout. Please try again.", status=503)

    return JsonResponse({
        "success": True,
        "message": "Guest checked out successfully",
        "reservation": _serialize_reservation(reservation),
        "checkout_summary": _summary_json(summary),
        "has_outstanding_balance": summary["final_balance"] > 0,
    })


# -----------------------------
# Live quote (no persistence)
# -----------------------------
@login_required
@front_desk_required
@require_POST
def reservation_quote(request, pk, action):
    """
    Recompute final total / balance for the form as currently filled.
    Nothing is saved.
    """
    reservation = _get_reservation(pk)
    if reservation is None:
        return _error("Reservation not found", status=404)

    data = _payload(request)
    if data is None:
        return _error("Invalid request body")

    if action == "checkin":
        reason = reservation.checkin_block_reason()
    else:
        reason = reservation.checkout_block_reason()
    if reason:
        return _error(reason, current_status=reservation.status)

    if action == "checkin":
        form = CheckinForm(data)
        if not form.is_valid():
            return _form_errors(form)
        charges = reservation.checkin_charges()
    else:
        form = CheckoutForm(data)
        if not form.is_valid():
            return _form_errors(form)
        charges = reservation.checkout_charges()

    result = settle(charges, form.to_adjustments())
    out = {
        "success": True,
        "base_total_amount": _f(charges.base_total_amount),
        "advance_paid": _f(charges.advance_paid),
        "final_total": _f(result.final_total),
        "remaining_balance": _f(result.remaining_balance),
        "has_outstanding_balance": not result.is_settled,
    }
    if action == "checkin":
        out["can_finalize"] = can_finalize(form.to_checklist())
    return JsonResponse(out)
