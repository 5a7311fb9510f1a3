# frontoffice/views_billing.py  (reservation billing list + CSV export)

import csv
from decimal import Decimal

from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.db.models import Count, Q, Sum
from django.http import HttpResponse
from django.shortcuts import render
from django.utils import timezone

from frontoffice.decorators import front_desk_required

from .constants import PaymentStatus
from .models import Reservation


def billing_queryset(params):
    """
    Build filtered Reservation queryset for the billing list and export.
    Filters (GET):
      - status: any ReservationStatus value, "" = all
      - paid: PAID / UNPAID / ALL (default ALL)
      - payment_method: CASH / CREDIT_CARD / ... / "" (all)
      - start, end: YYYY-MM-DD (applied on check_in_date__date)
      - q: search in booking number / guest name / phone / room number
    """
    qs = Reservation.objects.select_related("customer", "room", "room_class").order_by("-check_in_date")

    status = (params.get("status") or "").strip().upper()
    paid = (params.get("paid") or "ALL").strip().upper()
    payment_method = (params.get("payment_method") or "").strip().upper()
    start = (params.get("start") or "").strip()
    end = (params.get("end") or "").strip()
    q = (params.get("q") or "").strip()

    if status:
        qs = qs.filter(status=status)

    if paid == "PAID":
        qs = qs.filter(payment_status=PaymentStatus.PAID)
    elif paid == "UNPAID":
        qs = qs.exclude(payment_status=PaymentStatus.PAID)

    if payment_method:
        qs = qs.filter(payment_method=payment_method)

    # Django parses YYYY-MM-DD strings itself
    if start:
        qs = qs.filter(check_in_date__date__gte=start)
    if end:
        qs = qs.filter(check_in_date__date__lte=end)

    if q:
        qs = qs.filter(
            Q(booking_number__icontains=q)
            | Q(customer__first_name__icontains=q)
            | Q(customer__last_name__icontains=q)
            | Q(customer__phone__icontains=q)
            | Q(room__number__icontains=q)
        )

    return qs


@login_required
@front_desk_required
def billing_list(request):
    """
    Paginated reservation billing list with summary:
    total reservations, total billed, total collected, outstanding.
    """
    qs = billing_queryset(request.GET)

    summary = qs.aggregate(
        total_reservations=Count("id"),
        total_billed=Sum("total_amount"),
        total_collected=Sum("advance_amount"),
        total_outstanding=Sum("balance_amount"),
    )

    paginator = Paginator(qs, 25)
    page_obj = paginator.get_page(request.GET.get("page") or 1)

    ctx = {
        "page_obj": page_obj,
        "total_reservations": summary["total_reservations"] or 0,
        "total_billed": summary["total_billed"] or Decimal("0.00"),
        "total_collected": summary["total_collected"] or Decimal("0.00"),
        "total_outstanding": summary["total_outstanding"] or Decimal("0.00"),
        # keep current filters so the template can show them
        "status": (request.GET.get("status") or "").upper(),
        "paid": (request.GET.get("paid") or "ALL").upper(),
        "payment_method": (request.GET.get("payment_method") or "").upper(),
        "start": request.GET.get("start") or "",
        "end": request.GET.get("end") or "",
        "q": request.GET.get("q") or "",
    }
    return render(request, "frontoffice/billing_list.html", ctx)


def _local(dt):
    if not dt:
        return ""
    return timezone.localtime(dt).strftime("%Y-%m-%d %H:%M")


@login_required
@front_desk_required
def billing_export_csv(request):
    """Export the filtered billing list as CSV (same filters as the list page)."""
    qs = billing_queryset(request.GET)

    resp = HttpResponse(content_type="text/csv; charset=utf-8")
    resp["Content-Disposition"] = 'attachment; filename="reservation_billing.csv"'

    writer = csv.writer(resp)
    writer.writerow([
        "Booking No",
        "Guest Name",
        "Phone",
        "Room",
        "Status",
        "Check-in",
        "Check-out",
        "Actual Check-in",
        "Actual Check-out",
        "Extra Charges",
        "Total",
        "Collected",
        "Balance",
        "Payment Status",
        "Payment Method",
    ])

    for r in qs.iterator():
        writer.writerow([
            r.booking_number,
            r.customer.full_name,
            r.customer.phone,
            r.room.number,
            r.get_status_display(),
            _local(r.check_in_date),
            _local(r.check_out_date),
            _local(r.actual_check_in),
            _local(r.actual_check_out),
            str(r.extra_charges),
            str(r.total_amount),
            str(r.advance_amount),
            str(r.balance_amount),
            r.get_payment_status_display(),
            r.get_payment_method_display() if r.payment_method else "",
        ])

    return resp
