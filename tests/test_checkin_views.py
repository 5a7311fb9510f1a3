from datetime import timedelta
from decimal import Decimal

import pytest
from django.urls import reverse
from django.utils import timezone

from frontoffice.constants import (
    CashFlowDirection,
    PaymentStatus,
    PaymentType,
    ReservationStatus,
    RoomStatus,
)
from frontoffice.models import CashFlow, Payment

pytestmark = pytest.mark.django_db

VERIFIED = {"identity_verified": True, "guest_confirmation": True}


def checkin_url(pk):
    return reverse("reservation_checkin", args=[pk])


def post_json(client, url, data):
    return client.post(url, data=data, content_type="application/json")


# -----------------------------
# GET snapshot
# -----------------------------
def test_anonymous_is_redirected_to_login(client, confirmed_reservation):
    resp = client.get(checkin_url(confirmed_reservation.pk))
    assert resp.status_code == 302
    assert reverse("login") in resp["Location"]


def test_non_front_desk_role_is_redirected(client, guest_role_user, confirmed_reservation):
    client.force_login(guest_role_user)
    resp = client.get(checkin_url(confirmed_reservation.pk))
    assert resp.status_code == 302


def test_snapshot_for_unknown_reservation(desk_client):
    resp = desk_client.get(checkin_url(9999))
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Reservation not found"}


def test_snapshot_suggests_early_fee(desk_client, make_reservation):
    reservation = make_reservation(check_in_date=timezone.now() + timedelta(hours=3, minutes=-1))
    resp = desk_client.get(checkin_url(reservation.pk))
    assert resp.status_code == 200
    data = resp.json()["reservation"]
    assert data["is_early_check_in"] is True
    assert data["is_late_check_in"] is False
    assert data["early_checkin_fee"] == 300.0
    assert data["late_checkin_fee"] == 0.0
    assert data["customer"]["name"] == "Nimal Perera"
    assert data["room"]["number"] == "101"


def test_snapshot_suggests_late_fee(desk_client, make_reservation):
    reservation = make_reservation(check_in_date=timezone.now() - timedelta(days=3) + timedelta(hours=1))
    data = desk_client.get(checkin_url(reservation.pk)).json()["reservation"]
    assert data["is_late_check_in"] is True
    assert data["late_checkin_fee"] == 1000.0
    assert data["early_checkin_fee"] == 0.0


def test_snapshot_refuses_checked_in_reservation(desk_client, checked_in_reservation):
    resp = desk_client.get(checkin_url(checked_in_reservation.pk))
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "This guest is already checked in"
    assert body["current_status"] == ReservationStatus.CHECKED_IN


# -----------------------------
# POST check-in
# -----------------------------
def test_checkin_without_fees_or_payment(desk_client, confirmed_reservation, room):
    resp = post_json(desk_client, checkin_url(confirmed_reservation.pk), VERIFIED)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    summary = body["checkin_summary"]
    assert summary["updated_total_amount"] == 15000.0
    assert summary["final_balance"] == 10000.0
    assert summary["total_additional_charges"] == 0.0

    confirmed_reservation.refresh_from_db()
    room.refresh_from_db()
    assert confirmed_reservation.status == ReservationStatus.CHECKED_IN
    assert confirmed_reservation.actual_check_in is not None
    assert confirmed_reservation.balance_amount == Decimal("10000.00")
    assert room.status == RoomStatus.OCCUPIED
    # nothing collected, nothing recorded
    assert not Payment.objects.exists()
    assert not CashFlow.objects.exists()


def test_checkin_with_late_fee_and_full_payment(desk_client, staff_user, confirmed_reservation):
    data = dict(VERIFIED, late_checkin_fee=2000, payment_amount=12000, payment_method="CASH",
                key_card_issued=True)
    resp = post_json(desk_client, checkin_url(confirmed_reservation.pk), data)
    assert resp.status_code == 200
    summary = resp.json()["checkin_summary"]
    assert summary["original_amount"] == 15000.0
    assert summary["late_checkin_fee"] == 2000.0
    assert summary["updated_total_amount"] == 17000.0
    assert summary["advance_paid"] == 5000.0
    assert summary["checkin_payment"] == 12000.0
    assert summary["final_balance"] == 0.0
    assert summary["key_card_issued"] is True
    assert summary["room_inspected"] is False

    r = confirmed_reservation
    r.refresh_from_db()
    assert r.total_amount == Decimal("17000.00")
    assert r.extra_charges == Decimal("2000.00")
    assert r.advance_amount == Decimal("17000.00")
    assert r.balance_amount == Decimal("0.00")
    assert r.payment_status == PaymentStatus.PAID
    assert r.checked_in_by == staff_user

    payment = Payment.objects.get(reservation=r)
    assert payment.amount == Decimal("12000.00")
    assert payment.payment_type == PaymentType.CHECKIN_PAYMENT
    assert payment.received_by == staff_user

    flow = CashFlow.objects.get(reference_id=r.pk)
    assert flow.transaction_type == CashFlowDirection.INFLOW
    assert flow.staff == staff_user
    assert flow.amount == Decimal("12000.00")


def test_overpayment_clamps_balance(desk_client, confirmed_reservation):
    data = dict(VERIFIED, late_checkin_fee=2000, payment_amount=20000, payment_method="MOBILE_PAYMENT")
    summary = post_json(desk_client, checkin_url(confirmed_reservation.pk), data).json()["checkin_summary"]
    assert summary["updated_total_amount"] == 17000.0
    assert summary["final_balance"] == 0.0


def test_partial_payment_marks_partial(desk_client, confirmed_reservation):
    data = dict(VERIFIED, payment_amount=4000, payment_method="DEBIT_CARD")
    post_json(desk_client, checkin_url(confirmed_reservation.pk), data)
    confirmed_reservation.refresh_from_db()
    assert confirmed_reservation.payment_status == PaymentStatus.PARTIAL
    assert confirmed_reservation.payment_method == "DEBIT_CARD"
    assert confirmed_reservation.balance_amount == Decimal("6000.00")


def test_checkin_requires_guest_confirmation(desk_client, confirmed_reservation, room):
    data = {"identity_verified": True, "guest_confirmation": False, "room_inspected": True,
            "key_card_issued": True}
    resp = post_json(desk_client, checkin_url(confirmed_reservation.pk), data)
    assert resp.status_code == 400
    assert resp.json()["success"] is False

    confirmed_reservation.refresh_from_db()
    room.refresh_from_db()
    assert confirmed_reservation.status == ReservationStatus.CONFIRMED
    assert room.status == RoomStatus.AVAILABLE


def test_checkin_refused_when_room_not_available(desk_client, confirmed_reservation, room):
    room.status = RoomStatus.MAINTENANCE
    room.save()
    resp = post_json(desk_client, checkin_url(confirmed_reservation.pk), VERIFIED)
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Room 101 is not available (Status: MAINTENANCE)"
    assert body["room_status"] == RoomStatus.MAINTENANCE


def test_checkin_refused_for_cancelled(desk_client, make_reservation):
    reservation = make_reservation(status=ReservationStatus.CANCELLED)
    resp = post_json(desk_client, checkin_url(reservation.pk), VERIFIED)
    assert resp.status_code == 400
    assert "cancelled" in resp.json()["error"]


def test_checkin_unknown_reservation(desk_client):
    resp = post_json(desk_client, checkin_url(9999), VERIFIED)
    assert resp.status_code == 404


def test_checkin_invalid_json(desk_client, confirmed_reservation):
    resp = desk_client.post(checkin_url(confirmed_reservation.pk), data="{oops",
                            content_type="application/json")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid request body"


def test_checkin_form_errors(desk_client, confirmed_reservation):
    data = dict(VERIFIED, payment_amount=500, early_checkin_fee=-5)
    resp = post_json(desk_client, checkin_url(confirmed_reservation.pk), data)
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert "payment_method" in errors
    assert "early_checkin_fee" in errors


def test_checkin_accepts_form_encoded_post(desk_client, confirmed_reservation):
    resp = desk_client.post(checkin_url(confirmed_reservation.pk), {
        "identity_verified": "on",
        "guest_confirmation": "on",
        "additional_charges": "250",
    })
    assert resp.status_code == 200
    assert resp.json()["checkin_summary"]["updated_total_amount"] == 15250.0


def test_staff_notes_appended_to_remarks(desk_client, make_reservation):
    reservation = make_reservation(remarks="Late flight")
    post_json(desk_client, checkin_url(reservation.pk), dict(VERIFIED, staff_notes="Extra pillows"))
    reservation.refresh_from_db()
    assert reservation.remarks == "Late flight\n\nCheck-in Notes: Extra pillows"


def test_board_pushed_after_commit(desk_client, confirmed_reservation, monkeypatch,
                                   django_capture_on_commit_callbacks):
    pushed = []
    monkeypatch.setattr("frontoffice.services.push_front_desk_board", lambda: pushed.append(True))
    with django_capture_on_commit_callbacks(execute=True):
        post_json(desk_client, checkin_url(confirmed_reservation.pk), VERIFIED)
    assert pushed == [True]


def test_no_push_when_refused(desk_client, checked_in_reservation, monkeypatch,
                              django_capture_on_commit_callbacks):
    pushed = []
    monkeypatch.setattr("frontoffice.services.push_front_desk_board", lambda: pushed.append(True))
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        post_json(desk_client, checkin_url(checked_in_reservation.pk), VERIFIED)
    assert callbacks == []
    assert pushed == []
