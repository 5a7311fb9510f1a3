from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from .billing import StayCharges
from .constants import (
    CashFlowDirection,
    IncidentStatus,
    IncidentType,
    PaymentMethod,
    PaymentStatus,
    PaymentType,
    QuickOrderStatus,
    ReservationStatus,
    RoomStatus,
    ZERO,
)


def _money_field(**kwargs):
    kwargs.setdefault("default", Decimal("0.00"))
    return models.DecimalField(max_digits=12, decimal_places=2, **kwargs)


# -----------------------------------
# Rooms
# -----------------------------------
class RoomClass(models.Model):
    name = models.CharField(max_length=80, unique=True)
    rate_per_night = _money_field()
    rate_day_use = _money_field()
    max_occupancy = models.PositiveSmallIntegerField(default=2)

    class Meta:
        ordering = ("name",)
        verbose_name_plural = "Room classes"

    def __str__(self):
        return self.name


class Room(models.Model):
    number = models.CharField(max_length=20, unique=True)  # e.g., "101"
    floor = models.CharField(max_length=10, blank=True)
    room_class = models.ForeignKey(RoomClass, on_delete=models.PROTECT, related_name="rooms")
    status = models.CharField(
        max_length=20, choices=RoomStatus.choices, default=RoomStatus.AVAILABLE, db_index=True
    )
    is_active = models.BooleanField(default=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("floor", "number")

    def __str__(self):
        return f"Room {self.number}"


# -----------------------------------
# Guests
# -----------------------------------
class Customer(models.Model):
    first_name = models.CharField(max_length=80)
    last_name = models.CharField(max_length=80, blank=True)
    phone = models.CharField(max_length=20, db_index=True)
    email = models.EmailField(blank=True)
    nationality = models.CharField(max_length=60, blank=True)
    identity_type = models.CharField(max_length=30, blank=True)
    identity_number = models.CharField(max_length=40, blank=True)
    is_vip = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("first_name", "last_name")

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()


class ComplementaryItem(models.Model):
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=200, blank=True)
    rate = _money_field()
    is_optional = models.BooleanField(default=True)

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return f"{self.name} ({self.rate})"


# -----------------------------------
# Reservation
# -----------------------------------
class Reservation(models.Model):
    booking_number = models.CharField(max_length=32, unique=True)
    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name="reservations")
    room = models.ForeignKey(Room, on_delete=models.PROTECT, related_name="reservations")
    room_class = models.ForeignKey(RoomClass, on_delete=models.PROTECT, related_name="reservations")
    complementary_items = models.ManyToManyField(ComplementaryItem, blank=True, related_name="reservations")

    check_in_date = models.DateTimeField()
    check_out_date = models.DateTimeField()
    actual_check_in = models.DateTimeField(null=True, blank=True)
    actual_check_out = models.DateTimeField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=ReservationStatus.choices,
        default=ReservationStatus.CONFIRMED,
        db_index=True,
    )

    # --- Money ---
    total_amount = _money_field()
    advance_amount = _money_field()
    extra_charges = _money_field()
    balance_amount = _money_field()
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices, blank=True, default="")
    payment_status = models.CharField(
        max_length=10, choices=PaymentStatus.choices, default=PaymentStatus.PENDING
    )

    remarks = models.TextField(blank=True)

    booked_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="+"
    )
    checked_in_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="+"
    )
    checked_out_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="+"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-check_in_date"]
        indexes = [
            models.Index(fields=["status", "check_in_date"], name="frontoffice_status_ci_idx"),
            models.Index(fields=["status", "check_out_date"], name="frontoffice_status_co_idx"),
        ]

    def __str__(self):
        return f"{self.booking_number} — {self.customer} / {self.room} — {self.get_status_display()}"

    # ---- Validation ----
    def clean(self):
        if self.check_in_date and self.check_out_date and self.check_out_date <= self.check_in_date:
            raise ValidationError("Check-out must be after check-in.")
        for field in ("total_amount", "advance_amount", "extra_charges", "balance_amount"):
            if (getattr(self, field) or ZERO) < 0:
                raise ValidationError({field: "Amount cannot be negative."})

    # ---- Billing helpers ----
    def quick_orders_total(self) -> Decimal:
        """Sum of non-cancelled quick orders for this stay."""
        total = (
            self.quick_orders.exclude(status=QuickOrderStatus.CANCELLED)
            .aggregate(total=models.Sum("total_amount"))["total"]
        )
        return total or ZERO

    def complementary_total(self) -> Decimal:
        total = self.complementary_items.aggregate(total=models.Sum("rate"))["total"]
        return total or ZERO

    def checkin_charges(self) -> StayCharges:
        return StayCharges(
            base_total_amount=self.total_amount,
            advance_paid=self.advance_amount,
        )

    def checkout_charges(self, quick_orders_total=None, complementary_total=None) -> StayCharges:
        """
        Quick orders and complementary items are folded into the base
        at checkout and reported separately as prior adjustments.
        Pass the totals in when the caller already has them.
        """
        if quick_orders_total is None:
            quick_orders_total = self.quick_orders_total()
        if complementary_total is None:
            complementary_total = self.complementary_total()
        prior = quick_orders_total + complementary_total
        return StayCharges(
            base_total_amount=self.total_amount + prior,
            advance_paid=self.advance_amount,
            prior_adjustments_total=prior,
        )

    # ---- Eligibility ----
    def checkin_block_reason(self):
        if self.status == ReservationStatus.CHECKED_IN:
            return "This guest is already checked in"
        if self.status == ReservationStatus.CHECKED_OUT:
            return "This reservation has already been checked out"
        if self.status == ReservationStatus.CANCELLED:
            return "This reservation has been cancelled and cannot be checked in"
        if self.status != ReservationStatus.CONFIRMED:
            return f"Cannot check in reservation with status '{self.status}'"
        if self.room.status != RoomStatus.AVAILABLE:
            return f"Room {self.room.number} is not available (Status: {self.room.status})"
        return None

    def checkout_block_reason(self):
        if self.status != ReservationStatus.CHECKED_IN:
            return "Reservation is not checked in or already checked out"
        return None

    def append_remarks(self, label, notes):
        line = f"{label}: {notes}"
        self.remarks = f"{self.remarks}\n\n{line}" if self.remarks else line


class QuickOrder(models.Model):
    reservation = models.ForeignKey(Reservation, on_delete=models.CASCADE, related_name="quick_orders")
    description = models.CharField(max_length=200)
    quantity = models.PositiveIntegerField(default=1)
    unit_price = _money_field()
    total_amount = _money_field()
    status = models.CharField(
        max_length=12, choices=QuickOrderStatus.choices, default=QuickOrderStatus.PENDING
    )
    created_at = models.DateTimeField(auto_now_add=True)
    delivered_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.description} × {self.quantity}"

    def save(self, *args, **kwargs):
        if not self.total_amount:
            self.total_amount = (self.unit_price or ZERO) * self.quantity
        super().save(*args, **kwargs)


# -----------------------------------
# Money movements
# -----------------------------------
class Payment(models.Model):
    reservation = models.ForeignKey(Reservation, on_delete=models.PROTECT, related_name="payments")
    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name="payments")
    amount = _money_field()
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    payment_type = models.CharField(max_length=20, choices=PaymentType.choices)
    payment_status = models.CharField(max_length=12, default="COMPLETED")
    remarks = models.CharField(max_length=200, blank=True)
    received_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True, on_delete=models.SET_NULL, related_name="+"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.get_payment_type_display()} {self.amount} ({self.payment_method})"


class CashFlow(models.Model):
    staff = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="cash_flows")
    transaction_type = models.CharField(max_length=10, choices=CashFlowDirection.choices)
    amount = _money_field()
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    reference_type = models.CharField(max_length=30, default="RESERVATION")
    reference_id = models.PositiveIntegerField()
    remarks = models.CharField(max_length=200, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [models.Index(fields=["reference_type", "reference_id"], name="frontoffice_cashflow_ref_idx")]


class IncidentLog(models.Model):
    reservation = models.ForeignKey(Reservation, on_delete=models.CASCADE, related_name="incidents")
    room = models.ForeignKey(Room, on_delete=models.PROTECT, related_name="incidents")
    incident_type = models.CharField(max_length=20, choices=IncidentType.choices)
    description = models.TextField(blank=True)
    amount = _money_field()
    status = models.CharField(max_length=10, choices=IncidentStatus.choices, default=IncidentStatus.OPEN)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.get_incident_type_display()} — {self.room} ({self.amount})"
