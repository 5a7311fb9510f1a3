from django.contrib import admin

from .models import (
    CashFlow,
    ComplementaryItem,
    Customer,
    IncidentLog,
    Payment,
    QuickOrder,
    Reservation,
    Room,
    RoomClass,
)


# ----------------------------
# Rooms
# ----------------------------

@admin.register(RoomClass)
class RoomClassAdmin(admin.ModelAdmin):
    list_display = ("name", "rate_per_night", "rate_day_use", "max_occupancy")
    search_fields = ("name",)


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("number", "floor", "room_class", "status", "is_active")
    list_filter = ("status", "room_class", "is_active")
    search_fields = ("number",)
    ordering = ("floor", "number")


# ----------------------------
# Guests & reservations
# ----------------------------

@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("full_name", "phone", "email", "is_vip")
    list_filter = ("is_vip",)
    search_fields = ("first_name", "last_name", "phone", "identity_number")


@admin.register(ComplementaryItem)
class ComplementaryItemAdmin(admin.ModelAdmin):
    list_display = ("name", "rate", "is_optional")
    search_fields = ("name",)


class QuickOrderInline(admin.TabularInline):
    model = QuickOrder
    extra = 0
    fields = ("description", "quantity", "unit_price", "total_amount", "status")


@admin.register(Reservation)
class ReservationAdmin(admin.ModelAdmin):
    list_display = (
        "booking_number",
        "customer",
        "room",
        "status",
        "check_in_date",
        "check_out_date",
        "total_amount",
        "advance_amount",
        "balance_amount",
        "payment_status",
    )
    list_filter = ("status", "payment_status", "check_in_date")
    search_fields = ("booking_number", "customer__first_name", "customer__last_name", "customer__phone")
    autocomplete_fields = ("customer", "room")
    filter_horizontal = ("complementary_items",)
    readonly_fields = (
        "actual_check_in",
        "actual_check_out",
        "checked_in_by",
        "checked_out_by",
        "created_at",
        "updated_at",
    )
    ordering = ("-check_in_date",)
    inlines = [QuickOrderInline]


# ----------------------------
# Money movements
# ----------------------------

@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("reservation", "amount", "payment_method", "payment_type", "received_by", "created_at")
    list_filter = ("payment_method", "payment_type")
    search_fields = ("reservation__booking_number",)


@admin.register(CashFlow)
class CashFlowAdmin(admin.ModelAdmin):
    list_display = ("staff", "transaction_type", "amount", "payment_method", "reference_type", "reference_id", "created_at")
    list_filter = ("transaction_type", "payment_method")


@admin.register(IncidentLog)
class IncidentLogAdmin(admin.ModelAdmin):
    list_display = ("reservation", "room", "incident_type", "amount", "status", "created_at")
    list_filter = ("incident_type", "status")
