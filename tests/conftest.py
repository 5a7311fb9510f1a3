from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from frontoffice.constants import ReservationStatus, RoomStatus
from frontoffice.models import Customer, Reservation, Room, RoomClass


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="desk", password="pass12345", role="FRONT_DESK"
    )


@pytest.fixture
def guest_role_user(django_user_model):
    # authenticated, but not allowed on the front desk
    user = django_user_model.objects.create_user(username="outsider", password="pass12345")
    user.role = ""
    user.save(update_fields=["role"])
    return user


@pytest.fixture
def desk_client(client, staff_user):
    client.force_login(staff_user)
    return client


@pytest.fixture
def room_class(db):
    return RoomClass.objects.create(name="Deluxe", rate_per_night=Decimal("7500.00"))


@pytest.fixture
def room(room_class):
    return Room.objects.create(number="101", floor="1", room_class=room_class)


@pytest.fixture
def customer(db):
    return Customer.objects.create(first_name="Nimal", last_name="Perera", phone="0771234567")


@pytest.fixture
def make_reservation(room, room_class, customer):
    counter = {"n": 0}

    def _make(**kwargs):
        counter["n"] += 1
        now = timezone.now()
        defaults = {
            "booking_number": f"BK-{counter['n']:04d}",
            "customer": customer,
            "room": room,
            "room_class": room_class,
            "check_in_date": now,
            "check_out_date": now + timedelta(days=2),
            "total_amount": Decimal("15000.00"),
            "advance_amount": Decimal("5000.00"),
            "status": ReservationStatus.CONFIRMED,
        }
        defaults.update(kwargs)
        return Reservation.objects.create(**defaults)

    return _make


@pytest.fixture
def confirmed_reservation(make_reservation):
    return make_reservation()


@pytest.fixture
def checked_in_reservation(make_reservation, room):
    room.status = RoomStatus.OCCUPIED
    room.save()
    now = timezone.now()
    return make_reservation(
        status=ReservationStatus.CHECKED_IN,
        check_in_date=now - timedelta(days=2),
        check_out_date=now + timedelta(days=1),
        actual_check_in=now - timedelta(days=2),
    )
