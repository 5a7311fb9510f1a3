from django.contrib.auth import logout
from django.contrib.auth.decorators import login_required
from django.contrib.auth.views import LoginView
from django.shortcuts import redirect

from .models import User


class FrontDeskLoginView(LoginView):
    template_name = "registration/login.html"


def signout(request):
    logout(request)          # clears the session
    return redirect("login")


@login_required
def post_login_redirect(request):
    """
    After login, send user to the correct page based on role:
      - front desk roles -> billing list
      - anyone else -> admin site (staff) or login
    """
    user: User = request.user

    if user.is_front_desk_user():
        return redirect("billing_list")

    if user.is_staff:
        return redirect("admin:index")

    return redirect("login")
