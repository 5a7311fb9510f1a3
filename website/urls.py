from django.urls import path

from . import views

urlpatterns = [
    path("login/", views.FrontDeskLoginView.as_view(), name="login"),
    path("logout/", views.signout, name="logout"),
    path("post-login/", views.post_login_redirect, name="post_login"),
]
