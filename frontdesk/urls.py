from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="post_login", permanent=False)),
    path("admin/", admin.site.urls),
    path("", include("website.urls")),
    path("frontoffice/", include("frontoffice.urls")),
]
