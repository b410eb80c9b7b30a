"""URL configuration for flatfile-wiki."""

from django.urls import path, re_path

from wiki import views as wiki_views
from wiki.services.page_storage import TITLE_PATTERN

from . import views as core_views

urlpatterns = [
    # Homepage redirects to the front page
    path("", core_views.home, name="home"),
    # Health check
    path("health/", core_views.health, name="health"),
    # Wiki pages
    re_path(rf"^view/(?P<title>{TITLE_PATTERN})$", wiki_views.view, name="view"),
    re_path(rf"^edit/(?P<title>{TITLE_PATTERN})$", wiki_views.edit, name="edit"),
    re_path(rf"^save/(?P<title>{TITLE_PATTERN})$", wiki_views.save, name="save"),
]
