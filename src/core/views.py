"""Core views."""

from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import redirect
from django.urls import reverse


def home(request):
    """Redirect home to the wiki front page."""
    return redirect(reverse("view", kwargs={"title": settings.WIKI_FRONT_PAGE}))


def health(request):
    """Health check endpoint."""
    return JsonResponse({"status": "ok"})
