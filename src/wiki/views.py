"""Wiki views."""

import logging

from django.contrib import messages
from django.http import HttpResponse, HttpResponseBadRequest, HttpResponseServerError
from django.shortcuts import redirect
from django.urls import reverse
from django.views.decorators.http import require_POST, require_safe

from .forms import PageForm
from .routing import title_handler
from .services.page_storage import Page, PageNotFoundError, get_storage_service
from .services.renderer import TemplateRenderError, get_renderer

logger = logging.getLogger(__name__)


def render_page(request, template_name: str, page: Page) -> HttpResponse:
    """Render a page template, turning template failures into a 500."""
    try:
        html = get_renderer().render(request, template_name, page)
    except TemplateRenderError as e:
        return HttpResponseServerError(str(e), content_type="text/plain; charset=utf-8")
    return HttpResponse(html)


@require_safe
@title_handler("view")
def view(request, title: str):
    """Display a wiki page."""
    storage = get_storage_service()

    try:
        page = storage.load(title)
    except PageNotFoundError:
        # Missing pages are created from the edit form
        return redirect(reverse("edit", kwargs={"title": title}))

    return render_page(request, "view", page)


@require_safe
@title_handler("edit")
def edit(request, title: str):
    """Show the edit form for a wiki page."""
    storage = get_storage_service()

    try:
        page = storage.load(title)
    except PageNotFoundError:
        page = Page(title=title)

    return render_page(request, "edit", page)


@require_POST
@title_handler("save")
def save(request, title: str):
    """Store a submitted page body and show the page."""
    form = PageForm(request.POST)
    if not form.is_valid():
        return HttpResponseBadRequest(form.errors.as_text(), content_type="text/plain; charset=utf-8")

    page = Page(title=title, body=form.cleaned_data["body"].encode("utf-8"))

    try:
        get_storage_service().save(page)
    except OSError as e:
        logger.error("Failed to save page %s: %s", title, e)
        return HttpResponseServerError(str(e), content_type="text/plain; charset=utf-8")

    messages.success(request, "Page saved.")
    return redirect(reverse("view", kwargs={"title": title}))
