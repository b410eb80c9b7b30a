"""URL path validation for wiki page routes."""

import re
from dataclasses import dataclass
from functools import wraps

from django.http import Http404

from .services.page_storage import TITLE_PATTERN

ACTIONS = ("view", "edit", "save")

# /view/, /edit/ or /save/ followed by letters and digits only.
VALID_PATH = re.compile(rf"/({'|'.join(ACTIONS)})/({TITLE_PATTERN})")


@dataclass(frozen=True)
class Route:
    action: str
    title: str


def match_path(path: str) -> Route:
    """Split a request path into action and title, or raise Http404."""
    match = VALID_PATH.fullmatch(path)
    if match is None:
        raise Http404("Invalid page title")
    return Route(action=match.group(1), title=match.group(2))


def title_handler(action: str):
    """Wrap a view taking (request, title) so it only runs for valid paths."""
    if action not in ACTIONS:
        raise ValueError(f"Unknown action: {action}")

    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            route = match_path(request.path_info)
            if route.action != action:
                raise Http404("Invalid page title")
            return view_func(request, route.title)

        return wrapper

    return decorator
