"""HTML rendering of wiki pages."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from django.conf import settings
from django.template import Engine, RequestContext

from .page_storage import Page

logger = logging.getLogger(__name__)


def project_context_processors() -> tuple[str, ...]:
    """Return the context processors configured for the project's templates."""
    return tuple(settings.TEMPLATES[0]["OPTIONS"].get("context_processors", ()))


class TemplateRenderError(RuntimeError):
    """Raised when a page template cannot be executed."""

    pass


@dataclass(frozen=True)
class RendererConfig:
    """Where the page templates live and which ones to pre-parse."""

    templates_dir: Path
    template_names: tuple[str, ...] = ("view", "edit")
    context_processors: tuple[str, ...] = field(default_factory=project_context_processors)

    @classmethod
    def from_settings(cls) -> "RendererConfig":
        return cls(templates_dir=Path(settings.WIKI_TEMPLATE_PATH))


class PageRenderer:
    """Renders pages through templates parsed once at construction."""

    def __init__(self, config: RendererConfig):
        self.config = config
        self.engine = Engine(
            dirs=[str(config.templates_dir)],
            context_processors=list(config.context_processors),
        )
        # Missing or broken templates fail here
        self.templates = {name: self.engine.get_template(f"{name}.html") for name in config.template_names}

    def render(self, request, name: str, page: Page) -> str:
        """Execute the named template for a page and return the HTML."""
        template = self.templates.get(name)
        if template is None:
            raise TemplateRenderError(f"No template named {name!r}")

        context = RequestContext(
            request,
            {
                "page": page,
                "title": page.title,
                "body": page.text,
            },
        )
        try:
            return template.render(context)
        except Exception as e:
            logger.error("Failed to render %s template for %s: %s", name, page.title, e)
            raise TemplateRenderError(str(e)) from e


# Singleton instance
_renderer: PageRenderer | None = None


def get_renderer() -> PageRenderer:
    """Get the page renderer singleton."""
    global _renderer
    if _renderer is None:
        _renderer = PageRenderer(RendererConfig.from_settings())
    return _renderer


def reset_renderer() -> None:
    """Drop the singleton so the next call rebuilds it from settings."""
    global _renderer
    _renderer = None
