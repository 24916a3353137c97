"""Match report rendering (plain text via Jinja2, or JSON)."""

from .models import ReportError, ReportRenderError
from .templates import ReportRenderer, render_json

__all__ = [
    "ReportRenderer",
    "render_json",
    "ReportError",
    "ReportRenderError",
]
