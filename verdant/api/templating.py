"""
Template rendering utilities
"""
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from verdant.components.layout import LayoutData

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_price(value: float | int | str | None) -> str:
    if value is None or value == "":
        return ""
    return f"${float(value):,.2f}"


templates.env.filters["price"] = format_price


def render_page(
    request: Request,
    template_name: str,
    layout: LayoutData,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render a page inside the root layout."""
    return templates.TemplateResponse(
        request,
        template_name,
        {"layout": layout, **(context or {})},
        status_code=status_code,
    )
