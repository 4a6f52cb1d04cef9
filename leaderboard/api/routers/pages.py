"""Server-rendered pages: leaderboard, admin panel and personal user page."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ...core import get_store
from ...models import OrderType
from ...services import (
    Period,
    adjust_points,
    get_leaderboard,
    get_leaderboard_for_period,
    get_summary,
    get_user_by_code,
    get_user_stats,
    parse_period,
    register_user,
)
from ...storage import RecordStore

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

PERIOD_TABS = [
    (Period.DIA, "Hoy"),
    (Period.SEMANA, "Semana"),
    (Period.MES, "Mes"),
    (Period.TOTAL, "Total"),
]
MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}
MONTHS = ("ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sept", "oct", "nov", "dic")


def format_date(value: datetime) -> str:
    """Render a timestamp for display, e.g. ``05 may 2024 14:30``."""

    return f"{value.day:02d} {MONTHS[value.month - 1]} {value.year} {value:%H:%M}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["fecha"] = format_date
templates.env.globals["medals"] = MEDALS

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
def leaderboard_page(
    request: Request,
    periodo: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    period = parse_period(periodo)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "usuarios": get_leaderboard_for_period(store, period),
            "periodo": period,
            "tabs": PERIOD_TABS,
            "resumen": get_summary(store),
        },
    )


def _render_admin(
    request: Request,
    store: RecordStore,
    message: Optional[dict] = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "usuarios": get_leaderboard(store),
            "resumen": get_summary(store),
            "mensaje": message,
        },
        status_code=status_code,
    )


@router.get("/admin", response_class=HTMLResponse)
def admin_page(request: Request, store: RecordStore = Depends(get_store)):
    return _render_admin(request, store)


@router.post("/admin", response_class=HTMLResponse)
def admin_register(
    request: Request,
    nombre: str = Form(""),
    store: RecordStore = Depends(get_store),
):
    """Register a user from the admin form and show the shareable link."""

    result = register_user(store, nombre)
    message = {
        "tipo": "exito" if result.success else "error",
        "texto": result.message,
        "codigo": result.codigo_usuario,
    }
    return _render_admin(request, store, message, status_code=200 if result.success else 400)


@router.get("/user/{codigo}", response_class=HTMLResponse, name="user_page")
def user_page(
    request: Request,
    codigo: str,
    mensaje: Optional[str] = None,
    tipo: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    user = get_user_by_code(store, codigo)
    if not user:
        return templates.TemplateResponse(
            request, "not_found.html", {"codigo": codigo}, status_code=404
        )
    return templates.TemplateResponse(
        request,
        "user.html",
        {
            "usuario": user,
            "stats": get_user_stats(store, codigo),
            "mensaje": {"tipo": tipo or "exito", "texto": mensaje} if mensaje else None,
        },
    )


@router.post("/user/{codigo}/{operacion}")
def user_adjust(codigo: str, operacion: OrderType, store: RecordStore = Depends(get_store)):
    """Apply a +/- button press and redirect back to the user page."""

    result = adjust_points(store, codigo, operacion)
    if result.success:
        text = "¡Punto sumado correctamente!" if operacion is OrderType.SUMA else "¡Punto restado correctamente!"
        query = {"mensaje": text, "tipo": "exito"}
    else:
        query = {"mensaje": result.message, "tipo": "error"}
    return RedirectResponse(f"/user/{codigo}?{urlencode(query)}", status_code=303)


__all__ = ["format_date", "router"]
