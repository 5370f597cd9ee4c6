from fastapi import (
    FastAPI,
    Request,
    Form,
    HTTPException,
    Response,
    Body
)
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from datetime import datetime
from urllib.parse import quote
import logging

from goal.domain.ViewState import ViewingState
from goal.infra.pdf_utils import export_report, ExportedDocument
from goal.infra.regions import regions_for_report, format_long_date
from goal.infra.view_store import GLOBAL_VIEW_STORE
from goal.logic.planning.date_range import build_calendar_report
from goal.utilities.config import STATIC_DIR, TEMPLATES_DIR
from goal.utilities.constants import WEEKDAY_NAMES, LEGEND_EXAMPLE
from goal.utilities.validators import ValidationError, parse_goal_input

# Logging
logger = logging.getLogger("goal_app")

# Initialize FastAPI app
app = FastAPI(title="Goal Tracker")

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["long_date"] = format_long_date


def _ts() -> int:
    """Cache-busting timestamp for static assets."""
    return int(datetime.now().timestamp())


def _form_values(plan) -> dict:
    return {
        "goal_name": plan.name,
        "start_date": plan.start_date.isoformat() if plan.start_date else "",
        "end_date": plan.end_date.isoformat() if plan.end_date else "",
    }


def _render_form(request: Request, values: dict, error: str = None, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "form.html",
        {
            "values": values,
            "error": error,
            "time": _ts(),
        },
        status_code=status_code,
    )


def _pdf_response(doc: ExportedDocument) -> Response:
    return Response(
        content=doc.content,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(doc.filename)}"
        },
    )


async def _export(report) -> ExportedDocument:
    header, months = regions_for_report(report)
    return await export_report(header, months, report.plan.name)

# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request):
    state = GLOBAL_VIEW_STORE.current()
    if not isinstance(state, ViewingState):
        return _render_form(request, _form_values(state.draft))
    return templates.TemplateResponse(
        request,
        "calendar.html",
        {
            "report": state.report,
            "weekday_names": WEEKDAY_NAMES,
            "legend": LEGEND_EXAMPLE,
            "time": _ts(),
        }
    )

@app.post("/generate", response_class=HTMLResponse)
def generate(
    request: Request,
    goal_name: str = Form(default=""),
    start_date: str = Form(default=""),
    end_date: str = Form(default=""),
):
    try:
        GLOBAL_VIEW_STORE.generate({"name": goal_name, "start_date": start_date, "end_date": end_date})
    except ValidationError as e:
        logger.warning("Rejected goal input: %s", e.message)
        # Re-render with what the user typed; the stored state is untouched
        values = {"goal_name": goal_name, "start_date": start_date, "end_date": end_date}
        return _render_form(request, values, error=e.message, status_code=400)
    return RedirectResponse(url="/", status_code=303)

@app.post("/back")
def back():
    GLOBAL_VIEW_STORE.back()
    return RedirectResponse(url="/", status_code=303)

@app.get("/download_pdf")
async def download_pdf():
    state = GLOBAL_VIEW_STORE.current()
    if not isinstance(state, ViewingState):
        raise HTTPException(status_code=404, detail="No calendar has been generated")
    doc = await _export(state.report)
    return _pdf_response(doc)

# -------------------- JSON API --------------------
@app.post('/api/report')
def api_report(payload: dict = Body(...)):
    """Stateless report computation; does not touch the page state."""
    try:
        report = build_calendar_report(parse_goal_input(payload))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return report.to_dict()

@app.post('/api/report/pdf')
async def api_report_pdf(payload: dict = Body(...)):
    try:
        report = build_calendar_report(parse_goal_input(payload))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    doc = await _export(report)
    return _pdf_response(doc)

@app.get('/health')
def health():
    return {"status": "ok"}
