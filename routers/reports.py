# routers/reports.py
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from models.forms import GeocodeFill, ReportForm, SubmitOutcome
from services.export_service import incidents_to_csv
from services.incidents_service import load_incidents, load_reports
from services.reports_service import autofill_coordinates, report_rows, submit_report

router = APIRouter(tags=["reports"])

@router.get("/reports")
def reports():
    feed = load_reports()
    if feed.error:
        return {"error": feed.detail or feed.error, "rows": []}
    return {"error": None, "rows": report_rows(feed)}

@router.get("/reports/export.csv")
def export_csv():
    feed = load_incidents()
    if feed.error:
        raise HTTPException(status_code=502, detail=feed.error)
    return Response(
        content=incidents_to_csv(feed.incidents),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="incidents.csv"'},
    )

@router.get("/report/geocode", response_model=GeocodeFill)
def geocode_fill(city: str = Query(""), area: str = Query("")):
    return autofill_coordinates(city, area)

@router.post("/report", response_model=SubmitOutcome)
def submit(form: ReportForm):
    return submit_report(form)
