"""
FastAPI Main Application - Triangle Test Generator
"""
import logging
import uuid
from collections import OrderedDict
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import FileResponse, Response
from pydantic import BaseModel, Field

from .config import settings
from .generators import TestPlanner
from .logging_config import setup_logging
from .models import Range, Strategy, TestPlan
from .utils.helpers import format_area, sanitize_filename, timestamp_now


setup_logging(logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Boundary value and worst case test generator for triangle width/height",
    version="1.0.0"
)

frontend_path = settings.FRONTEND_DIR

# Form sessions: last generated plan per browser page (in-memory)
sessions: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()


# Request Models
class GenerateRequest(BaseModel):
    tester_name: str = ""
    width_min: int = settings.DEFAULT_WIDTH_MIN
    width_max: int = settings.DEFAULT_WIDTH_MAX
    height_min: int = settings.DEFAULT_HEIGHT_MIN
    height_max: int = settings.DEFAULT_HEIGHT_MAX
    strategy: Strategy = Field(default=Strategy(settings.DEFAULT_STRATEGY))
    session_id: Optional[str] = None  # Reuse an existing form session


def _new_session() -> Dict[str, Any]:
    session_id = str(uuid.uuid4())[:8]
    sessions[session_id] = {
        "id": session_id,
        "status": "created",
        "created_at": timestamp_now(),
        "plan": None
    }
    # Evict the oldest sessions beyond the limit
    while len(sessions) > settings.MAX_SESSIONS:
        evicted, _ = sessions.popitem(last=False)
        logger.debug(f"Evicted session {evicted}")
    return sessions[session_id]


def _get_session(session_id: str) -> Dict[str, Any]:
    if session_id not in sessions:
        raise HTTPException(status_code=404, detail="Session not found")
    return sessions[session_id]


def _plan_payload(session: Dict[str, Any]) -> Dict[str, Any]:
    plan: Optional[TestPlan] = session.get("plan")
    payload = {
        "session_id": session["id"],
        "status": session["status"],
        "created_at": session["created_at"],
    }
    if plan is None:
        return payload

    report = plan.report
    payload.update({
        "strategy": report.strategy.value,
        "tester_name": report.tester_name,
        "generated_at": report.generated_at.isoformat(),
        "finished_at": report.finished_at.isoformat(),
        "width": {"range": plan.width_range, "points": plan.width.points, "nominal": plan.width.nominal},
        "height": {"range": plan.height_range, "points": plan.height.points, "nominal": plan.height.nominal},
        "total_count": report.total,
        "test_cases": [
            {"id": tc.id, "width": tc.width, "height": tc.height, "area": format_area(tc.area)}
            for tc in report.test_cases
        ],
        "log": report.text,
    })
    return payload


# API Endpoints
@app.get("/")
async def root():
    """Serve the frontend"""
    index_path = frontend_path / "index.html"
    if index_path.exists():
        return FileResponse(str(index_path))
    return {"message": f"{settings.APP_NAME} API", "docs": "/docs"}


@app.get("/api/strategies")
async def list_strategies():
    """
    List the available test strategies for the form's select box.
    """
    return {"strategies": Strategy.catalogue()}


@app.get("/api/defaults")
async def form_defaults():
    """
    Default form values.
    """
    return {
        "tester_name": "",
        "width_min": settings.DEFAULT_WIDTH_MIN,
        "width_max": settings.DEFAULT_WIDTH_MAX,
        "height_min": settings.DEFAULT_HEIGHT_MIN,
        "height_max": settings.DEFAULT_HEIGHT_MAX,
        "strategy": Strategy(settings.DEFAULT_STRATEGY).value,
        "filename": settings.LOG_FILENAME
    }


@app.post("/api/generate")
async def generate(request: GenerateRequest):
    """
    Generate the test cases and execute log for the submitted form values.
    Replaces the session's previous result.
    """
    if request.session_id and request.session_id in sessions:
        session = sessions[request.session_id]
        sessions.move_to_end(request.session_id)
    else:
        session = _new_session()

    planner = TestPlanner()

    try:
        session["status"] = "generating"

        plan = planner.plan(
            tester_name=request.tester_name,
            width_range=Range(min=request.width_min, max=request.width_max),
            height_range=Range(min=request.height_min, max=request.height_max),
            strategy=request.strategy
        )

        session["plan"] = plan
        session["status"] = "generated"
        session.pop("error", None)

        return _plan_payload(session)

    except Exception as e:
        planner.log_error(f"Generation failed for session {session['id']}", exc_info=True)
        session["status"] = "error"
        session["plan"] = None
        session["error"] = str(e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/session/{session_id}")
async def get_session(session_id: str):
    """
    Get the last result of a form session.
    """
    session = _get_session(session_id)
    payload = _plan_payload(session)
    if session.get("error"):
        payload["error"] = session["error"]
    return payload


@app.get("/api/download/{session_id}")
async def download_log(session_id: str, filename: Optional[str] = Query(default=None)):
    """
    Download the session's execute log as a UTF-8 text file.
    """
    session = _get_session(session_id)
    plan: Optional[TestPlan] = session.get("plan")

    if plan is None:
        raise HTTPException(status_code=400, detail="No report generated yet")

    download_name = sanitize_filename(filename) if filename else settings.LOG_FILENAME
    logger.info(f"Session {session_id} downloading {download_name}")

    return Response(
        content=plan.report.text.encode("utf-8"),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{download_name}"'}
    )


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
