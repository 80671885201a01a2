import logging
from datetime import datetime
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, Field

from backend.app import config
from backend.app.history import HistoryStore
from solver import (
    DataIngestionError,
    EmptyDatasetError,
    NonFiniteValueError,
    ValidationError,
    compute_statistics,
    explain_statistics,
    solve_equation,
)
from solver.csv_data import load_numbers
from solver.export import history_entry_to_text, solve_result_to_text, statistics_to_text
from solver.graph import build_equation_figure, build_histogram_figure, figure_to_png

logger = logging.getLogger(__name__)


class EquationRequest(BaseModel):
    equation: str


class LinearFormInfo(BaseModel):
    a: float
    b: float


class SolveResponse(BaseModel):
    equation: str
    kind: str
    solution: Optional[float] = None
    final_answer: str
    steps: list[str]
    left: LinearFormInfo
    right: LinearFormInfo
    verification_steps: list[str]
    verified: Optional[bool] = None


class HistoryItem(BaseModel):
    equation: str
    result: str
    steps: list[str]
    timestamp: datetime


class ValuesRequest(BaseModel):
    values: list[float] = Field(min_length=1)


class StatisticsInfo(BaseModel):
    count: int
    mean: float
    median: float
    standard_deviation: float
    variance: float
    min: float
    max: float
    range: float
    sum: float


class ExplanationInfo(BaseModel):
    title: str
    value: str
    formula: str
    description: str
    interpretation: str


class StatisticsResponse(BaseModel):
    count: int
    statistics: StatisticsInfo
    explanations: list[ExplanationInfo]


@lru_cache
def get_history_store() -> HistoryStore:
    """Process-wide session history."""
    return HistoryStore(limit=config.HISTORY_LIMIT)


def _bad_request(e) -> HTTPException:
    return HTTPException(status_code=400, detail={"message": e.message, "code": e.code})


def _solve(equation: str):
    equation = equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail={
            "message": "Equation cannot be empty.", "code": "EMPTY_EQUATION",
        })
    try:
        return solve_equation(equation)
    except ValidationError as e:
        logger.warning("rejected equation %r: %s", equation, e)
        raise _bad_request(e)
    except Exception as e:
        logger.exception("solver failed on %r", equation)
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")


def _statistics(values: list[float]):
    try:
        report = compute_statistics(values)
    except NonFiniteValueError as e:
        raise _bad_request(e)
    except EmptyDatasetError:
        # Callers guarantee at least one value; reaching this is a bug.
        logger.error("statistics requested for an empty dataset")
        raise HTTPException(status_code=500, detail="Error in the statistical calculations.")
    return report, explain_statistics(report)


def _statistics_response(values: list[float]) -> dict:
    report, explanations = _statistics(values)
    return {
        "count": report.count,
        "statistics": report.to_dict(),
        "explanations": [card.to_dict() for card in explanations],
    }


def create_app() -> FastAPI:
    app = FastAPI(title="MathPanel API", version=config.VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health():
        return {"status": "ok", "version": config.VERSION}

    # ── Equations ─────────────────────────────────────────────────────

    @app.post("/api/solve", response_model=SolveResponse)
    def solve(req: EquationRequest, history: HistoryStore = Depends(get_history_store)):
        equation = req.equation.strip()
        result = _solve(equation)
        history.add(equation, result.final_answer, result.steps)
        logger.info("solved %r → %s", equation, result.final_answer)
        return {"equation": equation, **result.to_dict()}

    @app.post("/api/solve/graph")
    def solve_graph(req: EquationRequest):
        result = _solve(req.equation)
        png = figure_to_png(build_equation_figure(result))
        return Response(content=png, media_type="image/png")

    @app.get("/api/history", response_model=list[HistoryItem])
    def list_history(history: HistoryStore = Depends(get_history_store)):
        return [
            {
                "equation": entry.equation,
                "result": entry.result,
                "steps": list(entry.steps),
                "timestamp": entry.timestamp,
            }
            for entry in history.list()
        ]

    @app.delete("/api/history", status_code=204)
    def clear_history(history: HistoryStore = Depends(get_history_store)):
        history.clear()
        return Response(status_code=204)

    @app.get("/api/history/{index}/text", response_class=PlainTextResponse)
    def history_text(index: int, history: HistoryStore = Depends(get_history_store)):
        entry = history.get(index)
        if entry is None:
            raise HTTPException(status_code=404, detail="History entry not found.")
        return history_entry_to_text(entry)

    @app.post("/api/solve/text", response_class=PlainTextResponse)
    def solve_text(req: EquationRequest):
        equation = req.equation.strip()
        return solve_result_to_text(equation, _solve(equation))

    # ── Statistics ────────────────────────────────────────────────────

    @app.post("/api/statistics", response_model=StatisticsResponse)
    def statistics(req: ValuesRequest):
        return _statistics_response(req.values)

    @app.post("/api/statistics/csv", response_model=StatisticsResponse)
    def statistics_csv(file: UploadFile = File(...)):
        content = file.file.read(config.MAX_UPLOAD_BYTES + 1)
        if len(content) > config.MAX_UPLOAD_BYTES:
            raise HTTPException(status_code=413, detail="File is too large.")
        try:
            values = load_numbers(content, delimiter=config.CSV_DELIMITER)
        except DataIngestionError as e:
            logger.warning("rejected upload %r: %s", file.filename, e)
            raise _bad_request(e)
        logger.info("loaded %d values from %r", len(values), file.filename)
        return _statistics_response(values)

    @app.post("/api/statistics/text", response_class=PlainTextResponse)
    def statistics_text(req: ValuesRequest):
        report, explanations = _statistics(req.values)
        return statistics_to_text(report, explanations)

    @app.post("/api/statistics/histogram")
    def statistics_histogram(req: ValuesRequest):
        report, _ = _statistics(req.values)
        png = figure_to_png(build_histogram_figure(req.values, report))
        return Response(content=png, media_type="image/png")

    return app


app = create_app()
