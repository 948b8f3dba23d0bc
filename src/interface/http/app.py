"""DART 재무 분석 HTTP 서버 (FastAPI).

Run with:
    uv run analyzer serve-http
    # → http://localhost:3000/health
    # → http://localhost:3000/docs  (Swagger UI)
"""

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from core.domain.exceptions import DartAnalysisError, UnsupportedMetricError
from core.services.financial_report_service import AnalysisReport, FinancialReportService

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"
NO_DATA_ERROR = "해당 조건에 맞는 재무 데이터를 찾을 수 없습니다."


class AnalysisRequest(BaseModel):
    corp_codes: List[str] = Field(..., min_length=1, description="분석할 회사들의 고유번호 목록")
    year: str = Field(..., min_length=1, description="분석할 사업연도 (예: 2023)")
    report_code: str = Field(..., min_length=1, description="보고서 코드 (예: 11011)")


class ChartRequest(AnalysisRequest):
    metric: str = Field(..., min_length=1, description="차트로 표시할 지표")


def _ok(data: Any) -> dict:
    return {"success": True, "data": data}


def _fail(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def create_app(service: FinancialReportService) -> FastAPI:
    """요청 서비스를 감싸는 FastAPI 앱 생성."""
    app = FastAPI(
        title="DART Financial Analysis API Server",
        description="DART 공시 재무제표 다중 기업 분석 API",
        version=APP_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        logger.info(f"잘못된 요청 {request.url.path}: {fields}")
        return _fail(400, f"Missing or invalid parameters: {', '.join(fields)}")

    @app.exception_handler(DartAnalysisError)
    async def analysis_error_handler(request: Request, exc: DartAnalysisError):
        logger.error(f"요청 처리 실패 {request.url.path}: {exc}")
        return _fail(500, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"요청 처리 중 오류 {request.url.path}: {exc}")
        return _fail(500, str(exc) or "Unknown error")

    def run_analysis(body: AnalysisRequest) -> Optional[AnalysisReport]:
        return service.analyze(body.corp_codes, body.year, body.report_code)

    # ── Info ──────────────────────────────────────────────────────────────

    @app.get("/")
    def index():
        return {
            "message": "DART Financial Analysis API Server",
            "version": APP_VERSION,
            "endpoints": {
                "health": "GET /health",
                "companies": "GET /api/companies",
                "analyze": "POST /api/analyze",
                "chart": "POST /api/chart",
                "dashboard": "POST /api/dashboard",
                "dashboardHtml": "POST /api/dashboard/html",
                "table": "POST /api/table",
            },
        }

    @app.get("/health")
    def health():
        return {"status": "OK", "message": "DART Financial Analysis Server is running"}

    # ── API ───────────────────────────────────────────────────────────────

    @app.get("/api/companies")
    def companies():
        return _ok([c.to_dict() for c in service.list_companies()])

    @app.post("/api/analyze")
    def analyze(body: AnalysisRequest):
        report = run_analysis(body)
        if report is None:
            return _fail(404, NO_DATA_ERROR)
        return _ok({
            "summary": report.analysis.summary.to_dict(),
            "metrics": [m.to_dict() for m in report.metrics],
            "analysis": report.analysis.to_dict(),
            "summaryText": service.summary_text(report),
        })

    @app.post("/api/chart")
    def chart(body: ChartRequest):
        report = run_analysis(body)
        if report is None:
            return _fail(404, NO_DATA_ERROR)
        try:
            chart_text = service.chart_text(report, body.metric, body.year)
        except UnsupportedMetricError as e:
            return _fail(400, str(e))
        return _ok({
            "chartText": chart_text,
            "chartData": report.analysis.metrics[body.metric].to_dict(),
        })

    @app.post("/api/dashboard")
    def dashboard(body: AnalysisRequest):
        report = run_analysis(body)
        if report is None:
            return _fail(404, NO_DATA_ERROR)
        return _ok({
            "dashboardText": service.dashboard_text(report),
            "summaryText": service.summary_text(report),
            "analysis": report.analysis.to_dict(),
        })

    @app.post("/api/dashboard/html")
    def dashboard_html(body: AnalysisRequest):
        report = run_analysis(body)
        if report is None:
            return _fail(404, NO_DATA_ERROR)
        return _ok({"html": service.dashboard_html(report)})

    @app.post("/api/table")
    def table(body: AnalysisRequest):
        report = run_analysis(body)
        if report is None:
            return _fail(404, NO_DATA_ERROR)
        return _ok({
            "tableText": service.table_text(report),
            "summaryText": service.summary_text(report),
        })

    return app
