"""재무 분석 요청 총괄 서비스."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from core.domain.models.financial_statement import CompanyInfo, resolve_report_code
from core.domain.models.performance_metrics import CompanyMetrics, FinancialAnalysis
from core.ports.company_list_port import CompanyListPort
from core.ports.financial_statement_port import FinancialStatementPort
from core.ports.storage_port import StoragePort
from core.services.analysis_service import AnalysisService
from core.services.chart_rendering_service import ChartRenderingService, ChartSpec
from core.services.data_processing_service import DataProcessingService

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "해당 조건에 맞는 재무 데이터를 찾을 수 없습니다. 회사 코드, 연도, 보고서 코드를 확인해주세요."

# 대시보드 구성 (지표명, 제목)
DASHBOARD_CHARTS = [
    ("revenue", "매출액 비교"),
    ("netIncome", "당기순이익 비교"),
    ("totalAssets", "총자산 비교"),
    ("profitMargin", "순이익률 비교"),
]


@dataclass(frozen=True)
class AnalysisReport:
    """요청 1건의 분석 결과."""
    metrics: List[CompanyMetrics]
    analysis: FinancialAnalysis


class FinancialReportService:
    """조회 → 지표 계산 → 분석 → 렌더링을 총괄하는 서비스.

    - MCP 서버, HTTP 서버, CLI가 모두 이 서비스 하나를 사용한다.
    - 데이터가 없으면 예외 대신 None을 돌려준다.
    - 어댑터 예외(TransportError, UpstreamError)는 그대로 전파한다.
    """

    def __init__(
        self,
        financial_port: FinancialStatementPort,
        company_port: CompanyListPort,
        processing_service: DataProcessingService,
        analysis_service: AnalysisService,
        chart_service: ChartRenderingService,
        storage_port: Optional[StoragePort] = None
    ):
        self._financial_port = financial_port
        self._company_port = company_port
        self._processing_service = processing_service
        self._analysis_service = analysis_service
        self._chart_service = chart_service
        self._storage_port = storage_port

    def list_companies(self) -> List[CompanyInfo]:
        return self._company_port.get_company_list()

    def analyze(
        self,
        corp_codes: Sequence[str],
        year: str,
        report_code: str
    ) -> Optional[AnalysisReport]:
        """재무 데이터를 조회하고 분석.

        Returns:
            분석 결과, 조회된 데이터가 없으면 None
        """
        report_code = resolve_report_code(report_code)
        logger.info(f"재무 데이터 조회: {len(corp_codes)}개 기업, {year}년, 보고서 {report_code}")

        rows = self._financial_port.fetch(corp_codes, year, report_code)
        if not rows:
            logger.info("조회된 재무 데이터가 없습니다.")
            return None

        metrics = self._processing_service.compute_metrics(rows)
        analysis = self._analysis_service.build_analysis(metrics)
        logger.info(f"분석 완료: {len(metrics)}개 기업 ({len(rows)}개 계정과목)")
        return AnalysisReport(metrics=metrics, analysis=analysis)

    # ------------------------------------------------------------------
    # 분석 결과 -> 텍스트
    # ------------------------------------------------------------------
    def summary_text(self, report: AnalysisReport) -> str:
        return self._chart_service.summary_text(report.analysis.summary)

    def analysis_text(self, report: AnalysisReport) -> str:
        detail = self._chart_service.company_detail(report.metrics)
        return f"{self.summary_text(report)}\n\n📊 상세 분석 결과:\n\n{detail}"

    def chart_text(self, report: AnalysisReport, metric: str, year: str) -> str:
        """지표 하나의 텍스트 차트.

        Raises:
            UnsupportedMetricError: 지원하지 않는 지표명
        """
        dataset = self._analysis_service.get_dataset(report.analysis, metric)
        return self._chart_service.text_chart(dataset, f"{metric} 비교 ({year}년)")

    def dashboard_text(self, report: AnalysisReport) -> str:
        return self._chart_service.text_dashboard(self._dashboard_charts(report.analysis))

    def dashboard_html(self, report: AnalysisReport) -> str:
        return self._chart_service.html_dashboard(self._dashboard_charts(report.analysis))

    def table_text(self, report: AnalysisReport) -> str:
        return self._chart_service.comparison_table(report.metrics)

    # ------------------------------------------------------------------
    # 조회 + 렌더링 (데이터가 없으면 None)
    # ------------------------------------------------------------------
    def render_analysis(self, corp_codes: Sequence[str], year: str, report_code: str) -> Optional[str]:
        report = self.analyze(corp_codes, year, report_code)
        if report is None:
            return None
        return self.analysis_text(report)

    def render_chart(
        self,
        corp_codes: Sequence[str],
        year: str,
        report_code: str,
        metric: str
    ) -> Optional[str]:
        report = self.analyze(corp_codes, year, report_code)
        if report is None:
            return None
        return self.chart_text(report, metric, year)

    def render_dashboard(self, corp_codes: Sequence[str], year: str, report_code: str) -> Optional[str]:
        report = self.analyze(corp_codes, year, report_code)
        if report is None:
            return None
        return f"{self.summary_text(report)}\n\n{self.dashboard_text(report)}"

    def render_html_dashboard(self, corp_codes: Sequence[str], year: str, report_code: str) -> Optional[str]:
        report = self.analyze(corp_codes, year, report_code)
        if report is None:
            return None
        return self.dashboard_html(report)

    def render_comparison_table(self, corp_codes: Sequence[str], year: str, report_code: str) -> Optional[str]:
        report = self.analyze(corp_codes, year, report_code)
        if report is None:
            return None
        return f"{self.summary_text(report)}\n\n{self.table_text(report)}"

    def export_workbook(
        self,
        corp_codes: Sequence[str],
        year: str,
        report_code: str,
        output_path: Union[str, Path]
    ) -> Optional[Path]:
        """지표와 차트 데이터셋을 엑셀 파일로 저장.

        Returns:
            저장된 파일 경로, 데이터가 없으면 None
        """
        if self._storage_port is None:
            raise RuntimeError("저장 어댑터가 설정되지 않았습니다.")
        report = self.analyze(corp_codes, year, report_code)
        if report is None:
            return None
        saved = self._storage_port.save_workbook(self.build_sheets(report), output_path)
        logger.info(f"분석 결과 저장: {saved}")
        return saved

    @staticmethod
    def build_sheets(report: AnalysisReport) -> Dict[str, pd.DataFrame]:
        """분석 결과를 시트별 DataFrame으로 변환.

        - "지표": 기업별 원본 지표 + 비율
        - "차트": 지표명 x 기업 (차트 데이터셋 값)
        """
        metrics_df = pd.DataFrame([m.to_dict() for m in report.metrics]).set_index("company")
        metrics_df["profitMargin"] = [m.profit_margin * 100 for m in report.metrics]
        metrics_df["returnOnEquity"] = [m.return_on_equity * 100 for m in report.metrics]
        metrics_df["debtToEquity"] = [m.debt_to_equity for m in report.metrics]

        chart_df = pd.DataFrame(
            {name: ds.data for name, ds in report.analysis.metrics.items()},
            index=report.analysis.companies,
        ).T
        return {"지표": metrics_df, "차트": chart_df}

    @staticmethod
    def _dashboard_charts(analysis: FinancialAnalysis) -> List[ChartSpec]:
        return [(analysis.metrics[name], title) for name, title in DASHBOARD_CHARTS]
