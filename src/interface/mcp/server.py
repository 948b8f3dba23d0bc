"""DART 재무 분석 MCP 서버.

도구 목록
─────────
  1. get_company_list             : 분석 가능한 회사 목록
  2. analyze_financial_data       : 요약 + 기업별 상세 지표
  3. generate_financial_chart     : 지표 하나의 텍스트 차트
  4. generate_financial_dashboard : 텍스트 대시보드
  5. generate_html_dashboard      : HTML 대시보드
  6. generate_comparison_table    : 기업별 비교표
"""

from typing import Annotated

from fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from core.services.financial_report_service import FinancialReportService
from interface.mcp import tools

SERVER_NAME = "dart-financial-mcp-server"

CorpCodes = Annotated[list[str], Field(description="분석할 회사들의 고유번호 목록", min_length=1)]
Year = Annotated[str, Field(description="분석할 사업연도 (예: 2023)")]
ReportCode = Annotated[
    str,
    Field(description="보고서 코드 (11011: 사업보고서, 11012: 반기보고서, 11013: 1분기보고서, 11014: 3분기보고서)"),
]
Metric = Annotated[
    str,
    Field(description="차트로 표시할 지표 (revenue, netIncome, totalAssets, totalEquity, debtToEquity, returnOnEquity, profitMargin)"),
]


def create_mcp_server(service: FinancialReportService) -> FastMCP:
    """요청 서비스를 감싸는 FastMCP 서버 생성."""
    mcp = FastMCP(name=SERVER_NAME)

    @mcp.tool()
    def get_company_list() -> str:
        """분석 가능한 회사 목록을 가져옵니다."""
        return tools.handle_get_company_list(service)

    @mcp.tool()
    def analyze_financial_data(corp_codes: CorpCodes, year: Year, report_code: ReportCode) -> str:
        """다중 기업의 재무제표 데이터를 분석하고 요약합니다."""
        return tools.handle_analyze_financial_data(service, corp_codes, year, report_code)

    @mcp.tool()
    def generate_financial_chart(
        corp_codes: CorpCodes, year: Year, report_code: ReportCode, metric: Metric
    ) -> str:
        """특정 재무 지표에 대한 텍스트 차트를 생성합니다."""
        return tools.handle_generate_financial_chart(service, corp_codes, year, report_code, metric)

    @mcp.tool()
    def generate_financial_dashboard(corp_codes: CorpCodes, year: Year, report_code: ReportCode) -> str:
        """종합적인 재무 분석 텍스트 대시보드를 생성합니다."""
        return tools.handle_generate_financial_dashboard(service, corp_codes, year, report_code)

    @mcp.tool()
    def generate_html_dashboard(corp_codes: CorpCodes, year: Year, report_code: ReportCode) -> list[TextContent]:
        """HTML 형식의 재무 분석 대시보드를 생성합니다."""
        blocks = tools.handle_generate_html_dashboard(service, corp_codes, year, report_code)
        return [TextContent(type="text", text=block) for block in blocks]

    @mcp.tool()
    def generate_comparison_table(corp_codes: CorpCodes, year: Year, report_code: ReportCode) -> str:
        """기업별 재무 지표 비교표를 생성합니다."""
        return tools.handle_generate_comparison_table(service, corp_codes, year, report_code)

    return mcp
