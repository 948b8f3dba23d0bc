"""MCP 도구 핸들러.

각 핸들러는 FinancialReportService에 위임하고 항상 사용자용 텍스트를 돌려준다.
예외는 밖으로 전파하지 않고 오류 메시지 텍스트로 바꾼다.
"""

import logging
from typing import Callable, List, Optional, Sequence

from core.domain.exceptions import UnsupportedMetricError
from core.services.financial_report_service import FinancialReportService

logger = logging.getLogger(__name__)

NO_DATA_TEXT = "해당 조건에 맞는 재무 데이터를 찾을 수 없습니다. 회사 코드, 연도, 보고서 코드를 확인해주세요."
HTML_NOTICE = "HTML 형식의 재무 분석 대시보드가 생성되었습니다. 아래 HTML을 웹 브라우저에서 열어보세요."


def error_text(error: Exception) -> str:
    return f"오류가 발생했습니다: {str(error) or '알 수 없는 오류'}"


def _run(tool: str, render: Callable[[], Optional[str]]) -> str:
    """렌더링 함수 실행 후 None은 데이터 없음, 예외는 오류 텍스트로 변환."""
    try:
        text = render()
    except UnsupportedMetricError as e:
        logger.info(f"[{tool}] {e}")
        return str(e)
    except Exception as e:
        logger.exception(f"[{tool}] 처리 중 오류: {e}")
        return error_text(e)
    return NO_DATA_TEXT if text is None else text


def handle_get_company_list(service: FinancialReportService) -> str:
    def render() -> str:
        lines = [
            f"{c.corp_name} ({c.stock_code or 'N/A'}) - {c.corp_code}"
            for c in service.list_companies()
        ]
        return (
            "📋 분석 가능한 회사 목록:\n\n"
            + "\n".join(lines)
            + "\n\n위 회사들의 고유번호(corp_code)를 사용하여 재무 분석을 수행할 수 있습니다."
        )

    return _run("get_company_list", render)


def handle_analyze_financial_data(
    service: FinancialReportService,
    corp_codes: Sequence[str],
    year: str,
    report_code: str
) -> str:
    return _run(
        "analyze_financial_data",
        lambda: service.render_analysis(list(corp_codes), year, report_code),
    )


def handle_generate_financial_chart(
    service: FinancialReportService,
    corp_codes: Sequence[str],
    year: str,
    report_code: str,
    metric: str
) -> str:
    return _run(
        "generate_financial_chart",
        lambda: service.render_chart(list(corp_codes), year, report_code, metric),
    )


def handle_generate_financial_dashboard(
    service: FinancialReportService,
    corp_codes: Sequence[str],
    year: str,
    report_code: str
) -> str:
    return _run(
        "generate_financial_dashboard",
        lambda: service.render_dashboard(list(corp_codes), year, report_code),
    )


def handle_generate_html_dashboard(
    service: FinancialReportService,
    corp_codes: Sequence[str],
    year: str,
    report_code: str
) -> List[str]:
    """안내 문구와 HTML을 별도 텍스트 블록으로 반환."""
    try:
        html = service.render_html_dashboard(list(corp_codes), year, report_code)
    except Exception as e:
        logger.exception(f"[generate_html_dashboard] 처리 중 오류: {e}")
        return [error_text(e)]
    if html is None:
        return [NO_DATA_TEXT]
    return [HTML_NOTICE, html]


def handle_generate_comparison_table(
    service: FinancialReportService,
    corp_codes: Sequence[str],
    year: str,
    report_code: str
) -> str:
    return _run(
        "generate_comparison_table",
        lambda: service.render_comparison_table(list(corp_codes), year, report_code),
    )
