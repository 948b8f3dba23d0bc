"""어댑터 통합 테스트.

실제 DART API를 호출합니다. DART_API_KEY가 없으면 건너뜁니다.
"""

import os

import pytest
from dotenv import load_dotenv

from core.domain.exceptions import UpstreamError
from core.domain.models.financial_statement import ReportType
from core.services.data_processing_service import DataProcessingService
from infra.adapters.dart_financial_adapter import DartFinancialAdapter

load_dotenv()

pytestmark = pytest.mark.integration

SAMSUNG = "00126380"
SK_HYNIX = "00164779"


@pytest.fixture
def financial_adapter():
    """재무제표 어댑터."""
    api_key = os.getenv("DART_API_KEY")
    if not api_key:
        pytest.skip("DART_API_KEY 환경변수가 설정되지 않았습니다")
    return DartFinancialAdapter(api_key=api_key)


def test_fetch_multiple_companies(financial_adapter):
    """삼성전자, SK하이닉스 2023년 사업보고서 조회."""
    # Act
    rows = financial_adapter.fetch([SAMSUNG, SK_HYNIX], "2023", ReportType.ANNUAL.value)

    # Assert
    assert len(rows) > 0, "계정과목이 있어야 합니다"
    assert {row.bsns_year for row in rows} == {"2023"}
    revenue_rows = [row for row in rows if "매출액" in row.account_nm]
    print(f"\n매출 관련 계정과목: {[row.account_nm for row in revenue_rows[:3]]}")
    assert len(revenue_rows) > 0, "매출 관련 계정이 있어야 합니다"


def test_fetched_rows_produce_metrics(financial_adapter):
    rows = financial_adapter.fetch([SAMSUNG], "2023", ReportType.ANNUAL.value)

    metrics = DataProcessingService().compute_metrics(rows)

    assert len(metrics) == 1
    assert metrics[0].company == "005930"
    assert metrics[0].revenue > 0
    assert metrics[0].total_assets > 0


def test_invalid_report_code_is_upstream_error(financial_adapter):
    with pytest.raises(UpstreamError):
        financial_adapter.fetch([SAMSUNG], "2023", "00000")


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
