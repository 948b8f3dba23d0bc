"""공용 테스트 픽스처."""

from typing import List

import pytest

from core.domain.models.financial_statement import RawLineItem
from core.services.analysis_service import AnalysisService
from core.services.chart_rendering_service import ChartRenderingService
from core.services.data_processing_service import DataProcessingService


def make_row(stock_code: str, account_nm: str, amount: str = "", add_amount: str = "", year: str = "2023") -> RawLineItem:
    """테스트용 계정과목 행 생성 헬퍼."""
    return RawLineItem(
        stock_code=stock_code,
        bsns_year=year,
        reprt_code="11011",
        account_nm=account_nm,
        thstrm_amount=amount,
        thstrm_add_amount=add_amount,
    )


@pytest.fixture
def sample_rows() -> List[RawLineItem]:
    """두 기업(A, B)의 연간 주요 계정."""
    return [
        make_row("A", "매출액", "1,000,000"),
        make_row("A", "영업이익", "150,000"),
        make_row("A", "당기순이익", "100,000"),
        make_row("A", "자산총계", "5,000,000"),
        make_row("A", "부채총계", "2,000,000"),
        make_row("A", "자본총계", "3,000,000"),
        make_row("B", "매출액", "4,000,000"),
        make_row("B", "영업이익", "300,000"),
        make_row("B", "당기순이익", "200,000"),
        make_row("B", "자산총계", "8,000,000"),
        make_row("B", "부채총계", "6,000,000"),
        make_row("B", "자본총계", "2,000,000"),
    ]


@pytest.fixture
def processing_service(tmp_path):
    # 존재하지 않는 경로를 넘겨 기본 키워드 사용
    return DataProcessingService(config_path=tmp_path / "missing.toml")


@pytest.fixture
def analysis_service():
    return AnalysisService()


@pytest.fixture
def chart_service():
    return ChartRenderingService()
