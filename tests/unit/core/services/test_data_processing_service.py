"""DataProcessingService 테스트."""

import pytest

from core.services.data_processing_service import DataProcessingService
from conftest import make_row


def test_compute_metrics_basic_scenario(processing_service):
    """매출액/당기순이익 두 줄로 기업 하나의 지표 생성."""
    rows = [
        make_row("X", "매출액", "1,000,000"),
        make_row("X", "당기순이익", "100,000"),
    ]

    metrics = processing_service.compute_metrics(rows)

    assert len(metrics) == 1
    assert metrics[0].company == "X"
    assert metrics[0].year == "2023"
    assert metrics[0].revenue == 1000000
    assert metrics[0].net_income == 100000
    assert metrics[0].profit_margin == pytest.approx(0.1)
    # 없는 계정은 0
    assert metrics[0].total_assets == 0
    assert metrics[0].total_equity == 0


def test_compute_metrics_one_record_per_company_in_first_seen_order(processing_service):
    rows = [
        make_row("B", "매출액", "10"),
        make_row("A", "매출액", "20"),
        make_row("B", "당기순이익", "1"),
        make_row("C", "매출액", "30"),
        make_row("A", "당기순이익", "2"),
    ]

    metrics = processing_service.compute_metrics(rows)

    assert [m.company for m in metrics] == ["B", "A", "C"]
    assert [m.revenue for m in metrics] == [10, 20, 30]


def test_compute_metrics_empty_input(processing_service):
    assert processing_service.compute_metrics([]) == []


def test_missing_stock_code_grouped_as_unknown(processing_service):
    rows = [make_row("", "매출액", "100"), make_row("", "당기순이익", "10")]

    metrics = processing_service.compute_metrics(rows)

    assert len(metrics) == 1
    assert metrics[0].company == "Unknown"
    assert metrics[0].revenue == 100


@pytest.mark.parametrize(
    "amount, expected",
    [
        ("1,234,567", 1234567),
        ("-1,000", -1000),
        ("42", 42),
        ("", 0),
        (None, 0),
        ("-", 0),
        ("abc", 0),
        ("1,234.5", 1234),
        ("12abc", 12),
        (" +7 ", 7),
    ],
)
def test_parse_amount(amount, expected):
    assert DataProcessingService.parse_amount(amount) == expected


def test_extract_falls_back_to_added_amount(processing_service):
    """당기금액이 비어 있으면 당기누적금액 사용."""
    rows = [make_row("X", "매출액", amount="", add_amount="2,500")]

    metrics = processing_service.compute_metrics(rows)

    assert metrics[0].revenue == 2500


def test_extract_uses_first_substring_match(processing_service):
    """부분 일치 + 첫 번째 행 우선 ("영업이익률"이 먼저 나오면 그 값을 사용)."""
    rows = [
        make_row("X", "영업이익률", "12"),
        make_row("X", "영업이익", "500"),
    ]

    metrics = processing_service.compute_metrics(rows)

    assert metrics[0].operating_income == 12


def test_ebitda_calculated_when_not_disclosed(processing_service):
    rows = [
        make_row("X", "영업이익", "1,000"),
        make_row("X", "감가상각비", "200"),
        make_row("X", "무형자산상각비", "50"),
    ]

    metrics = processing_service.compute_metrics(rows)

    assert metrics[0].ebitda == 1250


def test_ebitda_calculation_missing_components_count_as_zero(processing_service):
    rows = [make_row("X", "영업이익", "1,000")]

    metrics = processing_service.compute_metrics(rows)

    assert metrics[0].ebitda == 1000


def test_ebitda_disclosed_line_item_wins(processing_service):
    rows = [
        make_row("X", "EBITDA", "9,999"),
        make_row("X", "영업이익", "1,000"),
        make_row("X", "감가상각비", "200"),
    ]

    metrics = processing_service.compute_metrics(rows)

    assert metrics[0].ebitda == 9999


def test_keywords_loaded_from_toml(tmp_path):
    """TOML 설정으로 키워드를 바꾸면 순서대로 시도한다."""
    config_file = tmp_path / "account_keywords.toml"
    config_file.write_text(
        '[account_keywords]\nrevenue = ["영업수익", "매출액"]\nnet_income = "분기순이익"\n',
        encoding="utf-8",
    )
    service = DataProcessingService(config_path=config_file)
    rows = [
        make_row("X", "매출액", "100"),
        make_row("X", "영업수익", "300"),
        make_row("X", "분기순이익", "30"),
    ]

    metrics = service.compute_metrics(rows)

    assert service.account_keywords["revenue"] == ["영업수익", "매출액"]
    assert metrics[0].revenue == 300
    assert metrics[0].net_income == 30
    # 설정하지 않은 지표는 기본값 유지
    assert service.account_keywords["total_assets"] == ["자산총계"]


def test_default_config_file_matches_builtin_defaults():
    """저장소의 config/account_keywords.toml은 기본 키워드와 같다."""
    service = DataProcessingService()

    assert service.account_keywords["revenue"] == ["매출액"]
    assert service.account_keywords["net_income"] == ["당기순이익"]
    assert service.account_keywords["amortization"] == ["무형자산상각비"]


def test_invalid_toml_keyword_values_are_ignored(tmp_path):
    """문자열/문자열 목록이 아닌 키워드 설정은 무시하고 기본값을 유지한다."""
    config_file = tmp_path / "account_keywords.toml"
    config_file.write_text(
        '[account_keywords]\nrevenue = 5\nnet_income = ["당기순이익", 3]\ntotal_assets = "자산합계"\n',
        encoding="utf-8",
    )

    service = DataProcessingService(config_path=config_file)
    metrics = service.compute_metrics([make_row("X", "매출액", "100")])

    assert service.account_keywords["revenue"] == ["매출액"]
    assert service.account_keywords["net_income"] == ["당기순이익"]
    assert service.account_keywords["total_assets"] == ["자산합계"]
    assert metrics[0].revenue == 100


def test_decimal_amount_keeps_integer_part(processing_service):
    rows = [make_row("X", "매출액", "1,234.0")]

    metrics = processing_service.compute_metrics(rows)

    assert metrics[0].revenue == 1234
