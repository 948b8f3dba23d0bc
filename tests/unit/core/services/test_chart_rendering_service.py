"""ChartRenderingService 테스트."""

import pytest

from core.domain.models.performance_metrics import (
    AnalysisSummary,
    ChartDataset,
    CompanyMetrics,
    HighestProfitMargin,
    HighestRevenue,
)
from core.services.chart_rendering_service import CHART_WIDTH


def dataset(labels, data):
    return ChartDataset(label="테스트", labels=list(labels), data=list(data))


def bar_length(line: str) -> int:
    return line.count("█")


@pytest.mark.parametrize(
    "value, expected",
    [
        (2_500_000_000_000, "2.5조원"),
        (1_000_000_000_000, "1.0조원"),
        (350_000_000, "3.5억원"),
        (12_345, "1.2만원"),
        (9_999, "9,999원"),
        (0, "0원"),
        (-200_000_000, "-200,000,000원"),
        (12.5, "12.5원"),
    ],
)
def test_format_number(chart_service, value, expected):
    assert chart_service.format_number(value) == expected


def test_text_chart_bar_lengths_proportional(chart_service):
    text = chart_service.text_chart(dataset(["A", "B"], [50, 100]), "매출액 비교")

    lines = {line.split()[0]: line for line in text.splitlines() if "│" in line}
    assert bar_length(lines["B"]) == CHART_WIDTH
    assert bar_length(lines["B"]) == 2 * bar_length(lines["A"])


def test_text_chart_has_title_and_formatted_values(chart_service):
    text = chart_service.text_chart(dataset(["005930"], [300_000_000_000_000]), "revenue 비교 (2023년)")

    assert "📊 revenue 비교 (2023년)" in text
    assert "300.0조원" in text
    assert "=" * (CHART_WIDTH + 10) in text


def test_text_chart_non_positive_max_renders_empty_bars(chart_service):
    text = chart_service.text_chart(dataset(["A", "B"], [0, -10]), "손실")

    rows = [line for line in text.splitlines() if "│" in line]
    assert len(rows) == 2
    assert all(bar_length(row) == 0 for row in rows)


def test_text_chart_empty_dataset(chart_service):
    assert chart_service.text_chart(dataset([], []), "빈 차트") == "빈 차트\n데이터가 없습니다."


def test_rendering_is_idempotent(chart_service):
    ds = dataset(["A", "B", "C"], [1, 2, 3])

    assert chart_service.text_chart(ds, "t") == chart_service.text_chart(ds, "t")
    assert chart_service.html_chart(ds, "t") == chart_service.html_chart(ds, "t")


def test_html_chart_palette_cycles(chart_service):
    labels = [f"C{i}" for i in range(6)]
    html = chart_service.html_chart(dataset(labels, [1, 2, 3, 4, 5, 6]), "색상")

    assert html.count("#FF6384") == 2  # 0번과 5번
    assert "#9966FF" in html
    assert "width: 100.00%" in html


def test_html_chart_escapes_labels(chart_service):
    html = chart_service.html_chart(dataset(["<b>A</b>"], [1]), "A & B")

    assert "&lt;b&gt;A&lt;/b&gt;" in html
    assert "A &amp; B" in html


def test_html_chart_empty_dataset(chart_service):
    assert chart_service.html_chart(dataset([], []), "빈") == "<h3>빈</h3><p>데이터가 없습니다.</p>"


def test_html_dashboard_wraps_every_chart(chart_service):
    charts = [(dataset(["A"], [1]), "첫째"), (dataset(["A"], [2]), "둘째")]

    html = chart_service.html_dashboard(charts)

    assert "기업 재무제표 분석 대시보드" in html
    assert "grid-template-columns" in html
    assert "첫째" in html and "둘째" in html


def test_text_dashboard_contains_every_chart(chart_service):
    charts = [(dataset(["A"], [1]), "첫째"), (dataset(["A"], [2]), "둘째")]

    text = chart_service.text_dashboard(charts)

    assert text.startswith("\n📊 기업 재무제표 분석 대시보드\n")
    assert "📊 첫째" in text and "📊 둘째" in text


def test_comparison_table_computes_margin_inline(chart_service):
    metrics = [
        CompanyMetrics(company="X", year="2023", revenue=1_000_000, net_income=100_000, total_assets=5_000_000),
        CompanyMetrics(company="Y", year="2023", revenue=0, net_income=-10),
    ]

    table = chart_service.comparison_table(metrics)

    assert "📋 기업별 재무 지표 비교표" in table
    x_row = next(line for line in table.splitlines() if line.startswith("X"))
    y_row = next(line for line in table.splitlines() if line.startswith("Y"))
    assert x_row.endswith("10.00%")
    assert "100.0만원" in x_row
    assert y_row.endswith("0.00%")


def test_summary_text(chart_service):
    summary = AnalysisSummary(
        best_performer="A",
        worst_performer="B",
        highest_revenue=HighestRevenue("B", 400_000_000),
        highest_profit_margin=HighestProfitMargin("A", 12.3456),
    )

    text = chart_service.summary_text(summary)

    assert "🏆 최고 성과 기업: A" in text
    assert "📉 최저 성과 기업: B" in text
    assert "(4.0억원)" in text
    assert "(12.35%)" in text
