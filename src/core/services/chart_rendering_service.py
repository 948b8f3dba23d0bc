"""텍스트/HTML 차트 렌더링 서비스."""

import html
import math
from typing import Iterable, List, Sequence, Tuple, Union

from core.domain.models.performance_metrics import AnalysisSummary, ChartDataset, CompanyMetrics

CHART_WIDTH = 50
LABEL_WIDTH = 15
COLUMN_WIDTH = 15
DASHBOARD_TITLE = "📊 기업 재무제표 분석 대시보드"
NO_DATA = "데이터가 없습니다."
HTML_PALETTE = ["#FF6384", "#36A2EB", "#FFCE56", "#4BC0C0", "#9966FF"]

Number = Union[int, float]
ChartSpec = Tuple[ChartDataset, str]  # (데이터셋, 제목)


class ChartRenderingService:
    """지표/차트 데이터셋을 사람이 읽을 수 있는 텍스트와 HTML로 변환.

    모든 메서드는 부수효과가 없는 순수 함수이며, 같은 입력에 항상 같은 문자열을 돌려준다.
    """

    # ------------------------------------------------------------------
    # 숫자 포맷
    # ------------------------------------------------------------------
    @staticmethod
    def format_number(value: Number) -> str:
        """한국어 큰 수 단위(조/억/만)로 포맷."""
        if value >= 1e12:
            return f"{value / 1e12:.1f}조원"
        if value >= 1e8:
            return f"{value / 1e8:.1f}억원"
        if value >= 1e4:
            return f"{value / 1e4:.1f}만원"
        if isinstance(value, float) and not value.is_integer():
            return f"{value:,.3f}".rstrip("0").rstrip(".") + "원"
        return f"{int(value):,}원"

    @staticmethod
    def _bar_ratio(value: Number, max_value: Number) -> float:
        return value / max_value if max_value > 0 else 0.0

    # ------------------------------------------------------------------
    # 텍스트
    # ------------------------------------------------------------------
    def text_chart(self, dataset: ChartDataset, title: str) -> str:
        """가로 막대 텍스트 차트."""
        if not dataset.data:
            return f"{title}\n{NO_DATA}"

        max_value = max(dataset.data)
        rule = "=" * (CHART_WIDTH + 10)
        lines = [f"\n📊 {title}", rule, ""]
        for label, value in zip(dataset.labels, dataset.data):
            # Math.round 와 같은 반올림 (0.5 -> 1)
            bar_length = int(math.floor(self._bar_ratio(value, max_value) * CHART_WIDTH + 0.5))
            bar = "█" * max(bar_length, 0)
            lines.append(f"{label.ljust(LABEL_WIDTH)} │ {bar} {self.format_number(value)}")
        lines.extend(["", rule, ""])
        return "\n".join(lines)

    def text_dashboard(self, charts: Iterable[ChartSpec]) -> str:
        parts = [f"\n{DASHBOARD_TITLE}\n" + "=" * 60 + "\n\n"]
        for dataset, title in charts:
            parts.append(self.text_chart(dataset, title) + "\n\n")
        return "".join(parts)

    def comparison_table(self, metrics: Sequence[CompanyMetrics]) -> str:
        """기업별 재무 지표 비교표.

        순이익률은 데이터셋이 아니라 지표에서 직접 계산한다.
        """
        lines = [
            "\n📋 기업별 재무 지표 비교표",
            "=" * 80,
            "기업명".ljust(COLUMN_WIDTH)
            + "│ 매출액".ljust(COLUMN_WIDTH)
            + "│ 당기순이익".ljust(COLUMN_WIDTH)
            + "│ 총자산".ljust(COLUMN_WIDTH)
            + "│ 순이익률",
            "─" * 80,
        ]
        for m in metrics:
            margin = m.net_income / m.revenue * 100 if m.revenue > 0 else 0.0
            cells = [
                m.company.ljust(COLUMN_WIDTH),
                self.format_number(m.revenue).ljust(COLUMN_WIDTH),
                self.format_number(m.net_income).ljust(COLUMN_WIDTH),
                self.format_number(m.total_assets).ljust(COLUMN_WIDTH),
                f"{margin:.2f}%",
            ]
            lines.append(" │ ".join(cells))
        lines.append("=" * 80)
        return "\n".join(lines) + "\n"

    def summary_text(self, summary: AnalysisSummary) -> str:
        return "\n".join([
            "📊 기업 재무제표 분석 요약",
            "",
            f"🏆 최고 성과 기업: {summary.best_performer}",
            f"📉 최저 성과 기업: {summary.worst_performer}",
            "",
            f"💰 최고 매출 기업: {summary.highest_revenue.company}",
            f"   ({self.format_number(summary.highest_revenue.amount)})",
            "",
            f"📈 최고 순이익률 기업: {summary.highest_profit_margin.company}",
            f"   ({summary.highest_profit_margin.margin:.2f}%)",
            "",
            "이 분석은 DART API를 통해 제공된 공시 정보를 기반으로 작성되었습니다.",
        ])

    def company_detail(self, metrics: Sequence[CompanyMetrics]) -> str:
        blocks: List[str] = []
        for m in metrics:
            blocks.append("\n".join([
                f"🏢 {m.company} ({m.year}년)",
                f"   📊 매출액: {self.format_number(m.revenue)}",
                f"   💰 당기순이익: {self.format_number(m.net_income)}",
                f"   🏦 총자산: {self.format_number(m.total_assets)}",
                f"   📈 총자본: {self.format_number(m.total_equity)}",
                f"   📊 영업이익: {self.format_number(m.operating_income)}",
            ]))
        return "\n\n".join(blocks)

    # ------------------------------------------------------------------
    # HTML
    # ------------------------------------------------------------------
    def html_chart(self, dataset: ChartDataset, title: str) -> str:
        """인라인 스타일 HTML 막대 차트 조각."""
        safe_title = html.escape(title)
        if not dataset.data:
            return f"<h3>{safe_title}</h3><p>{NO_DATA}</p>"

        max_value = max(dataset.data)
        rows = []
        for index, (label, value) in enumerate(zip(dataset.labels, dataset.data)):
            percentage = max(self._bar_ratio(value, max_value) * 100, 0.0)
            color = HTML_PALETTE[index % len(HTML_PALETTE)]
            rows.append(
                '<div style="margin-bottom: 15px;">'
                '<div style="display: flex; justify-content: space-between; margin-bottom: 5px;">'
                f'<span style="font-weight: bold; color: #333;">{html.escape(label)}</span>'
                f'<span style="color: #666;">{self.format_number(value)}</span>'
                '</div>'
                '<div style="background: #e9ecef; height: 20px; border-radius: 10px; overflow: hidden;">'
                f'<div style="background: {color}; height: 100%; width: {percentage:.2f}%;"></div>'
                '</div>'
                '</div>'
            )
        return (
            '<div style="font-family: Arial, sans-serif; max-width: 800px; margin: 20px auto;">'
            f'<h2 style="color: #333; text-align: center;">{safe_title}</h2>'
            '<div style="background: #f8f9fa; padding: 20px; border-radius: 8px;">'
            + "\n".join(rows)
            + '</div></div>'
        )

    def html_dashboard(self, charts: Iterable[ChartSpec]) -> str:
        cells = [
            '<div style="background: #f8f9fa; padding: 20px; border-radius: 8px; '
            'box-shadow: 0 2px 4px rgba(0,0,0,0.1);">'
            f"{self.html_chart(dataset, title)}</div>"
            for dataset, title in charts
        ]
        return (
            '<div style="font-family: Arial, sans-serif; max-width: 1200px; margin: 20px auto;">'
            f'<h1 style="color: #333; text-align: center; margin-bottom: 30px;">{DASHBOARD_TITLE}</h1>'
            '<div style="display: grid; grid-template-columns: repeat(auto-fit, minmax(500px, 1fr)); gap: 20px;">'
            + "\n".join(cells)
            + "</div></div>"
        )
