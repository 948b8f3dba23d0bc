"""차트 데이터셋 및 요약 생성 서비스."""

from typing import Callable, Dict, List, Sequence, Tuple

from core.domain.exceptions import UnsupportedMetricError
from core.domain.models.performance_metrics import (
    AnalysisSummary,
    ChartDataset,
    CompanyMetrics,
    FinancialAnalysis,
    HighestProfitMargin,
    HighestRevenue,
)

PALETTE = ["#FF6384", "#36A2EB", "#FFCE56", "#4BC0C0", "#9966FF"]

# 지표명 -> (표시 라벨, 값 추출 함수, 색상)
METRIC_DEFINITIONS: Dict[str, Tuple[str, Callable[[CompanyMetrics], float], str]] = {
    "revenue": ("매출액", lambda m: m.revenue, PALETTE[0]),
    "netIncome": ("당기순이익", lambda m: m.net_income, PALETTE[1]),
    "totalAssets": ("총자산", lambda m: m.total_assets, PALETTE[2]),
    "totalEquity": ("총자본", lambda m: m.total_equity, PALETTE[3]),
    "debtToEquity": ("부채비율 (%)", lambda m: m.debt_to_equity, PALETTE[4]),
    "returnOnEquity": ("ROE (%)", lambda m: m.return_on_equity * 100, PALETTE[0]),
    "profitMargin": ("순이익률 (%)", lambda m: m.profit_margin * 100, PALETTE[1]),
}

SUPPORTED_METRICS: List[str] = list(METRIC_DEFINITIONS)


class AnalysisService:
    """기업별 지표를 차트 데이터셋과 요약으로 변환하는 서비스."""

    def build_analysis(self, metrics: Sequence[CompanyMetrics]) -> FinancialAnalysis:
        """7개 지표 데이터셋과 요약 생성.

        Raises:
            ValueError: metrics가 비어 있는 경우 (호출자가 먼저 확인해야 함)
        """
        return FinancialAnalysis(
            companies=[m.company for m in metrics],
            metrics={name: self.build_dataset(metrics, name) for name in SUPPORTED_METRICS},
            summary=self.build_summary(metrics),
        )

    def build_dataset(self, metrics: Sequence[CompanyMetrics], metric: str) -> ChartDataset:
        if metric not in METRIC_DEFINITIONS:
            raise UnsupportedMetricError(metric, SUPPORTED_METRICS)
        label, value_of, color = METRIC_DEFINITIONS[metric]
        return ChartDataset(
            label=label,
            labels=[m.company for m in metrics],
            data=[value_of(m) for m in metrics],
            color=color,
        )

    def build_summary(self, metrics: Sequence[CompanyMetrics]) -> AnalysisSummary:
        """최고/최저 기업 선정.

        왼쪽부터 한 번 훑으며 더 큰(작은) 값일 때만 교체하므로 동률이면 먼저 나온 기업이 남는다.
        """
        if not metrics:
            raise ValueError("요약을 만들 재무 지표가 없습니다.")

        best = worst = top_revenue = top_margin = metrics[0]
        for current in metrics[1:]:
            if current.net_income > best.net_income:
                best = current
            if current.net_income < worst.net_income:
                worst = current
            if current.revenue > top_revenue.revenue:
                top_revenue = current
            if current.profit_margin > top_margin.profit_margin:
                top_margin = current

        return AnalysisSummary(
            best_performer=best.company,
            worst_performer=worst.company,
            highest_revenue=HighestRevenue(top_revenue.company, top_revenue.revenue),
            highest_profit_margin=HighestProfitMargin(
                top_margin.company, top_margin.profit_margin * 100
            ),
        )

    @staticmethod
    def get_dataset(analysis: FinancialAnalysis, metric: str) -> ChartDataset:
        """분석 결과에서 지표 데이터셋 조회.

        Raises:
            UnsupportedMetricError: 지원하지 않는 지표명
        """
        dataset = analysis.metrics.get(metric)
        if dataset is None:
            raise UnsupportedMetricError(metric, SUPPORTED_METRICS)
        return dataset
