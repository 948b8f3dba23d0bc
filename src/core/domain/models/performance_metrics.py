"""기업별 재무 지표 및 분석 결과 모델."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CompanyMetrics:
    """기업 1곳의 재무 지표.

    계정과목이 없으면 각 금액은 0입니다.

    Attributes:
        company: 기업 식별자 (종목코드)
        year: 사업연도
        revenue: 매출액
        net_income: 당기순이익
        total_assets: 자산총계
        total_liabilities: 부채총계
        total_equity: 자본총계
        operating_income: 영업이익
        ebitda: EBITDA (없으면 영업이익 + 감가상각비 + 무형자산상각비)
    """
    company: str
    year: str
    revenue: int = 0
    net_income: int = 0
    total_assets: int = 0
    total_liabilities: int = 0
    total_equity: int = 0
    operating_income: int = 0
    ebitda: int = 0

    @property
    def profit_margin(self) -> float:
        """순이익률 (비율, 매출액이 0 이하이면 0)."""
        if self.revenue <= 0:
            return 0.0
        return self.net_income / self.revenue

    @property
    def return_on_equity(self) -> float:
        """ROE (비율, 자본총계가 0 이하이면 0)."""
        if self.total_equity <= 0:
            return 0.0
        return self.net_income / self.total_equity

    @property
    def debt_to_equity(self) -> float:
        """부채비율 (%, 자본총계가 0 이하이면 0)."""
        if self.total_equity <= 0:
            return 0.0
        return self.total_liabilities / self.total_equity * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "company": self.company,
            "year": self.year,
            "revenue": self.revenue,
            "netIncome": self.net_income,
            "totalAssets": self.total_assets,
            "totalLiabilities": self.total_liabilities,
            "totalEquity": self.total_equity,
            "operatingIncome": self.operating_income,
            "ebitda": self.ebitda,
        }


@dataclass(frozen=True)
class ChartDataset:
    """막대 차트 한 개 분량의 (라벨, 값) 시리즈."""
    label: str
    labels: List[str]
    data: List[float]
    color: Optional[str] = None

    def __post_init__(self):
        if len(self.labels) != len(self.data):
            raise ValueError(
                f"labels({len(self.labels)})와 data({len(self.data)})의 길이가 다릅니다."
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "labels": list(self.labels),
            "data": list(self.data),
            "color": self.color,
        }


@dataclass(frozen=True)
class HighestRevenue:
    company: str
    amount: int


@dataclass(frozen=True)
class HighestProfitMargin:
    company: str
    margin: float  # %


@dataclass(frozen=True)
class AnalysisSummary:
    """최고/최저 기업 요약."""
    best_performer: str
    worst_performer: str
    highest_revenue: HighestRevenue
    highest_profit_margin: HighestProfitMargin

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bestPerformer": self.best_performer,
            "worstPerformer": self.worst_performer,
            "highestRevenue": {
                "company": self.highest_revenue.company,
                "amount": self.highest_revenue.amount,
            },
            "highestProfitMargin": {
                "company": self.highest_profit_margin.company,
                "margin": self.highest_profit_margin.margin,
            },
        }


@dataclass(frozen=True)
class FinancialAnalysis:
    """차트 데이터셋과 요약을 묶은 분석 결과.

    Attributes:
        companies: 파이프라인 순서의 기업 식별자
        metrics: 지표명 -> ChartDataset (revenue, netIncome, ... 순서 유지)
        summary: 요약 정보
    """
    companies: List[str]
    metrics: Dict[str, ChartDataset] = field(default_factory=dict)
    summary: Optional[AnalysisSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "companies": list(self.companies),
            "metrics": {name: ds.to_dict() for name, ds in self.metrics.items()},
            "summary": self.summary.to_dict() if self.summary else None,
        }
