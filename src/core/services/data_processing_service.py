"""데이터 처리 및 변환 서비스."""

import logging
import re
import tomllib
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from core.domain.models.financial_statement import RawLineItem
from core.domain.models.performance_metrics import CompanyMetrics

logger = logging.getLogger(__name__)

UNKNOWN_COMPANY = "Unknown"
_LEADING_INTEGER = re.compile(r"[+-]?\d+")

# 지표 -> 계정과목 키워드 (앞에서부터 순서대로 시도)
DEFAULT_ACCOUNT_KEYWORDS: Dict[str, List[str]] = {
    "revenue": ["매출액"],
    "net_income": ["당기순이익"],
    "total_assets": ["자산총계"],
    "total_liabilities": ["부채총계"],
    "total_equity": ["자본총계"],
    "operating_income": ["영업이익"],
    "ebitda": ["EBITDA"],
    "depreciation": ["감가상각비"],
    "amortization": ["무형자산상각비"],
}


class DataProcessingService:
    """공시 원본 행을 기업별 재무 지표로 변환하는 서비스.

    - 종목코드 기준 그룹핑 (최초 등장 순서 유지)
    - 계정과목 부분 일치 검색 (첫 번째 일치 행 사용)
    - 문자열 금액 -> 정수 변환
    - EBITDA 산출
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """초기화.

        Args:
            config_path: 계정과목 키워드 설정 파일 경로 (TOML 형식).
                        None이면 기본 경로 사용: config/account_keywords.toml
        """
        if config_path is None:
            project_root = Path(__file__).parent.parent.parent.parent
            config_path = project_root / "config" / "account_keywords.toml"
        else:
            config_path = Path(config_path)

        self.account_keywords: Dict[str, List[str]] = {
            key: list(values) for key, values in DEFAULT_ACCOUNT_KEYWORDS.items()
        }

        if config_path.exists():
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
            overrides = config.get("account_keywords", {})
            for key, values in overrides.items():
                if key not in self.account_keywords:
                    logger.warning(f"알 수 없는 지표 키워드 설정을 무시합니다: {key}")
                    continue
                if isinstance(values, str):
                    values = [values]
                if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
                    logger.warning(f"키워드는 문자열 또는 문자열 목록이어야 합니다. 설정을 무시합니다: {key}")
                    continue
                self.account_keywords[key] = values
            logger.debug(f"계정과목 키워드 설정 로드: {config_path}")
        else:
            logger.debug(f"설정 파일이 없어 기본 키워드를 사용합니다: {config_path}")

    def compute_metrics(self, rows: Sequence[RawLineItem]) -> List[CompanyMetrics]:
        """원본 행을 기업별 지표로 변환.

        입력에 존재하는 종목코드마다 정확히 하나의 CompanyMetrics를 만든다.
        """
        metrics = []
        for company, items in self._group_by_company(rows).items():
            metrics.append(self._build_metrics(company, items))
        return metrics

    def _build_metrics(self, company: str, items: List[RawLineItem]) -> CompanyMetrics:
        ebitda = self._extract(items, "ebitda") or self._calculate_ebitda(items)
        return CompanyMetrics(
            company=company,
            year=items[0].bsns_year if items else "",
            revenue=self._extract(items, "revenue"),
            net_income=self._extract(items, "net_income"),
            total_assets=self._extract(items, "total_assets"),
            total_liabilities=self._extract(items, "total_liabilities"),
            total_equity=self._extract(items, "total_equity"),
            operating_income=self._extract(items, "operating_income"),
            ebitda=ebitda,
        )

    def _group_by_company(self, rows: Sequence[RawLineItem]) -> Dict[str, List[RawLineItem]]:
        """종목코드별 그룹핑.

        종목코드가 없으면 "Unknown"으로 묶는다. dict 삽입 순서가 곧 출력 순서.
        """
        groups: Dict[str, List[RawLineItem]] = {}
        for row in rows:
            company = row.stock_code or UNKNOWN_COMPANY
            groups.setdefault(company, []).append(row)
        return groups

    def _extract(self, items: List[RawLineItem], metric: str) -> int:
        """지표에 해당하는 첫 번째 계정과목 금액. 없으면 0."""
        for keyword in self.account_keywords.get(metric, []):
            amount = self.extract_amount(items, keyword)
            if amount is not None:
                return amount
        return 0

    def extract_amount(self, items: List[RawLineItem], account_name: str) -> Optional[int]:
        """계정과목명에 ``account_name``이 포함된 첫 행의 금액.

        당기금액이 비어 있으면 당기누적금액을 사용한다.

        Returns:
            파싱된 금액, 일치하는 행이 없으면 None
        """
        item = next((row for row in items if account_name in row.account_nm), None)
        if item is None:
            return None
        return self.parse_amount(item.thstrm_amount or item.thstrm_add_amount or "0")

    def _calculate_ebitda(self, items: List[RawLineItem]) -> int:
        """EBITDA = 영업이익 + 감가상각비 + 무형자산상각비."""
        return (
            self._extract(items, "operating_income")
            + self._extract(items, "depreciation")
            + self._extract(items, "amortization")
        )

    @staticmethod
    def parse_amount(amount_str: Optional[str]) -> int:
        """문자열 금액을 정수로 변환.

        쉼표를 제거한 뒤 앞쪽 정수 부분만 사용한다 ("1,234.5" -> 1234).
        정수로 시작하지 않으면 0.
        """
        if not amount_str:
            return 0
        match = _LEADING_INTEGER.match(amount_str.replace(",", "").strip())
        return int(match.group()) if match else 0
