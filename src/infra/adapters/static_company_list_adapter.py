from typing import List, Optional, Sequence

from core.domain.models.financial_statement import CompanyInfo
from core.ports.company_list_port import CompanyListPort

# (기업 고유번호, 기업명, 종목코드)
# 일부 항목은 고유번호가 같다. 원 데이터 그대로 유지한다.
SAMPLE_COMPANIES = [
    ("00334624", "삼성전자", "005930"),
    ("00126380", "SK하이닉스", "000660"),
    ("00164779", "현대자동차", "005380"),
    ("00164779", "LG에너지솔루션", "373220"),
    ("00164779", "NAVER", "035420"),
]


class StaticCompanyListAdapter(CompanyListPort):
    """고정된 예시 기업 목록 어댑터.

    - DART 전체 기업코드 파일을 내려받지 않고 주요 기업 목록만 제공한다.
    - 생성 시 목록을 주입하면 그 목록을 사용한다 (테스트 용도).
    """

    def __init__(self, companies: Optional[Sequence[CompanyInfo]] = None) -> None:
        if companies is None:
            companies = [
                CompanyInfo(corp_code=code, corp_name=name, stock_code=stock)
                for code, name, stock in SAMPLE_COMPANIES
            ]
        self._companies = list(companies)

    def get_company_list(self) -> List[CompanyInfo]:
        """분석 가능한 기업 목록을 반환한다."""
        return list(self._companies)
