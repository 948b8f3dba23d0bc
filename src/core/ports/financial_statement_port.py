"""재무제표 조회 포트 인터페이스."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from core.domain.models.financial_statement import RawLineItem


class FinancialStatementPort(ABC):
    """다중 기업 재무제표 조회 포트."""

    @abstractmethod
    def fetch(
        self,
        corp_codes: Sequence[str],
        year: str,
        report_code: str
    ) -> List[RawLineItem]:
        """여러 기업의 주요 계정과목을 한 번에 조회.
        
        Args:
            corp_codes: 기업 고유번호 목록
            year: 사업연도 (예: "2023")
            report_code: 보고서 코드 (예: "11011")
        
        Returns:
            계정과목 행 리스트. 데이터가 없으면 빈 리스트.

        Raises:
            TransportError: API에 도달하지 못한 경우
            UpstreamError: API가 오류 상태 코드를 돌려준 경우
        """
        raise NotImplementedError
