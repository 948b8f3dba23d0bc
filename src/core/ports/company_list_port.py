from abc import ABC, abstractmethod
from typing import List

from core.domain.models.financial_statement import CompanyInfo


class CompanyListPort(ABC):
    """분석 가능한 기업 목록 조회를 위한 포트 인터페이스.

    서비스 레이어는 이 인터페이스에만 의존하며, 목록의 출처(고정 목록,
    DART 기업코드 파일 등)는 어댑터가 결정한다.
    """

    @abstractmethod
    def get_company_list(self) -> List[CompanyInfo]:
        """분석 가능한 기업 목록을 반환한다.

        Returns:
            CompanyInfo 리스트.
        """
        raise NotImplementedError
