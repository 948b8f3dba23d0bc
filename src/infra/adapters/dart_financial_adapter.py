"""DART API 다중회사 주요계정 어댑터."""

import logging
from typing import Dict, List, Optional, Sequence

import requests

from core.domain.exceptions import ConfigurationError, TransportError
from core.domain.models.financial_statement import RawLineItem
from core.ports.financial_statement_port import FinancialStatementPort
from infra.adapters.dart_response_parser import DartResponseParser

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://opendart.fss.or.kr/api"
DEFAULT_TIMEOUT = 30.0


class DartFinancialAdapter(FinancialStatementPort):
    """DART API를 통한 다중회사 재무제표 조회 어댑터.

    - 여러 기업코드를 쉼표로 묶어 한 번의 요청으로 조회
    - 재시도와 캐시는 하지 않는다
    """

    _ENDPOINT = "fnlttMultiAcnt.json"
    _CORP_CODE_SEPARATOR = ","

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None
    ):
        """초기화.

        Args:
            api_key: DART API 키 (필수, 설정에서 전달)
            timeout: 요청 타임아웃 (초)
            base_url: DART API 기본 URL
            session: 재사용할 requests 세션 (None이면 requests 모듈 함수 사용)
        """
        if not api_key:
            raise ConfigurationError("DART_API_KEY가 설정되지 않았습니다.")
        self._api_key = api_key
        self._timeout = timeout
        self._url = f"{base_url.rstrip('/')}/{self._ENDPOINT}"
        self._http = session or requests

    def fetch(
        self,
        corp_codes: Sequence[str],
        year: str,
        report_code: str
    ) -> List[RawLineItem]:
        """DART API 호출 및 파싱.

        파싱 로직은 DartResponseParser에 위임합니다.
        """
        params = self._build_api_params(corp_codes, year, report_code)

        try:
            response = self._http.get(self._url, params=params, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error(f"DART API 호출 중 오류: {e}")
            raise TransportError(f"DART API 호출 실패: {e}") from e
        except ValueError as e:
            logger.error(f"DART API 응답 파싱 실패: {e}")
            raise TransportError(f"DART API 응답을 해석할 수 없습니다: {e}") from e

        if not isinstance(data, dict):
            raise TransportError("DART API 응답 형식이 올바르지 않습니다.")

        return DartResponseParser.parse_line_items(data)

    def _build_api_params(
        self,
        corp_codes: Sequence[str],
        year: str,
        report_code: str
    ) -> Dict[str, str]:
        """API 요청 파라미터 생성.

        Args:
            corp_codes: 기업 코드 목록
            year: 사업 연도
            report_code: 보고서 코드

        Returns:
            API 요청 파라미터 딕셔너리
        """
        return {
            "crtfc_key": self._api_key,
            "corp_code": self._CORP_CODE_SEPARATOR.join(corp_codes),
            "bsns_year": str(year),
            "reprt_code": report_code,
        }
