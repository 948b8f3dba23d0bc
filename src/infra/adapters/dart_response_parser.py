"""DART API 응답 파싱 유틸리티."""

import logging
from typing import Any, Dict, List

from core.domain.exceptions import UpstreamError
from core.domain.models.financial_statement import RawLineItem

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "000"


class DartResponseParser:
    """DART API 응답을 도메인 모델로 변환하는 파서.

    ``fnlttMultiAcnt.json`` 응답의 ``list`` 항목을 RawLineItem 리스트로 변환합니다.
    """

    @staticmethod
    def parse_line_items(response_data: Dict[str, Any]) -> List[RawLineItem]:
        """API 응답을 RawLineItem 리스트로 변환.

        Args:
            response_data: DART API 응답 데이터

        Returns:
            계정과목 행 리스트. 정상 응답이지만 항목이 없으면 빈 리스트.

        Raises:
            UpstreamError: 상태 코드가 "000"이 아닌 경우
        """
        DartResponseParser._check_status(response_data)

        items = response_data.get("list") or []
        if not items:
            logger.info("DART API 정상 응답이지만 데이터가 없습니다.")
        return [DartResponseParser._parse_item(item) for item in items]

    @staticmethod
    def _check_status(data: Dict[str, Any]) -> None:
        status = str(data.get("status", ""))
        if status != SUCCESS_STATUS:
            message = data.get("message", "N/A")
            logger.error(f"API Error - Status: {status}, Message: {message}")
            raise UpstreamError(status, message)

    @staticmethod
    def _parse_item(item: Dict[str, Any]) -> RawLineItem:
        def text(key: str) -> str:
            value = item.get(key)
            return "" if value is None else str(value)

        return RawLineItem(
            stock_code=text("stock_code").strip(),
            bsns_year=text("bsns_year"),
            reprt_code=text("reprt_code"),
            account_nm=text("account_nm"),
            thstrm_amount=text("thstrm_amount"),
            thstrm_add_amount=text("thstrm_add_amount"),
            frmtrm_amount=text("frmtrm_amount"),
            frmtrm_add_amount=text("frmtrm_add_amount"),
            corp_code=text("corp_code"),
            corp_name=text("corp_name"),
            fs_div=text("fs_div"),
            fs_nm=text("fs_nm"),
            sj_div=text("sj_div"),
            sj_nm=text("sj_nm"),
            currency=text("currency"),
        )
