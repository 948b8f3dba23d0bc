"""재무제표 도메인 모델 - 공시 원본 행 단위."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class ReportType(Enum):
    """보고서 타입."""
    ANNUAL = "11011"       # 사업보고서
    SEMI_ANNUAL = "11012"  # 반기보고서
    Q1 = "11013"           # 1분기보고서
    Q3 = "11014"           # 3분기보고서


# 보고서 이름 -> DART 보고서 코드
REPORT_CODES: Dict[str, str] = {
    "annual": ReportType.ANNUAL.value,
    "semi_annual": ReportType.SEMI_ANNUAL.value,
    "q1": ReportType.Q1.value,
    "q3": ReportType.Q3.value,
}


def resolve_report_code(value: str) -> str:
    """보고서 이름이면 코드로 바꾸고, 그 외 값은 그대로 돌려준다.

    알 수 없는 코드도 검증 없이 DART API로 전달된다.
    """
    key = value.strip()
    return REPORT_CODES.get(key.lower(), key)


@dataclass(frozen=True)
class RawLineItem:
    """공시된 계정과목 한 줄 (기업 1곳, 기간 1개)."""
    stock_code: str                  # 종목코드 (그룹핑 키)
    bsns_year: str                   # 사업연도
    reprt_code: str                  # 보고서 코드
    account_nm: str                  # 계정과목명
    thstrm_amount: str = ""          # 당기금액
    thstrm_add_amount: str = ""      # 당기누적금액 (당기금액이 없을 때 사용)
    frmtrm_amount: str = ""          # 전기금액
    frmtrm_add_amount: str = ""      # 전기누적금액
    corp_code: str = ""
    corp_name: str = ""
    fs_div: str = ""                 # CFS / OFS
    fs_nm: str = ""
    sj_div: str = ""                 # BS / IS
    sj_nm: str = ""
    currency: str = ""


@dataclass(frozen=True)
class CompanyInfo:
    """분석 가능한 기업 정보."""
    corp_code: str
    corp_name: str
    stock_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "corp_code": self.corp_code,
            "corp_name": self.corp_name,
            "stock_code": self.stock_code,
        }
