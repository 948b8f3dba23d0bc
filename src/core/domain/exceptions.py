"""도메인 예외."""

from typing import Iterable


class DartAnalysisError(Exception):
    """재무 분석 처리 중 발생하는 모든 예외의 기반 클래스."""


class ConfigurationError(DartAnalysisError):
    """필수 설정(API 키 등)이 없을 때."""


class TransportError(DartAnalysisError):
    """DART API에 도달하지 못했을 때 (DNS, 타임아웃, HTTP 오류, 잘못된 응답 본문)."""


class UpstreamError(DartAnalysisError):
    """DART API가 정상 상태 코드("000")가 아닌 응답을 돌려줬을 때."""

    def __init__(self, status: str, message: str):
        self.status = status
        self.message = message
        super().__init__(f"DART API Error: {message} (status={status})")


class UnsupportedMetricError(DartAnalysisError):
    """지원하지 않는 차트 지표를 요청했을 때."""

    def __init__(self, metric: str, supported: Iterable[str]):
        self.metric = metric
        self.supported = list(supported)
        super().__init__(
            f"지원하지 않는 지표입니다: {metric}. 지원되는 지표: {', '.join(self.supported)}"
        )
