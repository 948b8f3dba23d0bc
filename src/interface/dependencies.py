"""
의존성 조립 모듈
"""
import logging
import sys

from core.services.analysis_service import AnalysisService
from core.services.chart_rendering_service import ChartRenderingService
from core.services.data_processing_service import DataProcessingService
from core.services.financial_report_service import FinancialReportService
from infra.adapters.dart_financial_adapter import DartFinancialAdapter
from infra.adapters.local_storage_adapter import LocalStorageAdapter
from infra.adapters.static_company_list_adapter import StaticCompanyListAdapter
from interface.config import AppConfig

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config: AppConfig, stream=sys.stdout) -> None:
    """진입점 전용 로깅 설정.

    MCP stdio 서버는 stdout을 프로토콜에 쓰므로 stderr를 넘겨야 한다.
    """
    logging.basicConfig(
        level=config.log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream)],
        force=True,
    )


def build_report_service(config: AppConfig) -> FinancialReportService:
    """
    설정으로부터 FinancialReportService 조립

    Args:
        config: 애플리케이션 설정

    Returns:
        FinancialReportService: 모든 프론트엔드가 공유하는 요청 서비스

    Raises:
        ConfigurationError: DART API 키가 없는 경우
    """
    # 1. 어댑터
    financial_adapter = DartFinancialAdapter(
        api_key=config.dart_api_key,
        timeout=config.api_timeout,
    )
    company_adapter = StaticCompanyListAdapter()
    storage_adapter = LocalStorageAdapter()

    # 2. 서비스
    return FinancialReportService(
        financial_port=financial_adapter,
        company_port=company_adapter,
        processing_service=DataProcessingService(config.account_keywords_path),
        analysis_service=AnalysisService(),
        chart_service=ChartRenderingService(),
        storage_port=storage_adapter,
    )
