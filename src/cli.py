"""CLI 인터페이스."""

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

import typer
from rich.console import Console

from core.domain.exceptions import ConfigurationError, DartAnalysisError
from core.domain.models.financial_statement import REPORT_CODES
from core.services.financial_report_service import FinancialReportService
from interface.config import AppConfig
from interface.dependencies import build_report_service, configure_logging

# Typer 앱 생성
app = typer.Typer(
    name="dart-financial-analyzer",
    help="DART 공시 재무제표 다중 기업 분석 도구",
    add_completion=False
)

# Rich console
console = Console()
logger = logging.getLogger(__name__)

DEFAULT_REPORT = REPORT_CODES["annual"]

CorpCodesOption = typer.Option(..., "--corp-codes", "-c", help="기업 고유번호 (쉼표로 구분)")
YearOption = typer.Option(..., "--year", "-y", help="사업연도 (예: 2023)")
ReportOption = typer.Option(
    DEFAULT_REPORT, "--report", "-r",
    help="보고서 코드 또는 이름 (annual, semi_annual, q1, q3)"
)


def _split_codes(corp_codes: str) -> List[str]:
    codes = [c.strip() for c in corp_codes.split(",") if c.strip()]
    if not codes:
        console.print("[red]❌ 기업 고유번호를 하나 이상 입력해주세요.[/red]")
        raise typer.Exit(code=2)
    return codes


def _load_service() -> FinancialReportService:
    config = AppConfig.from_env()
    configure_logging(config, stream=sys.stderr)
    try:
        return build_report_service(config)
    except ConfigurationError as e:
        console.print(f"[red]❌ {e}[/red]")
        logger.error(str(e))
        raise typer.Exit(code=1)


def _render(render: Callable[[FinancialReportService], Optional[str]]) -> None:
    """렌더링 결과를 출력. 데이터가 없으면 안내, 오류면 종료 코드 1."""
    service = _load_service()
    try:
        text = render(service)
    except DartAnalysisError as e:
        console.print(f"[red]❌ 오류 발생: {e}[/red]")
        logger.error(f"분석 실패: {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        console.print(f"[red]❌ 오류 발생: {e}[/red]")
        logger.exception(f"작업 중 치명적인 오류 발생: {e}")
        raise typer.Exit(code=1)

    if text is None:
        console.print("[yellow]⚠️  해당 조건에 맞는 재무 데이터를 찾을 수 없습니다.[/yellow]")
        raise typer.Exit(code=0)
    console.print(text, markup=False, highlight=False)


@app.command()
def companies():
    """분석 가능한 회사 목록을 출력합니다."""
    service = _load_service()
    for company in service.list_companies():
        console.print(
            f"[cyan]{company.corp_name}[/cyan] ({company.stock_code or 'N/A'}) - {company.corp_code}"
        )


@app.command()
def analyze(
    corp_codes: str = CorpCodesOption,
    year: str = YearOption,
    report: str = ReportOption,
):
    """요약과 기업별 상세 지표를 출력합니다.

    Examples:
        $ uv run analyzer analyze -c 00126380,00164779 -y 2023
    """
    codes = _split_codes(corp_codes)
    _render(lambda s: s.render_analysis(codes, year, report))


@app.command()
def chart(
    corp_codes: str = CorpCodesOption,
    year: str = YearOption,
    report: str = ReportOption,
    metric: str = typer.Option("revenue", "--metric", "-m", help="차트 지표"),
):
    """지표 하나의 텍스트 차트를 출력합니다."""
    codes = _split_codes(corp_codes)
    _render(lambda s: s.render_chart(codes, year, report, metric))


@app.command()
def dashboard(
    corp_codes: str = CorpCodesOption,
    year: str = YearOption,
    report: str = ReportOption,
):
    """요약과 텍스트 대시보드를 출력합니다."""
    codes = _split_codes(corp_codes)
    _render(lambda s: s.render_dashboard(codes, year, report))


@app.command()
def html(
    corp_codes: str = CorpCodesOption,
    year: str = YearOption,
    report: str = ReportOption,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="HTML 저장 경로"),
):
    """HTML 대시보드를 출력하거나 파일로 저장합니다."""
    codes = _split_codes(corp_codes)
    if output is None:
        _render(lambda s: s.render_html_dashboard(codes, year, report))
        return

    def save(service: FinancialReportService) -> Optional[str]:
        markup = service.render_html_dashboard(codes, year, report)
        if markup is None:
            return None
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markup, encoding="utf-8")
        return f"✅ HTML 대시보드 저장: {output}"

    _render(save)


@app.command()
def table(
    corp_codes: str = CorpCodesOption,
    year: str = YearOption,
    report: str = ReportOption,
):
    """요약과 기업별 비교표를 출력합니다."""
    codes = _split_codes(corp_codes)
    _render(lambda s: s.render_comparison_table(codes, year, report))


@app.command()
def export(
    corp_codes: str = CorpCodesOption,
    year: str = YearOption,
    report: str = ReportOption,
    output: Optional[str] = typer.Option(None, "--output", "-o", help="출력 파일 경로"),
):
    """지표와 차트 데이터를 엑셀 파일로 저장합니다."""
    codes = _split_codes(corp_codes)
    if not output:
        output = f"output/financial_analysis_{year}_{report}.xlsx"

    def save(service: FinancialReportService) -> Optional[str]:
        saved = service.export_workbook(codes, year, report, output)
        return None if saved is None else f"✅ 완료! 결과 저장: {saved}"

    _render(save)


@app.command("serve-mcp")
def serve_mcp(
    transport: str = typer.Option("stdio", "--transport", "-t", help="stdio 또는 sse"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="SSE 포트"),
):
    """MCP 서버를 실행합니다."""
    from interface.mcp.server import create_mcp_server

    config = AppConfig.from_env()
    # stdio 전송은 stdout을 사용한다
    configure_logging(config, stream=sys.stderr)
    try:
        service = build_report_service(config)
    except ConfigurationError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    mcp = create_mcp_server(service)
    logger.info(f"DART Financial MCP Server started ({transport})")
    if transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=transport, host=config.host, port=port or config.port)


@app.command("serve-http")
def serve_http(
    port: Optional[int] = typer.Option(None, "--port", "-p", help="HTTP 포트 (기본: PORT 환경 변수)"),
):
    """HTTP API 서버를 실행합니다."""
    import uvicorn
    from interface.http.app import create_app

    config = AppConfig.from_env()
    configure_logging(config)
    try:
        service = build_report_service(config)
    except ConfigurationError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1)

    port = port or config.port
    console.print(f"[green]🚀 DART Financial Analysis Server running on port {port}[/green]")
    console.print(f"[cyan]📊 Health check: http://localhost:{port}/health[/cyan]")
    uvicorn.run(create_app(service), host=config.host, port=port, log_level=config.log_level.lower())


if __name__ == "__main__":
    app()
