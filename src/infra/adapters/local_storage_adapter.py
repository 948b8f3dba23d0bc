"""로컬 파일 시스템 저장 어댑터."""

import logging
from pathlib import Path
from typing import Dict, Union
import pandas as pd

from core.ports.storage_port import StoragePort

logger = logging.getLogger(__name__)


class LocalStorageAdapter(StoragePort):
    """분석 결과를 로컬 엑셀 파일로 저장하는 어댑터.
    
    - pandas + openpyxl 사용
    - 시트마다 열 너비를 내용 길이에 맞춘다
    """

    _MIN_COLUMN_WIDTH = 8

    def __init__(self, ensure_dir: bool = True):
        """초기화.
        
        Args:
            ensure_dir: True이면 저장 전 디렉터리 자동 생성
        """
        self._ensure_dir = ensure_dir

    def save_workbook(
        self,
        sheets: Dict[str, pd.DataFrame],
        file_path: Union[str, Path]
    ) -> Path:
        if not sheets:
            raise ValueError("저장할 시트가 없습니다.")

        path = Path(file_path)
        if self._ensure_dir:
            path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            for sheet_name, df in sheets.items():
                df.to_excel(writer, sheet_name=sheet_name, index=True)
                self._fit_columns(writer.sheets[sheet_name])

        logger.debug(f"엑셀 저장 완료: {path} ({len(sheets)}개 시트)")
        return path

    def _fit_columns(self, worksheet) -> None:
        """열 너비를 가장 긴 셀 값에 맞춘다."""
        for column_cells in worksheet.iter_cols():
            longest = max((len(str(cell.value)) for cell in column_cells if cell.value is not None), default=0)
            letter = column_cells[0].column_letter
            worksheet.column_dimensions[letter].width = max(longest + 2, self._MIN_COLUMN_WIDTH)
