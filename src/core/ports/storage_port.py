"""분석 결과 저장을 위한 포트 인터페이스."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Union
import pandas as pd


class StoragePort(ABC):
    """분석 결과 저장 포트."""

    @abstractmethod
    def save_workbook(
        self,
        sheets: Dict[str, pd.DataFrame],
        file_path: Union[str, Path]
    ) -> Path:
        """시트별 DataFrame을 하나의 엑셀 파일로 저장.
        
        Args:
            sheets: {시트명: DataFrame} 딕셔너리
            file_path: 저장할 엑셀 파일 경로

        Returns:
            저장된 파일 경로
        """
        raise NotImplementedError
