"""pytest 配置檔案

提供測試用的 fixtures 和配置。
"""

from datetime import datetime
from typing import List

import pandas as pd
import pytest

from site_routing.config.regions import BucketName
from site_routing.config.settings import Settings
from site_routing.models.address import AddressRecord
from site_routing.models.bucket import ClassificationResult, RegionBucket
from site_routing.processors.classification_pipeline import ClassificationPipeline


def make_record(original: str, cleaned: str | None = None) -> AddressRecord:
    """建立地址資料（未指定時清理後地址與原始地址相同）"""
    return AddressRecord(original=original, cleaned=cleaned or original)


def make_bucket(count: int, name: BucketName = BucketName.TAICHUNG_SOUTH) -> RegionBucket:
    """建立含有指定數量地址的分類清單"""
    return RegionBucket(
        name=name,
        title="台中市南區",
        records=[make_record(f"台中市南區復興路一段{i + 1}號") for i in range(count)],
    )


@pytest.fixture
def test_settings() -> Settings:
    """不讀取 .env 的預設設定"""
    return Settings(_env_file=None)


@pytest.fixture
def pipeline(test_settings) -> ClassificationPipeline:
    return ClassificationPipeline(settings=test_settings)


@pytest.fixture
def sample_rows() -> List[dict]:
    """提供測試用的工程資料列"""
    return [
        {
            "工程名稱": "西屯辦公大樓",
            "工程地址": "台中市西屯區中清路三段225巷12弄58號",
            "備註": None,
        },
        {
            "工程名稱": "員林廠房",
            "工程地址": "彰化縣員林市中山路100號",
            "備註": None,
        },
        {
            "工程名稱": "草屯住宅",
            "工程地址": "南投縣草屯鎮中正路5號",
            "備註": None,
        },
        {
            "工程名稱": "南區店面",
            "工程地址": "台中市南區復興路一段100號3樓之1",
            "備註": "週末施工",
        },
        {
            "工程名稱": "測試案場",
            "工程地址": "台中市大里區中興路二段50號",
            "備註": None,
        },
        {
            "工程名稱": "北屯倉庫",
            "工程地址": "台中市北屯區崇德路二段10號",
            "備註": "已完工",
        },
        {
            "工程名稱": "花蓮分店",
            "工程地址": "花蓮縣花蓮市中正路1號",
            "備註": None,
        },
        {
            "工程名稱": "未填地址",
            "工程地址": None,
            "備註": None,
        },
    ]


@pytest.fixture
def sample_excel_file(tmp_path, sample_rows):
    """將測試資料寫入 Excel 檔案"""
    file_path = tmp_path / "工程清單.xlsx"
    pd.DataFrame(sample_rows).to_excel(file_path, index=False, engine="openpyxl")
    return file_path


@pytest.fixture
def sample_result(pipeline, sample_rows) -> ClassificationResult:
    return pipeline.run(sample_rows)


@pytest.fixture
def empty_result(pipeline) -> ClassificationResult:
    return pipeline.run([{"工程地址": None}])


@pytest.fixture
def temp_output_dir(tmp_path):
    """提供臨時輸出目錄"""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 3, 1, 9, 30)
