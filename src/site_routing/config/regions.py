"""區域分類設定

分類規則與分類清單以資料表示，新增區域時只需修改此處的設定
（或提供 JSON 設定檔），不需要修改分類演算法。

判斷流程：
1. 依序比對 ``RegionRule.keywords``，第一個命中的規則決定結果
2. 規則若有 ``district_rules``，依序比對行政區名稱，第一個命中者決定區域
3. 取得區域後，所有 ``members`` 包含該區域的分類清單都會收錄此地址
"""

import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ValidationError, model_validator

from ..exceptions import InvalidRegionConfig

logger = logging.getLogger(__name__)


class Region:
    """內建的地理區域名稱

    區域在設定中是一般字串，JSON 設定檔可以使用此處以外的新區域
    （例如 "hualien"），只要有分類清單的 members 收錄即可。
    """

    TAICHUNG_NORTH = "taichung_north"
    TAICHUNG_SOUTH = "taichung_south"
    CHANGHUA = "changhua"
    NANTOU = "nantou"
    NORTH = "north"
    SOUTH = "south"


# 未分類地址使用的名稱（匯出工作表名稱），分類清單不可使用
UNCLASSIFIED_TITLE = "未分類"


class BucketName(str, Enum):
    """分類清單名稱"""

    TAICHUNG_NORTH = "taichung_north"
    TAICHUNG_SOUTH = "taichung_south"
    SOUTH_CHANGHUA = "south_changhua"
    SOUTH_NANTOU = "south_nantou"
    SOUTH_ALL = "south_all"
    GENERAL_NORTH = "general_north"
    GENERAL_SOUTH = "general_south"


class DistrictRule(BaseModel):
    """行政區子規則"""

    region: str
    districts: list[str]


class RegionRule(BaseModel):
    """縣市層級的分類規則"""

    name: str
    keywords: list[str]
    region: str | None = None
    district_rules: list[DistrictRule] = []

    @model_validator(mode="after")
    def _check_target(self) -> "RegionRule":
        if (self.region is None) == (not self.district_rules):
            raise ValueError(
                f"規則 {self.name} 必須指定 region 或 district_rules 其中之一"
            )
        return self


class BucketDefinition(BaseModel):
    """分類清單定義（members 為收錄的區域）"""

    name: BucketName
    title: str
    members: list[str]


class RegionConfig(BaseModel):
    """完整的區域分類設定"""

    rules: list[RegionRule]
    buckets: list[BucketDefinition]

    @model_validator(mode="after")
    def _check_buckets(self) -> "RegionConfig":
        names = [bucket.name for bucket in self.buckets]
        if len(names) != len(set(names)):
            raise ValueError("分類清單名稱重複")

        titles = [bucket.title for bucket in self.buckets]
        if len(titles) != len(set(titles)):
            raise ValueError("分類清單標題重複")

        if UNCLASSIFIED_TITLE in titles:
            raise ValueError(f"「{UNCLASSIFIED_TITLE}」保留給未分類地址，不能作為分類清單標題")

        return self

    def get_bucket(self, name: BucketName) -> BucketDefinition:
        for bucket in self.buckets:
            if bucket.name == name:
                return bucket
        raise KeyError(f"未定義的分類清單: {name}")


# 台中市行政區
TAICHUNG_KEYWORDS = ["台中", "臺中"]
TAICHUNG_NORTH_DISTRICTS = [
    "北區", "西區", "北屯區", "西屯區", "中區",
    "東區", "清水區", "梧棲區", "大甲區", "大安區",
]
TAICHUNG_SOUTH_DISTRICTS = [
    "南區", "南屯區", "大里區", "太平區",
    "烏日區", "大肚區", "龍井區", "霧峰區",
]

# 其他縣市
NORTH_REGIONS = ["苗栗", "新竹", "桃園", "台北", "臺北", "新北", "基隆", "宜蘭"]
SOUTH_REGIONS = ["雲林", "嘉義", "台南", "臺南", "高雄", "屏東"]


DEFAULT_REGION_CONFIG = RegionConfig(
    rules=[
        RegionRule(
            name="台中市",
            keywords=TAICHUNG_KEYWORDS,
            district_rules=[
                DistrictRule(
                    region=Region.TAICHUNG_NORTH, districts=TAICHUNG_NORTH_DISTRICTS
                ),
                DistrictRule(
                    region=Region.TAICHUNG_SOUTH, districts=TAICHUNG_SOUTH_DISTRICTS
                ),
            ],
        ),
        RegionRule(name="彰化縣", keywords=["彰化"], region=Region.CHANGHUA),
        RegionRule(name="南投縣", keywords=["南投"], region=Region.NANTOU),
        RegionRule(name="台中以北", keywords=NORTH_REGIONS, region=Region.NORTH),
        RegionRule(name="台中以南", keywords=SOUTH_REGIONS, region=Region.SOUTH),
    ],
    buckets=[
        BucketDefinition(
            name=BucketName.TAICHUNG_NORTH,
            title="台中市北區",
            members=[Region.TAICHUNG_NORTH],
        ),
        BucketDefinition(
            name=BucketName.TAICHUNG_SOUTH,
            title="台中市南區",
            members=[Region.TAICHUNG_SOUTH],
        ),
        BucketDefinition(
            name=BucketName.SOUTH_CHANGHUA,
            title="台中南區+彰化",
            members=[Region.TAICHUNG_SOUTH, Region.CHANGHUA],
        ),
        BucketDefinition(
            name=BucketName.SOUTH_NANTOU,
            title="台中南區+南投",
            members=[Region.TAICHUNG_SOUTH, Region.NANTOU],
        ),
        BucketDefinition(
            name=BucketName.SOUTH_ALL,
            title="台中南區+彰化+南投",
            members=[Region.TAICHUNG_SOUTH, Region.CHANGHUA, Region.NANTOU],
        ),
        BucketDefinition(
            name=BucketName.GENERAL_NORTH,
            title="台中以北",
            members=[Region.NORTH],
        ),
        BucketDefinition(
            name=BucketName.GENERAL_SOUTH,
            title="台中以南",
            members=[Region.SOUTH],
        ),
    ],
)


def load_region_config(config_path: str | Path | None = None) -> RegionConfig:
    """載入區域分類設定

    Args:
        config_path: JSON 設定檔路徑，None 時使用內建設定

    Returns:
        區域分類設定

    Raises:
        InvalidRegionConfig: 設定檔不存在或內容不符合格式
    """
    if config_path is None:
        return DEFAULT_REGION_CONFIG

    config_file = Path(config_path)
    if not config_file.exists():
        raise InvalidRegionConfig(str(config_file), "檔案不存在")

    try:
        config = RegionConfig.model_validate_json(
            config_file.read_text(encoding="utf-8")
        )
    except ValidationError as e:
        logger.error(f"區域設定檔格式錯誤 {config_file}: {e}")
        raise InvalidRegionConfig(str(config_file), str(e)) from e

    logger.info(
        "已載入區域設定 %s：%d 條規則，%d 個分類清單",
        config_file,
        len(config.rules),
        len(config.buckets),
    )
    return config
