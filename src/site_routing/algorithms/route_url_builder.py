import logging
from urllib.parse import quote

from ..config.settings import Settings
from ..exceptions import EmptyBucket
from ..models.bucket import RegionBucket
from ..models.route import RouteQuery

logger = logging.getLogger(__name__)

DEFAULT_MAPS_BASE_URL = "https://www.google.com/maps/dir/"
DEFAULT_MAX_STOPS = 10

# 與 JavaScript encodeURIComponent 相同的保留字元
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_segment(text: str) -> str:
    """將地址編碼為網址路徑片段"""
    return quote(text, safe=_URI_COMPONENT_SAFE)


class RouteUrlBuilder:
    def __init__(
        self,
        base_url: str = DEFAULT_MAPS_BASE_URL,
        max_stops: int = DEFAULT_MAX_STOPS,
    ):
        if max_stops < 1:
            raise ValueError("max_stops 必須至少為 1")

        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.max_stops = max_stops

    @classmethod
    def from_settings(cls, settings: Settings) -> "RouteUrlBuilder":
        return cls(base_url=settings.maps_base_url, max_stops=settings.max_route_stops)

    def build(self, start_point: str, bucket: RegionBucket) -> RouteQuery:
        """產生路線規劃網址

        Args:
            start_point: 起點地址（可為空白）
            bucket: 分類清單，使用清理後地址作為停靠點

        Returns:
            路線查詢結果，超過停靠點上限時 truncated 為 True
        """
        if bucket.is_empty:
            raise EmptyBucket(bucket.title)

        start_point = (start_point or "").strip()
        stops = bucket.cleaned_addresses[: self.max_stops]
        truncated = bucket.size > self.max_stops

        segments = [start_point] + stops if start_point else stops
        url = self.base_url + "".join(
            f"{encode_segment(segment)}/" for segment in segments
        )

        warning = None
        if truncated:
            warning = f"注意：由於 Google Maps 限制，只能顯示前 {self.max_stops} 個地點"
            logger.warning(
                "%s 共 %d 個地址，路線僅包含前 %d 個",
                bucket.title,
                bucket.size,
                self.max_stops,
            )

        return RouteQuery(
            start_point=start_point,
            stops=stops,
            truncated=truncated,
            url=url,
            warning=warning,
        )
