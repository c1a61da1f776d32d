"""路線網址測試"""

from urllib.parse import unquote

import pytest

from site_routing.algorithms.route_url_builder import (
    DEFAULT_MAPS_BASE_URL,
    RouteUrlBuilder,
    encode_segment,
)
from site_routing.config.regions import BucketName
from site_routing.config.settings import Settings
from site_routing.exceptions import EmptyBucket
from site_routing.models.bucket import RegionBucket

from conftest import make_bucket, make_record

START_POINT = "台中市西屯區台灣大道三段99號"


def url_segments(url: str) -> list[str]:
    """取出網址中已編碼的路徑片段"""
    assert url.startswith(DEFAULT_MAPS_BASE_URL)
    assert url.endswith("/")
    return url[len(DEFAULT_MAPS_BASE_URL):].rstrip("/").split("/")


@pytest.fixture
def builder() -> RouteUrlBuilder:
    return RouteUrlBuilder()


class TestRouteUrlBuilder:
    """路線網址產生測試"""

    def test_truncates_to_ten_stops(self, builder):
        """測試超過 10 個地址時只取前 10 個"""
        bucket = make_bucket(15)

        query = builder.build(START_POINT, bucket)
        segments = url_segments(query.url)

        assert query.truncated is True
        assert query.warning is not None
        assert query.stop_count == 10
        assert len(segments) == 11
        assert unquote(segments[0]) == START_POINT
        assert [unquote(s) for s in segments[1:]] == bucket.cleaned_addresses[:10]

    def test_truncation_without_start_point(self, builder):
        query = builder.build("", make_bucket(15))

        assert query.truncated is True
        assert len(url_segments(query.url)) == 10

    @pytest.mark.parametrize("count", [1, 5, 10])
    def test_all_stops_within_limit(self, builder, count):
        """測試 10 個以內全部列出"""
        bucket = make_bucket(count)

        query = builder.build(START_POINT, bucket)
        segments = url_segments(query.url)

        assert query.truncated is False
        assert query.warning is None
        assert len(segments) == count + 1
        assert [unquote(s) for s in segments[1:]] == bucket.cleaned_addresses

    def test_blank_start_point_omitted(self, builder):
        """測試空白起點不加入網址"""
        bucket = make_bucket(2)

        query = builder.build("   ", bucket)

        assert query.start_point == ""
        assert [unquote(s) for s in url_segments(query.url)] == bucket.cleaned_addresses

    def test_uses_cleaned_addresses(self, builder):
        """測試使用清理後地址作為停靠點"""
        bucket = RegionBucket(
            name=BucketName.TAICHUNG_SOUTH,
            title="台中市南區",
            records=[make_record("台中市南區復興路100號3樓", "台中市南區復興路100號")],
        )

        query = builder.build("", bucket)

        assert query.stops == ["台中市南區復興路100號"]

    def test_empty_bucket(self, builder):
        """測試空清單無法產生路線"""
        bucket = RegionBucket(name=BucketName.GENERAL_NORTH, title="台中以北")

        with pytest.raises(EmptyBucket) as exc_info:
            builder.build(START_POINT, bucket)

        assert exc_info.value.title == "台中以北"

    def test_from_settings(self):
        """測試由設定決定停靠點上限"""
        builder = RouteUrlBuilder.from_settings(Settings(_env_file=None, max_route_stops=3))

        query = builder.build("", make_bucket(5))

        assert query.stop_count == 3
        assert query.truncated is True

    def test_base_url_gets_trailing_slash(self):
        builder = RouteUrlBuilder(base_url="https://www.google.com/maps/dir")
        query = builder.build("", make_bucket(1))

        assert query.url.startswith("https://www.google.com/maps/dir/")

    def test_invalid_max_stops(self):
        with pytest.raises(ValueError):
            RouteUrlBuilder(max_stops=0)


class TestEncodeSegment:
    """網址編碼測試"""

    def test_encode_chinese(self):
        assert encode_segment("台中市") == "%E5%8F%B0%E4%B8%AD%E5%B8%82"

    def test_encode_reserved_characters(self):
        """測試與 encodeURIComponent 相同的編碼規則"""
        assert encode_segment("2-1號/B棟") == "2-1%E8%99%9F%2FB%E6%A3%9F"
        assert encode_segment("a b(c)") == "a%20b(c)"
