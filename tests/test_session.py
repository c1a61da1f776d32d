"""路線規劃工作階段測試"""

from urllib.parse import unquote

import pytest

from site_routing.config.regions import BucketName
from site_routing.exceptions import EmptyBucket, UnreadableFile
from site_routing.processors.routing_session import RoutingSession


@pytest.fixture
def session(pipeline) -> RoutingSession:
    return RoutingSession(pipeline=pipeline)


class TestRoutingSession:
    """工作階段測試"""

    def test_load_file(self, session, sample_excel_file):
        result = session.load_file(sample_excel_file)

        assert session.result is result

    def test_failed_run_keeps_previous_result(self, session, sample_excel_file, tmp_path):
        """測試處理失敗時保留原本結果"""
        previous = session.load_file(sample_excel_file)

        with pytest.raises(UnreadableFile):
            session.load_file(tmp_path / "missing.xlsx")

        assert session.result is previous

    def test_stale_result_discarded(self, session, sample_result, empty_result):
        """測試較舊的處理在新結果之後完成時被捨棄"""
        first = session.begin_run()
        second = session.begin_run()

        assert session.commit(second, sample_result) is True
        assert session.commit(first, empty_result) is False
        assert session.result is sample_result

    def test_latest_run_replaces_result(self, session, sample_result, empty_result):
        first = session.begin_run()
        second = session.begin_run()

        assert session.commit(first, empty_result) is True
        assert session.commit(second, sample_result) is True
        assert session.result is sample_result

    def test_build_route(self, session, sample_excel_file):
        session.load_file(sample_excel_file)

        query = session.build_route("south_all", "公司")

        assert query.stops == [
            "彰化縣員林市中山路100號",
            "南投縣草屯鎮中正路5號",
            "台中市南區復興路一段100號",
        ]
        assert unquote(query.url).startswith("https://www.google.com/maps/dir/公司/")

    def test_build_route_without_result(self, session):
        """測試尚未上傳檔案時無法產生路線"""
        with pytest.raises(EmptyBucket) as exc_info:
            session.build_route(BucketName.TAICHUNG_SOUTH)

        assert exc_info.value.title == "台中市南區"

    def test_build_route_empty_bucket(self, session, sample_excel_file):
        session.load_file(sample_excel_file)

        with pytest.raises(EmptyBucket):
            session.build_route(BucketName.GENERAL_NORTH)
