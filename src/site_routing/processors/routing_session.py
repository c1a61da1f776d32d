"""
路線規劃工作階段
保存最近一次成功的分類結果，並依此產生路線網址
"""
import logging
import threading
from pathlib import Path

from ..algorithms.route_url_builder import RouteUrlBuilder
from ..config.regions import BucketName
from ..exceptions import EmptyBucket
from ..models.bucket import ClassificationResult
from ..models.route import RouteQuery
from .classification_pipeline import ClassificationPipeline

logger = logging.getLogger(__name__)


class RoutingSession:
    """路線規劃工作階段

    每次上傳檔案取得新的處理編號，只有比目前結果更新的處理能覆蓋結果，
    處理失敗時保留原本的結果。
    """

    def __init__(
        self,
        pipeline: ClassificationPipeline | None = None,
        route_builder: RouteUrlBuilder | None = None,
    ):
        self.pipeline = pipeline or ClassificationPipeline()
        self.route_builder = route_builder or RouteUrlBuilder.from_settings(
            self.pipeline.settings
        )

        self._lock = threading.Lock()
        self._latest_generation = 0
        self._committed_generation = 0
        self._result: ClassificationResult | None = None

    @property
    def result(self) -> ClassificationResult | None:
        return self._result

    def begin_run(self) -> int:
        """取得新的處理編號"""
        with self._lock:
            self._latest_generation += 1
            return self._latest_generation

    def commit(self, generation: int, result: ClassificationResult) -> bool:
        """保存分類結果，較舊的處理結果會被捨棄"""
        with self._lock:
            if generation <= self._committed_generation:
                logger.info("捨棄過期的處理結果 (#%d)", generation)
                return False

            self._committed_generation = generation
            self._result = result
            return True

    def load_file(self, source: str | Path | bytes) -> ClassificationResult:
        """讀取並分類檔案，成功後取代目前結果"""
        generation = self.begin_run()
        result = self.pipeline.run_file(source)
        self.commit(generation, result)
        return result

    def build_route(self, bucket_name: BucketName | str, start_point: str = "") -> RouteQuery:
        """為指定分類清單產生路線網址"""
        bucket_name = BucketName(bucket_name)

        if self._result is None:
            title = self.pipeline.region_config.get_bucket(bucket_name).title
            raise EmptyBucket(title)

        return self.route_builder.build(start_point, self._result.get_bucket(bucket_name))
