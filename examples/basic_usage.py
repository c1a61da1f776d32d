#!/usr/bin/env python3
"""基本使用範例

展示如何使用 site-routing 分類工程地址、產生路線網址並匯出 Excel。
"""

from site_routing.algorithms.route_url_builder import RouteUrlBuilder
from site_routing.config.regions import BucketName
from site_routing.exporters.excel_exporter import ExcelExporter
from site_routing.processors.classification_pipeline import ClassificationPipeline


def create_sample_rows():
    """建立範例工程資料"""
    return [
        {"工程名稱": "西屯辦公大樓", "工程地址": "台中市西屯區中清路三段225巷12弄58號"},
        {"工程名稱": "南區店面", "工程地址": "台中市南區復興路一段100號3樓之1"},
        {"工程名稱": "南區店面二期", "工程地址": "台中市南區復興路一段100號5樓"},
        {"工程名稱": "大里透天", "工程地址": "台中市大里區中興路二段50號"},
        {"工程名稱": "員林廠房", "工程地址": "彰化縣員林市中山路100號"},
        {"工程名稱": "草屯住宅", "工程地址": "南投縣草屯鎮中正路5號"},
        {"工程名稱": "測試案場", "工程地址": "台中市霧峰區中正路1號"},
        {"工程名稱": "桃園倉庫", "工程地址": "桃園市中壢區中華路一段10號"},
    ]


def main():
    print("🏗️ 工程地址分類範例")
    print("=" * 50)

    # 1. 分類
    pipeline = ClassificationPipeline()
    result = pipeline.run(create_sample_rows())

    for bucket in result.buckets.values():
        print(f"\n{bucket.title} ({bucket.size})")
        for record in bucket.records:
            print(f"  - {record.original} -> {record.cleaned}")

    print(f"\n排除 {result.excluded_rows} 筆，未分類 {len(result.unclassified)} 筆")

    # 2. 產生路線網址
    builder = RouteUrlBuilder()
    query = builder.build(
        "台中市西屯區台灣大道三段99號", result.get_bucket(BucketName.SOUTH_ALL)
    )
    print(f"\n🗺️ 台中南區+彰化+南投 路線網址：\n{query.url}")
    if query.warning:
        print(query.warning)

    # 3. 匯出 Excel
    if ExcelExporter.export_result(result, "output/工程地址分類.xlsx"):
        print("\n✅ 已匯出 output/工程地址分類.xlsx")


if __name__ == "__main__":
    main()
