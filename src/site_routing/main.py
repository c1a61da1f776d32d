import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config.regions import BucketName
from .config.settings import settings
from .exceptions import SiteRoutingError
from .exporters.excel_exporter import ExcelExporter
from .models.bucket import ClassificationResult
from .processors.classification_pipeline import ClassificationPipeline
from .processors.routing_session import RoutingSession

app = typer.Typer(help="工程地址分類與路線規劃系統")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="顯示詳細處理紀錄"),
):
    """工程地址分類與路線規劃系統"""
    level = "DEBUG" if verbose or settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def classify(
    file_path: str = typer.Argument(..., help="工程資料 Excel 檔案 (XLSX)"),
    output_file: str | None = typer.Option(None, "--output", "-o", help="輸出 Excel 檔案"),
    show_addresses: bool = typer.Option(False, help="列出各分類的地址"),
    include_unclassified: bool = typer.Option(False, help="輸出時加入未分類地址工作表"),
):
    """分類工程地址並匯出結果"""

    console.print(f"📂 讀取 {file_path} ...")

    try:
        pipeline = ClassificationPipeline()
        result = pipeline.run_file(file_path)
    except SiteRoutingError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(code=1)

    display_result_summary(result, show_addresses)

    if output_file:
        if not ExcelExporter.export_result(result, output_file, include_unclassified):
            console.print("❌ 匯出失敗")
            raise typer.Exit(code=1)
        console.print(f"✅ 結果已輸出至 {output_file}")


@app.command()
def route(
    file_path: str = typer.Argument(..., help="工程資料 Excel 檔案 (XLSX)"),
    bucket: BucketName = typer.Argument(..., help="分類清單名稱"),
    start: str = typer.Option("", "--start", "-s", help="起點地址（例如：公司地址）"),
):
    """為指定分類清單產生 Google Maps 路線網址"""

    try:
        session = RoutingSession()
        session.load_file(file_path)
        query = session.build_route(bucket, start)
    except SiteRoutingError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(code=1)

    console.print(f"🗺️ 路線規劃網址（{query.stop_count} 個地點）：")
    console.print(query.url, soft_wrap=True, markup=False)

    if query.warning:
        console.print(f"⚠️ {query.warning}")


@app.command()
def buckets():
    """列出分類清單與收錄區域"""

    try:
        config = ClassificationPipeline().region_config
    except SiteRoutingError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(code=1)

    table = Table(title="分類清單")
    table.add_column("名稱", style="cyan")
    table.add_column("標題")
    table.add_column("收錄區域", style="dim")

    for definition in config.buckets:
        table.add_row(
            definition.name.value,
            definition.title,
            ", ".join(definition.members),
        )

    console.print(table)


def display_result_summary(result: ClassificationResult, show_addresses: bool = False):
    """顯示分類摘要"""
    table = Table(title="工程地址分類結果")
    table.add_column("分類", style="cyan")
    table.add_column("名稱", style="dim")
    table.add_column("地址數", justify="right")
    table.add_column("地址範例", style="dim")

    for bucket in result.buckets.values():
        example = bucket.records[0].cleaned if bucket.records else "無"
        table.add_row(
            bucket.title,
            bucket.name.value,
            str(bucket.size),
            example[:30] + "..." if len(example) > 30 else example,
        )

    console.print(table)
    console.print(
        f"\n📊 總計: {result.total_rows} 筆, 排除 {result.excluded_rows} 筆, "
        f"地址空白 {result.skipped_rows} 筆, 未分類 {len(result.unclassified)} 筆"
    )

    if show_addresses:
        for bucket in result.non_empty_buckets:
            console.print(f"\n[bold]{bucket.title} ({bucket.size})[/bold]")
            for record in bucket.records:
                console.print(f"  - {record.cleaned}", markup=False)


if __name__ == "__main__":
    app()
