"""Search, enrich, sort and export workflow."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.table import Table

from .api import collect_search_results, extract_video_ids, fetch_video_details
from .config import ExportSettings
from .export import save_records_csv
from .records import build_output_records, has_captions, sort_records
from .transcript import fetch_transcript

console = Console()


def export_search_results(
    api_key: str, settings: Optional[ExportSettings] = None
) -> dict:
    """
    Search YouTube, fetch details and transcripts, and write a sorted CSV.

    Args:
        api_key: YouTube Data API v3 key
        settings: Run settings; defaults to ExportSettings()

    Returns:
        Dictionary with statistics about the run:
        - total_results: Number of search results collected
        - total_ids: Number of video IDs extracted from them
        - details_fetched: Number of videos with details
        - missing_details: Video IDs with no details (failed batch or video not found)
        - captions_available: Number of videos flagged as having captions
        - transcripts_fetched: Number of records with transcript text
        - output_path: Path of the written CSV

    Raises:
        RemoteError: If the search itself fails; no file is written
    """
    settings = settings or ExportSettings()

    console.print(
        f"[cyan]Starting export for query [bold]{escape(repr(settings.query))}[/bold]...[/cyan]"
    )
    search_results = collect_search_results(
        settings.query,
        api_key,
        target_count=settings.target_count,
        page_size=settings.page_size,
    )
    video_ids = extract_video_ids(search_results)
    console.print(f"[green]✓ Found [bold]{len(video_ids)}[/bold] video IDs[/green]\n")

    details = fetch_video_details(video_ids, api_key, batch_size=settings.batch_size)
    console.print(
        f"[green]✓ Retrieved details for [bold]{len(details)}[/bold] videos[/green]\n"
    )

    console.print("[cyan]Processing video data...[/cyan]")
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TimeElapsedColumn(),
        TimeRemainingColumn(),
        console=console,
    ) as progress:
        records = build_output_records(
            progress.track(
                details, total=len(details), description="[cyan]Building records..."
            ),
            languages=settings.languages,
            transcript_fetcher=fetch_transcript,
        )

    console.print("[cyan]Sorting data by view count...[/cyan]")
    sorted_records = sort_records(records)

    console.print("[cyan]Saving data to CSV...[/cyan]")
    file_path = save_records_csv(sorted_records, settings.output_path)
    console.print(f"[green]✓ Data saved to [bold]{file_path}[/bold][/green]")

    stats = {
        "total_results": len(search_results),
        "total_ids": len(video_ids),
        "details_fetched": len(details),
        "missing_details": len(video_ids) - len(details),
        "captions_available": sum(1 for detail in details if has_captions(detail)),
        "transcripts_fetched": sum(1 for record in records if record["captionText"]),
        "output_path": str(file_path),
    }

    print_summary(stats)
    return stats


def print_summary(stats: dict) -> None:
    console.print("\n")
    summary_table = Table(
        title="Export Summary", show_header=True, header_style="bold magenta"
    )
    summary_table.add_column("Metric", style="cyan", no_wrap=True)
    summary_table.add_column("Count", style="green", justify="right")

    summary_table.add_row("Search Results", str(stats["total_results"]))
    summary_table.add_row("Videos With Details", f"[green]{stats['details_fetched']}[/green]")
    summary_table.add_row("Missing Details", f"[yellow]{stats['missing_details']}[/yellow]")
    summary_table.add_row("Captions Available", str(stats["captions_available"]))
    summary_table.add_row("Transcripts Fetched", f"[green]{stats['transcripts_fetched']}[/green]")

    console.print(summary_table)
