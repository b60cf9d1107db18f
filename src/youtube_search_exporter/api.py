"""YouTube Data API functions for searching videos and retrieving their details."""

from typing import Dict, List, Tuple

import requests
from rich.console import Console
from rich.markup import escape

from .config import MAX_API_PAGE_SIZE
from .errors import (
    DETAILS_FAILURE_POLICY,
    SEARCH_FAILURE_POLICY,
    RemoteError,
    apply_failure_policy,
)

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"
VIDEO_PARTS = "snippet,contentDetails,statistics,topicDetails,status,recordingDetails"

console = Console()


def _check_size(name: str, value: int) -> None:
    if not 1 <= value <= MAX_API_PAGE_SIZE:
        raise ValueError(f"{name} must be between 1 and {MAX_API_PAGE_SIZE}, got {value}")


def _get_json(url: str, params: Dict) -> Dict:
    """
    Issue a GET request and decode the JSON body.

    Raises:
        RemoteError: On a non-success status, a network failure or a body
            that is not valid JSON
    """
    try:
        response = requests.get(url, params=params)
        response.raise_for_status()
        return response.json()
    except requests.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else None
        raise RemoteError(
            f"Request to {url} failed with status {status_code}: {e}",
            status_code=status_code,
            url=url,
        ) from e
    except requests.RequestException as e:
        raise RemoteError(f"Request to {url} failed: {e}", url=url) from e


def fetch_search_page(
    query: str, api_key: str, page_size: int = 50, page_token: str = ""
) -> Tuple[List[Dict], str]:
    """
    Fetch one page of video search results.

    Args:
        query: Free-text search query
        api_key: YouTube Data API v3 key
        page_size: Results to request for this page (1-50)
        page_token: Continuation token from the previous page, "" for the first

    Returns:
        Tuple of (search result items, next page token or "" when there are no more pages)

    Raises:
        RemoteError: If the search endpoint cannot be reached or returns an error
    """
    _check_size("page_size", page_size)

    params = {
        "part": "snippet",
        "type": "video",
        "maxResults": page_size,
        "q": query,
        "key": api_key,
    }

    if page_token:
        params["pageToken"] = page_token

    data = _get_json(SEARCH_URL, params)
    return data.get("items", []), data.get("nextPageToken") or ""


def collect_search_results(
    query: str, api_key: str, target_count: int = 500, page_size: int = 50
) -> List[Dict]:
    """
    Page through search results until target_count items are collected or
    the results run out.

    The last page is kept whole, so the result may exceed target_count by up
    to page_size - 1 items. A failed page ends the whole run.

    Args:
        query: Free-text search query
        api_key: YouTube Data API v3 key
        target_count: Number of results to aim for
        page_size: Results requested per page (1-50)

    Returns:
        Search result items in the order the pages were returned

    Raises:
        RemoteError: If any page fails to load
    """
    results: List[Dict] = []
    page_token = ""

    while len(results) < target_count:
        console.print(
            f"[cyan]🔍 Fetching search results... Current total: [bold]{len(results)}[/bold][/cyan]"
        )
        try:
            items, page_token = fetch_search_page(
                query, api_key, page_size=page_size, page_token=page_token
            )
        except RemoteError as e:
            apply_failure_policy(SEARCH_FAILURE_POLICY, e)
            break

        results.extend(items)

        if not page_token:
            break

    console.print(f"[green]✓ Fetched [bold]{len(results)}[/bold] search results[/green]")
    return results


def extract_video_ids(items: List[Dict]) -> List[str]:
    """Pull video IDs out of search result items, preserving order."""
    video_ids = []
    for item in items:
        video_id = item.get("id", {}).get("videoId")
        if video_id:
            video_ids.append(video_id)
    return video_ids


def fetch_video_details(
    video_ids: List[str], api_key: str, batch_size: int = 50
) -> List[Dict]:
    """
    Get full metadata for a list of video IDs, one request per batch.

    A batch whose request fails is reported and left out of the result; the
    remaining batches are still fetched.

    Args:
        video_ids: List of YouTube video IDs
        api_key: YouTube Data API v3 key
        batch_size: Video IDs per request (1-50)

    Returns:
        Video resources (snippet, contentDetails, statistics, topicDetails,
        status, recordingDetails) in the order of video_ids
    """
    _check_size("batch_size", batch_size)

    details: List[Dict] = []

    for i in range(0, len(video_ids), batch_size):
        batch = video_ids[i : i + batch_size]
        span = f"{i + 1}-{i + len(batch)}"

        console.print(f"[cyan]📋 Fetching details for videos {span}...[/cyan]")

        params = {
            "part": VIDEO_PARTS,
            "id": ",".join(batch),
            "key": api_key,
        }

        try:
            data = _get_json(VIDEOS_URL, params)
        except RemoteError as e:
            console.print(f"[red]Error fetching video details: {escape(str(e))}[/red]")
            console.print(
                f"[yellow]⏭  Skipping chunk of videos {span} due to error.[/yellow]"
            )
            apply_failure_policy(DETAILS_FAILURE_POLICY, e)
            continue

        details.extend(data.get("items", []))

    return details
