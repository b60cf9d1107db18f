"""Flattening video details into export records, and sorting them."""

from typing import Callable, Dict, Iterable, List, Optional

from .transcript import fetch_transcript

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"

DETAIL_GROUPS = (
    "snippet",
    "contentDetails",
    "statistics",
    "topicDetails",
    "status",
    "recordingDetails",
)

TranscriptFetcher = Callable[..., Optional[str]]


def build_watch_url(video_id: str) -> str:
    return WATCH_URL_TEMPLATE.format(video_id=video_id)


def normalize_video_detail(item: Dict) -> Dict:
    """
    Return a copy of a video resource with every metadata group present.

    Missing or null groups become empty dicts, so callers can use .get() on
    any group without checking for it first.
    """
    detail = {"id": item.get("id", "")}
    for group in DETAIL_GROUPS:
        detail[group] = item.get(group) or {}
    return detail


def has_captions(detail: Dict) -> bool:
    """True when the video's content details flag captions as available."""
    return (detail.get("contentDetails") or {}).get("caption") == "true"


def format_location(recording_details: Dict) -> str:
    """Format a recording location as "<lat>, <lon>", or "" when there is none."""
    location = recording_details.get("location") or {}
    latitude = location.get("latitude")
    longitude = location.get("longitude")
    if latitude is None or longitude is None:
        return ""
    return f"{latitude}, {longitude}"


def build_output_record(detail: Dict, transcript: Optional[str] = None) -> Dict:
    """
    Flatten one video resource and its transcript into an export row.

    Args:
        detail: Video resource as returned by the videos endpoint
        transcript: Transcript text, or None

    Returns:
        Dictionary keyed by the export column names
    """
    detail = normalize_video_detail(detail)
    snippet = detail["snippet"]
    content_details = detail["contentDetails"]
    statistics = detail["statistics"]
    topic_details = detail["topicDetails"]

    captions_available = has_captions(detail)
    caption_text = transcript if captions_available and transcript else None

    return {
        "videoUrl": build_watch_url(detail["id"]),
        "title": snippet.get("title") or "",
        "description": snippet.get("description") or "",
        "channelTitle": snippet.get("channelTitle") or "",
        "keywordTags": ", ".join(snippet.get("tags") or []),
        "youtubeVideoCategory": snippet.get("categoryId") or "",
        "topicDetails": ", ".join(topic_details.get("topicCategories") or []),
        "videoPublishedAt": snippet.get("publishedAt") or "",
        "videoDuration": content_details.get("duration") or "",
        "viewCount": statistics.get("viewCount") or "0",
        "commentCount": statistics.get("commentCount") or "0",
        "captionsAvailable": captions_available,
        "captionText": caption_text,
        "locationOfRecording": format_location(detail["recordingDetails"]),
    }


def build_output_records(
    details: Iterable[Dict],
    languages: Optional[List[str]] = None,
    transcript_fetcher: TranscriptFetcher = fetch_transcript,
) -> List[Dict]:
    """
    Build export rows for video resources, in the order given.

    Transcripts are requested one video at a time, and only for videos that
    report captions.
    """
    records = []
    for detail in details:
        transcript = None
        if has_captions(detail):
            transcript = transcript_fetcher(detail.get("id", ""), languages=languages)
        records.append(build_output_record(detail, transcript))
    return records


def parse_view_count(value) -> Optional[int]:
    """Parse a view count string; None when missing or not an integer."""
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _view_count_sort_key(record: Dict):
    view_count = parse_view_count(record.get("viewCount"))
    # Unparsable counts rank below every real count, including 0
    return (view_count is not None, view_count or 0)


def sort_records(records: List[Dict]) -> List[Dict]:
    """
    Sort records by view count, highest first.

    The sort is stable: records with equal counts keep their relative order.
    Records whose view count cannot be parsed go last.
    """
    return sorted(records, key=_view_count_sort_key, reverse=True)
