"""Functions for downloading YouTube transcripts."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from youtube_transcript_api import YouTubeTranscriptApi

from .errors import TRANSCRIPT_FAILURE_POLICY, TransientAbsence, apply_failure_policy

console = Console()


def download_transcript(
    video_id: str, languages: Optional[List[str]] = None
) -> str:
    """
    Download transcript for a given video ID.

    Args:
        video_id: The YouTube video ID
        languages: Optional list of language codes to try (e.g., ['en', 'es']).
                   If None, tries to fetch any available transcript.

    Returns:
        Transcript fragments joined by newlines, in provider order

    Raises:
        TransientAbsence: If the provider returned no text
        Exception: Whatever the transcript provider raises
    """
    ytt_api = YouTubeTranscriptApi()

    if languages:
        transcript = ytt_api.fetch(video_id, languages=languages)
    else:
        transcript = ytt_api.fetch(video_id)

    # FetchedTranscriptSnippet objects have .text attribute, not dictionary access
    transcript_text = "\n".join([entry.text for entry in transcript])
    if not transcript_text:
        raise TransientAbsence(f"Empty transcript for video {video_id}")
    return transcript_text


def fetch_transcript(
    video_id: str, languages: Optional[List[str]] = None
) -> Optional[str]:
    """
    Fetch a transcript, treating every failure as "no transcript".

    Returns:
        Transcript text, or None if no transcript is available
    """
    try:
        return download_transcript(video_id, languages=languages)
    except Exception as e:
        console.print(f"[yellow]No transcript available for video: {video_id} ({escape(str(e))})[/yellow]")
        return apply_failure_policy(TRANSCRIPT_FAILURE_POLICY, e)
