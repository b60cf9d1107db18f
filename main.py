"""Main entry point for the YouTube search exporter."""
import sys

from youtube_search_exporter import (
    RemoteError,
    export_search_results,
    load_config_from_env,
    load_settings_from_env,
)


def main():
    """
    Search YouTube and export the results, sorted by view count, to CSV.

    Set the following environment variables in .env file:
    - YOUTUBE_API_KEY: Your YouTube Data API v3 key
    - YOUTUBE_SEARCH_QUERY: Search query (optional, default "games")
    - YOUTUBE_TARGET_COUNT: Number of results to collect (optional, default 500)
    - YOUTUBE_OUTPUT_PATH: CSV file to write (optional, default sorted_youtube_data.csv)
    """
    try:
        api_key = load_config_from_env()
        settings = load_settings_from_env()
    except ValueError as e:
        print(f"Error: {e}")
        print("\nMake sure your .env file contains:")
        print("YOUTUBE_API_KEY=your_api_key_here")
        return 1

    print(f"Starting export for query: {settings.query}")
    print("-" * 60)

    try:
        stats = export_search_results(api_key, settings)
    except RemoteError as e:
        print(f"Error: {e}")
        return 1

    print("-" * 60)
    print(f"Saved {stats['details_fetched']} videos to {stats['output_path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
