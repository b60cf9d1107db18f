import csv

import pytest

from youtube_search_exporter import api
from youtube_search_exporter.config import ExportSettings
from youtube_search_exporter.errors import RemoteError
from youtube_search_exporter.pipeline import export_search_results
from conftest import make_response, search_page, transcript_snippets, video_resource

VIEW_COUNTS = {"a": "50", "b": "300", "c": "0", "d": "10", "e": "300"}


def _fake_get(search_pages, failing_detail_ids=()):
    pages = iter(search_pages)

    def side_effect(url, params=None):
        if url == api.SEARCH_URL:
            return next(pages)
        ids = params["id"].split(",")
        if any(video_id in failing_detail_ids for video_id in ids):
            return make_response(status_code=500)
        items = [
            video_resource(video_id, VIEW_COUNTS[video_id], caption="true" if video_id == "b" else "false")
            for video_id in ids
        ]
        return make_response({"items": items})

    return side_effect


def _read_rows(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


class TestExportSearchResults:
    def test_end_to_end(self, tmp_path, mock_requests_get, mock_transcript_api):
        mock_requests_get.side_effect = _fake_get(
            [
                make_response(search_page(["a", "b", "c"], "P2")),
                make_response(search_page(["d", "e"])),
            ]
        )
        mock_transcript_api.return_value.fetch.return_value = transcript_snippets("Hello", "world")
        output = tmp_path / "sorted_youtube_data.csv"
        settings = ExportSettings(
            query="games", target_count=500, page_size=3, batch_size=2, output_path=str(output)
        )

        stats = export_search_results("KEY", settings)

        rows = _read_rows(output)
        assert [row["videoUrl"][-1] for row in rows] == ["b", "e", "a", "d", "c"]
        assert rows[0]["captionText"] == "Hello\nworld"
        assert rows[0]["captionsAvailable"] == "True"
        assert rows[1]["captionsAvailable"] == "False"
        mock_transcript_api.return_value.fetch.assert_called_once_with("b")

        assert stats["total_results"] == 5
        assert stats["total_ids"] == 5
        assert stats["details_fetched"] == 5
        assert stats["missing_details"] == 0
        assert stats["captions_available"] == 1
        assert stats["transcripts_fetched"] == 1
        assert stats["output_path"] == str(output)

    def test_failed_detail_batch_is_left_out(self, tmp_path, mock_requests_get, mock_transcript_api):
        mock_requests_get.side_effect = _fake_get(
            [make_response(search_page(["a", "b", "c", "d", "e"]))],
            failing_detail_ids={"c"},
        )
        mock_transcript_api.return_value.fetch.side_effect = RuntimeError("no transcript")
        output = tmp_path / "out.csv"
        settings = ExportSettings(page_size=5, batch_size=2, output_path=str(output))

        stats = export_search_results("KEY", settings)

        rows = _read_rows(output)
        assert [row["videoUrl"][-1] for row in rows] == ["b", "e", "a"]
        assert rows[0]["captionsAvailable"] == "True"
        assert rows[0]["captionText"] == ""
        assert stats["missing_details"] == 2
        assert stats["transcripts_fetched"] == 0

    def test_search_failure_writes_nothing(self, tmp_path, mock_requests_get):
        mock_requests_get.side_effect = _fake_get([make_response(status_code=403)])
        output = tmp_path / "out.csv"

        with pytest.raises(RemoteError):
            export_search_results("KEY", ExportSettings(output_path=str(output)))

        assert not output.exists()

    def test_no_results_writes_header_only(self, tmp_path, mock_requests_get):
        mock_requests_get.side_effect = _fake_get([make_response(search_page([]))])
        output = tmp_path / "out.csv"

        stats = export_search_results("KEY", ExportSettings(output_path=str(output)))

        assert _read_rows(output) == []
        assert output.read_text(encoding="utf-8").startswith("videoUrl,title,")
        assert stats["details_fetched"] == 0
