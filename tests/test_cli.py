"""Tests for the command-line interface."""

import json
from unittest.mock import patch

from typer.testing import CliRunner

from kv_browse import __version__
from kv_browse.cli import app

runner = CliRunner()


class TestListCommand:
    """Test the list command against mocked S3."""

    def test_list_prints_json(self, s3_client):
        s3_client.put_object(Bucket="test-bucket", Key="a/b.txt", Body=b"x" * 10)
        s3_client.put_object(Bucket="test-bucket", Key="a/c/d.txt", Body=b"x" * 20)

        result = runner.invoke(app, ["list", "s3://test-bucket/a", "--no-meta"])

        assert result.exit_code == 0
        listing = json.loads(result.stdout)
        assert listing == {
            "path": "/a",
            "files": {"b.txt": {}},
            "dirs": {
                "c": {"descendants": 1, "size": 20, "smallest": 20, "largest": 20}
            },
        }

    def test_invalid_url(self):
        result = runner.invoke(app, ["list", "/not/s3"])

        assert result.exit_code == 1
        assert "S3 URL must start with 's3://'" in result.output

    @patch("kv_browse.cli.InflightTracker")
    def test_track_inflight_installs_handler(self, mock_tracker_cls, s3_client):
        result = runner.invoke(
            app, ["list", "s3://test-bucket", "--track-inflight"]
        )

        assert result.exit_code == 0
        mock_tracker_cls.return_value.install_signal_handler.assert_called_once()

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_trailing_slash_is_stripped(self, s3_client):
        s3_client.put_object(Bucket="test-bucket", Key="a/b.txt", Body=b"x" * 10)

        result = runner.invoke(app, ["list", "s3://test-bucket/a/", "--no-meta"])

        assert result.exit_code == 0
        listing = json.loads(result.stdout)
        assert listing["path"] == "/a"
        assert listing["files"] == {"b.txt": {}}

    def test_bucket_root(self, s3_client):
        s3_client.put_object(Bucket="test-bucket", Key="a/b.txt", Body=b"x" * 10)

        result = runner.invoke(app, ["list", "s3://test-bucket", "--depth", "1"])

        assert result.exit_code == 0
        listing = json.loads(result.stdout)
        assert listing["path"] == "/"
        assert listing["dirs"]["a"]["descendants"] == 1

    def test_missing_bucket_in_url(self):
        result = runner.invoke(app, ["list", "s3:///a"])

        assert result.exit_code == 1
        assert "missing bucket" in result.output
