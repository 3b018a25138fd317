"""
Tests for the command-line front end
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import sys
sys.path.insert(0, '.')

import submit_report
from src.backend.models import Citizen
from src.core.exceptions import ReportRejectedError


def make_backend():
    backend = MagicMock()
    backend.find_citizen = AsyncMock(return_value=Citizen.model_validate(
        {"_id": "42", "username": "jdoe", "firstName": "Jane", "lastName": "Doe"}
    ))
    backend.submit_report = AsyncMock()
    return backend


class TestSubmitReportCLI:
    """Test suite for submit_report.py."""

    def test_parse_args(self):
        """Test repeated images and defaults."""
        args = submit_report.parse_args([
            "--category", "Flood",
            "--image", "a.jpg",
            "--image", "b.jpg",
        ])

        assert args.category == "Flood"
        assert args.image == ["a.jpg", "b.jpg"]
        assert args.description == ""
        assert args.location == ""

    @patch("submit_report.BackendClient")
    def test_run_submits_report(self, mock_client, store_url, image_files):
        """Test a full run stores the user and uploads the images."""
        backend = make_backend()
        mock_client.return_value.__aenter__.return_value = backend

        args = submit_report.parse_args([
            "--store", store_url,
            "--username", "jdoe",
            "--location", "Tacloban City",
            "--category", "Typhoon",
            "--image", str(image_files[0]),
            "--image", str(image_files[1]),
        ])

        ok = asyncio.run(submit_report.run(args))

        assert ok == True
        backend.find_citizen.assert_awaited_once_with("jdoe")
        fields, files = backend.submit_report.await_args.args
        assert fields["location"] == "Tacloban City"
        assert fields["disasterCategory"] == "Typhoon"
        assert len(files) == 2

    @patch("submit_report.BackendClient")
    def test_run_reports_failure(self, mock_client, store_url):
        """Test a rejected upload makes the run fail."""
        backend = make_backend()
        backend.submit_report = AsyncMock(side_effect=ReportRejectedError(500))
        mock_client.return_value.__aenter__.return_value = backend

        args = submit_report.parse_args(["--store", store_url, "--username", "jdoe"])

        assert asyncio.run(submit_report.run(args)) == False
