"""
Unit tests for the Gemini HTTP transport.
"""

from unittest.mock import patch

import pytest
import requests

from gemini_relay.llm.client import VendorResponse, send_generate_content
from gemini_relay.llm.provider_config import MODEL_NAME, build_generate_url
from tests.conftest import make_vendor_response


class TestSendGenerateContent:

    def test_posts_once_with_key_as_query_parameter(self, mock_post) -> None:
        mock_post.return_value = make_vendor_response(200, {"candidates": []})

        result = send_generate_content({"contents": []}, "k-1")

        mock_post.assert_called_once_with(
            build_generate_url(MODEL_NAME),
            params={"key": "k-1"},
            headers={"Content-Type": "application/json"},
            json={"contents": []},
        )
        assert result == VendorResponse(status_code=200, ok=True, data={"candidates": []})

    def test_error_status_is_returned_not_raised(self, mock_post) -> None:
        mock_post.return_value = make_vendor_response(503, {"error": {"message": "overloaded"}})

        result = send_generate_content({}, "k-1")

        assert result.status_code == 503
        assert result.ok is False
        assert result.data == {"error": {"message": "overloaded"}}

    def test_connection_errors_propagate(self, mock_post) -> None:
        mock_post.side_effect = requests.exceptions.ConnectionError("down")

        with pytest.raises(requests.exceptions.ConnectionError):
            send_generate_content({}, "k-1")

    def test_model_override(self, mock_post) -> None:
        mock_post.return_value = make_vendor_response(200, {})

        send_generate_content({}, "k-1", model="gemini-test")

        assert mock_post.call_args.args[0].endswith("/models/gemini-test:generateContent")


def test_url_does_not_embed_key() -> None:
    with patch("gemini_relay.llm.provider_config.GEMINI_API_KEY", "k-secret"):
        assert "k-secret" not in build_generate_url()
