from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from app.completion.exceptions import CompletionError, CompletionNetworkError
from app.completion.openai_client_adapter import OpenAIClientAdapter
from app.extraction.models import ImageInput
from app.generation.exceptions import UpstreamError


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "app.completion.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


def _complete(adapter: OpenAIClientAdapter, images: list[ImageInput] | None = None) -> str:
    return adapter.create_completion(
        model="m",
        system_prompt="system",
        user_prompt="user",
        images=images or [],
    )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("script")
        assert _complete(_make_adapter(mock_client)) == "script"

    def test_disables_sdk_retries(self) -> None:
        with patch("app.completion.openai_client_adapter.openai.OpenAI") as mock_cls:
            OpenAIClientAdapter(api_key="k", timeout_seconds=30)
        assert mock_cls.call_args.kwargs["max_retries"] == 0

    def test_sends_system_and_text_user_message(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        _complete(_make_adapter(mock_client))
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    def test_sends_images_after_prompt_text(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        image = ImageInput(mime_type="image/png", base64_payload="AAAA")
        _complete(_make_adapter(mock_client), images=[image])
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[1]["content"] == [
            {"type": "text", "text": "user"},
            {"type": "image_url", "image_url": {"url": "data:image/png;base64,AAAA"}},
        ]

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(CompletionError, match="empty response"):
            _complete(_make_adapter(mock_client))

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = MagicMock(choices=[])
        with pytest.raises(CompletionError, match="no choices"):
            _complete(_make_adapter(mock_client))

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(CompletionNetworkError, match="network error"):
            _complete(_make_adapter(mock_client))

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(CompletionNetworkError, match="network error"):
            _complete(_make_adapter(mock_client))

    def test_api_error_is_an_upstream_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(UpstreamError, match="API error"):
            _complete(_make_adapter(mock_client))
