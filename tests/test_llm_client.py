from unittest.mock import Mock, patch
import pytest

from src.generator import LLMClient, Message


def create_mock_response(content: str = "Test response", model: str = "gpt-4o-mini") -> Mock:
    """Create a mock response shaped like litellm's ModelResponse."""
    return Mock(
        id='chatcmpl-test123',
        model=model,
        object='chat.completion',
        choices=[
            Mock(
                finish_reason='stop',
                index=0,
                message=Mock(content=content, role='assistant')
            )
        ],
        usage=Mock(completion_tokens=10, prompt_tokens=5, total_tokens=15),
    )


class TestLLMClientInitialization:
    """Test cases for LLM client initialization."""

    def test_init_with_model_only(self):
        client = LLMClient(model="gpt-4o-mini")
        assert client.model == "gpt-4o-mini"
        assert client.temperature == 0.7
        assert client.max_tokens is None
        assert client.messages == []

    def test_init_with_additional_params(self):
        """Extra keyword arguments are kept for litellm."""
        client = LLMClient(model="gpt-4o-mini", top_p=0.9, num_retries=3)
        assert client.additional_params == {"top_p": 0.9, "num_retries": 3}

    def test_no_additional_params(self):
        assert LLMClient(model="gpt-4o-mini").additional_params == {}


class TestMessageManagement:
    """Test cases for message list handling."""

    def test_add_message(self):
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("system", "You write riddles.")
        client.add_message("user", "TREE")

        assert client.messages == [
            {"role": "system", "content": "You write riddles."},
            {"role": "user", "content": "TREE"},
        ]

    def test_clear_messages(self):
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("user", "TREE")
        client.clear_messages()
        assert client.messages == []

    def test_get_messages_returns_copy(self):
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("user", "TREE")

        messages = client.get_messages()
        messages.append({"role": "user", "content": "extra"})

        assert len(client.messages) == 1

    def test_invalid_role(self):
        with pytest.raises(ValueError):
            Message(role="narrator", content="Hi")


class TestCompletion:
    """Test cases for completion calls."""

    @patch('litellm.completion')
    def test_completion_basic(self, mock_completion):
        mock_completion.return_value = create_mock_response(content="Hello!")

        client = LLMClient(model="gpt-4o-mini")
        client.add_message("user", "Hi")
        response = client.completion()

        mock_completion.assert_called_once()
        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["model"] == "gpt-4o-mini"
        assert call_kwargs["messages"] == [{"role": "user", "content": "Hi"}]
        assert call_kwargs["temperature"] == 0.7
        assert "max_tokens" not in call_kwargs
        assert response.choices[0].message.content == "Hello!"

    @patch('litellm.completion')
    def test_completion_passes_settings(self, mock_completion):
        mock_completion.return_value = create_mock_response()

        client = LLMClient(model="gpt-4o-mini", max_tokens=200, top_p=0.9)
        client.add_message("user", "Test")
        client.completion(n=1)

        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["max_tokens"] == 200
        assert call_kwargs["top_p"] == 0.9
        assert call_kwargs["n"] == 1


class TestAsk:
    """Test cases for single-exchange requests."""

    @patch('litellm.completion')
    def test_ask_returns_stripped_content(self, mock_completion):
        mock_completion.return_value = create_mock_response(content="  A riddle.  \n")

        client = LLMClient(model="gpt-4o-mini")
        reply = client.ask("system text", "user text")

        assert reply == "A riddle."
        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["messages"] == [
            {"role": "system", "content": "system text"},
            {"role": "user", "content": "user text"},
        ]

    @patch('litellm.completion')
    def test_ask_starts_fresh_each_time(self, mock_completion):
        """Each request sends only its own system and user messages."""
        mock_completion.return_value = create_mock_response(content="reply")

        client = LLMClient(model="gpt-4o-mini")
        client.ask("system", "first")
        client.ask("system", "second")

        call_kwargs = mock_completion.call_args[1]
        assert [m["content"] for m in call_kwargs["messages"]] == ["system", "second"]
        assert client.messages[-1] == {"role": "assistant", "content": "reply"}

    @patch('litellm.completion')
    def test_ask_empty_content(self, mock_completion):
        mock_completion.return_value = create_mock_response(content=None)

        assert LLMClient(model="gpt-4o-mini").ask("s", "u") == ""
