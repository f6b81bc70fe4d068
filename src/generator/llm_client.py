from typing import List, Dict, Any, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field
import litellm


Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class LLMClient(BaseModel):
    """
    Client for riddle-writing requests via LiteLLM.

    Holds the message list for the current request and the model settings.
    Extra keyword arguments are passed through to litellm.completion().
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        return self.__pydantic_extra__ if self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the conversation history.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        """Clear all messages from the conversation history."""
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        return self.messages.copy()

    def completion(self, **kwargs: Any) -> Any:
        """
        Generate a completion from the current messages.

        Args:
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        return litellm.completion(**params)

    def ask(self, system: str, prompt: str, **kwargs: Any) -> str:
        """
        Send a fresh system + user exchange and return the reply text.

        The message list is reset first; each riddle is an independent request.
        """
        self.clear_messages()
        self.add_message("system", system)
        self.add_message("user", prompt)

        response = self.completion(**kwargs)
        content = response.choices[0].message.content or ""
        self.add_message("assistant", content)
        return content.strip()
