"""OpenAI images client."""

from ..chatgpt.client import ChatGPTClient


class DALLEClient(ChatGPTClient):
    """Same credentials and scoping headers as ChatGPT, reported as DALLE."""

    ai_name = "DALLE"
