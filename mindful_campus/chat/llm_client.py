"""Chat-completion API client"""
import requests

SYSTEM_PROMPT = (
    "You are a compassionate mental wellness support assistant for students. "
    "Be warm, non-judgmental, concise, and safety-oriented. "
    "Encourage immediate helpline contact if user mentions self-harm intent."
)
TEMPERATURE = 0.6
MAX_TOKENS = 220


class EmptyReplyError(ValueError):
    """Raised when the API answers without usable content"""


class ChatCompletionClient:
    """Sends a single user message to an OpenAI-compatible chat-completions endpoint"""
    
    def __init__(self, api_key: str, model: str, api_url: str, timeout: float):
        self.api_key = api_key
        self.model = model
        self.api_url = api_url
        self.timeout = timeout
    
    def complete(self, message: str) -> str:
        """
        Request one reply for the message.
        
        Raises:
            requests.RequestException: Network error, timeout or non-2xx status
            ValueError: Body is not JSON or carries no reply text
        """
        response = requests.post(
            self.api_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            json={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": message},
                ],
                "temperature": TEMPERATURE,
                "max_tokens": MAX_TOKENS,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        data = response.json()
        
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise EmptyReplyError(f"Unexpected response shape: {e}") from e
        
        if not isinstance(content, str) or not content.strip():
            raise EmptyReplyError("Empty reply")
        return content.strip()
