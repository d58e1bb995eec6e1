"""
AI Client - skill analysis text from an OpenAI-compatible endpoint.

The default endpoint is Gemini's OpenAI-compatible API, so we use the
openai library with a custom base_url.

IMPORTANT:
- AI is used ONLY to describe a student's skills back to them
- Its output is display text; search ranking never reads it
"""
import logging

from openai import OpenAI
from haca.core.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

FALLBACK_ANALYSIS = "Unable to analyze skills. Please try again later."


class AIClient:
    """
    Wrapper for the chat-completions endpoint.
    """

    def __init__(self):
        self.client = None
        if settings.ai_api_key:
            self.client = OpenAI(
                api_key=settings.ai_api_key,
                base_url=settings.ai_base_url
            )
        self.model = settings.ai_model

    def _call_api(self, prompt: str, max_tokens: int = 1024, temperature: float = 0.2) -> str:
        """
        Internal method to call the API.
        Returns raw text response (may be empty).
        """
        if self.client is None:
            raise RuntimeError("Missing AI API key")

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
            temperature=temperature,
            top_p=0.95
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    def analyze_skills(self, skills_text: str) -> str:
        """
        Describe job market demand and compatibility of the given skills.
        """
        prompt = (
            "Analyze the following skills and provide insights about their "
            f"job market demand and compatibility: {skills_text}"
        )
        analysis = self._call_api(prompt)
        return analysis.strip() or FALLBACK_ANALYSIS

    def test_connection(self) -> bool:
        """Test if the AI API is reachable"""
        try:
            response = self._call_api("Reply with exactly: OK", max_tokens=10)
            return "OK" in response.upper()
        except Exception as e:
            logger.error("AI connection failed: %s", e)
            return False


# Singleton instance
_ai_client: AIClient = None


def get_ai_client() -> AIClient:
    """Get or create AI client (singleton pattern)"""
    global _ai_client
    if _ai_client is None:
        _ai_client = AIClient()
    return _ai_client
