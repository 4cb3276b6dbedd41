"""LLM service for OpenAI integration."""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Optional

import openai

from ..core.errors import ExternalServiceFailure

logger = logging.getLogger(__name__)


class OpenAIService:
    """OpenAI chat completions bounded by a hard timeout."""
    
    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        timeout: float = 15.0,
        client: Optional[object] = None,
    ):
        # One attempt per call; the caller falls back instead of retrying
        self.client = client or openai.OpenAI(api_key=api_key, max_retries=0)
        self.model = model
        self.timeout = timeout
        logger.info(f"OpenAI service initialized (model={model}, timeout={timeout}s)")
    
    def _create(self, system: str, user: str, temperature: float, max_tokens: int) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user}
            ],
            max_tokens=max_tokens,
            temperature=temperature,
            timeout=self.timeout,
        )
        return response.choices[0].message.content or ""
    
    def chat(self, system: str, user: str, temperature: float = 0.4, max_tokens: int = 300) -> str:
        """Run one completion, racing it against the timeout.
        
        On timeout the request is abandoned: its future is cancelled and
        whatever it returns later is never read.
        """
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="openai-chat")
        future = executor.submit(self._create, system, user, temperature, max_tokens)
        try:
            return future.result(timeout=self.timeout)
        except FuturesTimeoutError:
            future.cancel()
            logger.warning(f"OpenAI request timed out after {self.timeout}s")
            raise ExternalServiceFailure(
                f"OpenAI request timed out after {self.timeout}s", reason="timeout"
            )
        except openai.AuthenticationError as e:
            logger.error("Invalid API key - please check your OPENAI_API_KEY")
            raise ExternalServiceFailure(str(e), reason="invalid_key") from e
        except openai.RateLimitError as e:
            logger.error("Rate limit exceeded - please wait and try again")
            raise ExternalServiceFailure(str(e), reason="rate_limited") from e
        except openai.APITimeoutError as e:
            raise ExternalServiceFailure(str(e), reason="timeout") from e
        except openai.APIConnectionError as e:
            raise ExternalServiceFailure(str(e), reason="network") from e
        except openai.APIError as e:
            raise ExternalServiceFailure(str(e), reason="api_error") from e
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
