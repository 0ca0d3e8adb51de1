"""
LLM SERVICE - OpenAI integration for scenario analysis

This service handles the single call to the chat-completion API:
1. Sends the system directive and the built prompt (one call, no retries)
2. Extracts the first choice's message content
3. Parses that content into an AnalysisResponse

Key features:
- Credentials and sampling settings injected at construction
- Explicit request timeout
- Every failure degrades into a well-formed error response
"""

import json
from functools import lru_cache
from typing import Any, Optional, Tuple

from pydantic import ValidationError

from analyzer import config
from analyzer.schemas import AnalysisRequest, AnalysisResponse
from analyzer.services.prompts import SYSTEM_PROMPT, build_prompt
from analyzer.utils import Constants, format_error_message, get_logger

logger = get_logger(__name__)


class MalformedCompletionError(ValueError):
    """The completion payload has no usable first-choice message content."""


def error_response(message: str) -> AnalysisResponse:
    """Fixed-shape substitute returned whenever the analysis fails."""
    return AnalysisResponse(
        scenarioSummary=Constants.ERROR_PREFIX + message,
        potentialPitfalls=[Constants.ERROR_PITFALL],
        proposedStrategies=[Constants.ERROR_STRATEGY],
        recommendedResources=[Constants.ERROR_RESOURCE],
        disclaimer=Constants.ERROR_DISCLAIMER,
    )


def extract_content(completion: Any) -> str:
    """Return the first choice's message content or raise MalformedCompletionError."""
    choices = getattr(completion, "choices", None)
    if not choices:
        raise MalformedCompletionError("completion has no choices")
    message = getattr(choices[0], "message", None)
    if message is None:
        raise MalformedCompletionError("first choice has no message")
    content = getattr(message, "content", None)
    if content is None:
        raise MalformedCompletionError("message has no content")
    return content


def parse_analysis(content: str) -> Tuple[Optional[AnalysisResponse], Optional[str]]:
    """
    Parse model output into an AnalysisResponse.

    Returns (response, None) on success and (None, reason) when the content
    is not JSON or does not match the five-field schema.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        return None, f"invalid JSON ({e.msg} at position {e.pos})"

    if not isinstance(data, dict):
        return None, f"expected a JSON object, got {type(data).__name__}"

    try:
        return AnalysisResponse.model_validate(data), None
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors())
        return None, f"schema mismatch on {fields}"


class ScenarioAnalyzer:
    """Completion client and response normalizer for one configured model."""

    def __init__(
        self,
        api_key: str,
        model: str = Constants.DEFAULT_MODEL,
        client: Any = None,
        base_url: Optional[str] = None,
        timeout: float = Constants.DEFAULT_TIMEOUT,
        temperature: float = Constants.DEFAULT_TEMPERATURE,
        top_p: float = Constants.DEFAULT_TOP_P,
        max_tokens: int = Constants.DEFAULT_MAX_TOKENS,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.temperature = temperature
        self.top_p = top_p
        self.max_tokens = max_tokens
        self._client = client

    def _get_client(self):
        """
        Get the OpenAI client, creating it on first use.

        Returns None when no API key is configured so the app can still start.
        """
        if self._client is not None:
            return self._client
        if not self.api_key:
            return None
        from openai import OpenAI  # import inside so missing pkg won't break startup
        # max_retries=0: exactly one outbound call per analysis
        self._client = OpenAI(
            api_key=self.api_key,
            base_url=self.base_url,
            timeout=self.timeout,
            max_retries=0,
        )
        return self._client

    def _fallback(self, reason: str) -> AnalysisResponse:
        logger.warning(f"[analyze] Falling back to error response: {reason}")
        return error_response(reason)

    def build_messages(self, request: AnalysisRequest) -> list:
        """
        Build the chat messages for one request.

        Input: AnalysisRequest (scenario + constraints)
        Output: [system directive, user prompt] as role/content dicts
        """
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(request.scenario, request.constraints)},
        ]

    def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        """
        Run one scenario analysis against the completion API.

        Input: AnalysisRequest (scenario + constraints)
        Output: parsed AnalysisResponse, or the fixed error response

        Never raises exceptions - always returns a well-formed response.
        """
        try:
            client = self._get_client()
        except Exception as e:
            # Bad base URL or client settings
            return self._fallback(f"Error generating analysis: {format_error_message(e)}")
        if client is None:
            return self._fallback("Error generating analysis: OpenAI API key is not configured")

        # STEP 1: Single call, no retries
        try:
            out = client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(request),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                top_p=self.top_p,
                timeout=self.timeout,
            )
            content = extract_content(out)
        except Exception as e:
            # Network, auth, status, quota or payload errors land here
            return self._fallback(f"Error generating analysis: {format_error_message(e)}")

        # STEP 2: Parse the model's JSON reply
        result, error = parse_analysis(content)
        if error is not None:
            return self._fallback(f"Failed to parse API response: {error}")

        logger.info(
            f"[analyze] model={self.model} pitfalls={len(result.potentialPitfalls)} "
            f"strategies={len(result.proposedStrategies)} resources={len(result.recommendedResources)}"
        )
        return result


@lru_cache(maxsize=1)
def get_analyzer() -> ScenarioAnalyzer:
    """
    FastAPI dependency providing the configured analyzer.

    Usage in routes:
    def my_route(analyzer: ScenarioAnalyzer = Depends(get_analyzer)):
        ...
    """
    return ScenarioAnalyzer(
        api_key=config.OPENAI_API_KEY,
        model=config.OPENAI_MODEL,
        base_url=config.OPENAI_BASE_URL,
        timeout=config.LLM_TIMEOUT,
        temperature=config.LLM_TEMPERATURE,
        top_p=config.LLM_TOP_P,
        max_tokens=config.LLM_MAX_TOKENS,
    )
