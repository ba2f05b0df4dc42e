"""
Generation Request Adapter.

Formats a GenerationRequest into a system instruction plus a user prompt
and performs a single chat completion. No retry, no streaming, no
timeout override: one round trip per call.

The OpenAI client is created on first use, after the credential check,
so a missing key fails before any network interaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from openai import AsyncOpenAI, OpenAIError

from app.ai.prompts import SOP_SYSTEM_INSTRUCTION, build_prompt
from app.config import Settings, settings as default_settings
from app.exceptions import ConfigurationError, UpstreamError
from app.models.sop import GenerationRequest

logger = logging.getLogger(__name__)

GENERATION_FALLBACK_MESSAGE = "Errore nella generazione del contenuto. Riprova."


@dataclass(frozen=True)
class GenerationResult:

    text: str
    model: str
    fallback: bool = False


class SopGenerator:

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o",
        temperature: float = 0.4,
        openai_client: AsyncOpenAI | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._openai = openai_client

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> SopGenerator:
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            temperature=settings.generation_temperature,
        )

    @property
    def openai(self) -> AsyncOpenAI:
        if self._openai is None:
            self._openai = AsyncOpenAI(api_key=self.api_key)
        return self._openai

    async def generate(
        self,
        request: GenerationRequest,
        allow_fallback: bool = False,
    ) -> GenerationResult:
        """
        Generate a procedure for request.

        Args:
            request: Description, asset data, specs and document type
            allow_fallback: Return GENERATION_FALLBACK_MESSAGE instead of
                raising when the service answers with no text

        Raises:
            ConfigurationError: no API key configured
            UpstreamError: the call failed, or returned no text and
                allow_fallback is False
        """
        if not self.api_key:
            raise ConfigurationError(
                "OpenAI API key not configured. Set OPENAI_API_KEY."
            )

        prompt = build_prompt(request)
        logger.info(
            f"Requesting {request.doc_type.value} document from {self.model}"
        )
        logger.debug(f"Prompt: {prompt}")

        try:
            response = await self.openai.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SOP_SYSTEM_INSTRUCTION},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except OpenAIError as e:
            logger.error(f"Generation request failed: {e}", exc_info=True)
            raise UpstreamError(str(e)) from e

        text = response.choices[0].message.content if response.choices else None
        if not text or not text.strip():
            if allow_fallback:
                logger.warning("Empty generation result, using fallback message")
                return GenerationResult(
                    text=GENERATION_FALLBACK_MESSAGE,
                    model=self.model,
                    fallback=True,
                )
            raise UpstreamError("The generation service returned no content")

        return GenerationResult(text=text, model=self.model)
