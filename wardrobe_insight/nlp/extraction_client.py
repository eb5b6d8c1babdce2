"""Client that asks a vision-capable LLM for a garment's structured attributes."""

from __future__ import annotations

import logging

from openai import AsyncOpenAI

from wardrobe_insight.catalog.attribute_extractor import AttributeExtractor, ExtractedAttributes
from wardrobe_insight.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a precise fashion attribute extractor. "
    "Extract ONLY the requested attributes using the exact options provided."
)


class AttributeExtractionClient:
    """Thin client around an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        settings: Settings | None = None,
        extractor: AttributeExtractor | None = None,
    ) -> None:
        settings = settings or get_settings()
        if not settings.llm_api_key:
            raise RuntimeError("LLM API key is not configured.")

        self._settings = settings
        self._extractor = extractor or AttributeExtractor()
        self._client = AsyncOpenAI(
            api_key=settings.llm_api_key,
            base_url=settings.llm_base_url.rstrip("/"),
        )

    async def extract(
        self,
        image_base64: str,
        category: str,
        subcategory: str | None = None,
    ) -> ExtractedAttributes | None:
        """Send the image with the extraction prompt and validate the answer."""

        prompt = self._extractor.generate_prompt(category, subcategory)
        response = await self._client.chat.completions.create(
            model=self._settings.extraction_model,
            max_tokens=self._settings.extraction_max_tokens,
            temperature=self._settings.extraction_temperature,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:image/jpeg;base64,{image_base64}"},
                        },
                        {"type": "text", "text": prompt},
                    ],
                },
            ],
        )
        content = response.choices[0].message.content or ""
        logger.debug("Extraction response for %s: %s", category, content)
        return self._extractor.parse_response(content, category)

    async def ping(self) -> bool:
        """Return ``True`` if the upstream service responds to a model listing call."""

        models = await self._client.models.list()
        return bool(models.data)

    async def close(self) -> None:
        """Release HTTP resources."""

        await self._client.close()
