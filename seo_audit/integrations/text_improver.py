"""Advisory rewrite suggestions for titles, sentences and paragraphs."""

import logging
from typing import Optional

from seo_audit.integrations.llm_client import LLMClient

logger = logging.getLogger(__name__)

_INSTRUCTIONS = {
    "title": "Make it more SEO-friendly and engaging while keeping it concise (50-60 characters).",
    "sentence": "Make it clearer and easier to read while maintaining the same meaning.",
    "paragraph": "Make it more readable and engaging while maintaining the same key points.",
}


def build_prompt(
    text: str,
    kind: str,
    max_length: Optional[int] = None,
    target_reading_level: Optional[str] = None,
) -> str:
    if kind not in _INSTRUCTIONS:
        raise ValueError(f"Unknown text kind: {kind!r}")
    prompt = f"Improve this {kind}: \"{text}\"\n\n{_INSTRUCTIONS[kind]}"
    if max_length:
        prompt += f"\nKeep it under {max_length} characters."
    if target_reading_level:
        prompt += f"\nTarget a {target_reading_level} reading level."
    return prompt


class TextImprover:
    """Asks the LLM for a rewrite; callers treat every failure as advisory.

    Usage::

        improver = TextImprover(LLMClient())
        better = await improver.improve(sentence, "sentence", max_length=150)
    """

    def __init__(self, llm_client: Optional[LLMClient] = None) -> None:
        self._llm = llm_client or LLMClient()

    @property
    def available(self) -> bool:
        return self._llm.is_configured

    async def improve(
        self,
        text: str,
        kind: str,
        max_length: Optional[int] = None,
        target_reading_level: Optional[str] = None,
    ) -> Optional[str]:
        """Return the rewritten text, or ``None`` if the model returned nothing."""
        prompt = build_prompt(text, kind, max_length, target_reading_level)
        result = await self._llm.generate_text(prompt)
        result = (result or "").strip().strip('"').strip()
        if not result:
            logger.debug("Empty rewrite for %s (len=%d)", kind, len(text))
            return None
        return result
