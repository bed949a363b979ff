"""
Ranker - asks a completions model to pick the day's top articles.

The model sees an editor instruction followed by one block per article and is
expected to answer with a comma-separated list of article IDs. The answer is
passed through as-is; IDs are not checked against the article list.
"""

import logging

from .models import Article
from .providers import LLMProvider

logger = logging.getLogger(__name__)


class Ranker:
    """Builds the ranking prompt and runs one completion."""

    MAX_TOKENS = 100
    TEMPERATURE = 0.7

    # Article blocks are fenced with this marker on both sides
    BLOCK_MARKER = "***"

    INSTRUCTION_PROMPT = (
        "You act as an editor of the newsfeed and your job is to pick {context}. "
        "You will be given article previews. When responding, list top 3 article IDs "
        "(as a comma-separated list - no text is necessary) you feel are the most "
        "prominent. \n\n"
    )

    def __init__(self, provider: LLMProvider, model: str | None = None):
        self.provider = provider
        self.model = model

    def build_prompt(self, articles: list[Article], context: str) -> str:
        """Instruction line with the caller's guidance, then the article blocks."""
        blocks = "\n".join(
            f"{self.BLOCK_MARKER}ID {article.id}: \n{article.content}\n{self.BLOCK_MARKER}"
            for article in articles
        )
        return self.INSTRUCTION_PROMPT.format(context=context) + blocks

    async def rank(self, articles: list[Article], context: str) -> str:
        """Return the model's ranked IDs, trimmed."""
        prompt = self.build_prompt(articles, context)
        response = await self.provider.complete_async(
            prompt=prompt,
            model=self.model,
            max_tokens=self.MAX_TOKENS,
            temperature=self.TEMPERATURE,
            stop=None,
        )
        logger.debug(
            f"Ranking used {response.input_tokens} prompt and {response.output_tokens} "
            f"completion tokens on {response.model} "
            f"(finish_reason={response.metadata.get('finish_reason')})"
        )
        top_articles = response.text.strip()
        logger.info(f"Top articles: {top_articles}")
        return top_articles
