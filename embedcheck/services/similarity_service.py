"""
Similarity query service: sends one reference plus candidates and prints the scores
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
import logging

from langsmith import traceable

from embedcheck.services.huggingface_client import HuggingFaceClient

logger = logging.getLogger(__name__)


def to_fixed(value: float, digits: int = 2) -> str:
    """
    Fixed-point text for a float, rounding exact ties away from zero.
    Decimal(float) keeps the exact binary value, so 0.125 rounds to 0.13
    while 1.005 (stored as 1.00499...) rounds to 1.00.
    """
    # -0.0 prints as 0.00
    exact = Decimal(value + 0.0)
    return str(exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def format_similarity_report(query: str, compare_texts: List[str], similarities: List[float]) -> str:
    """
    Render one "Compared to / Similarity" pair per compared text, in input order.

    Scores are indexed positionally: a missing score raises IndexError and
    extra scores are ignored.
    """
    lines = ["", "=== Similarity Results ===", f'Query: "{query}"', ""]

    for index, text in enumerate(compare_texts):
        percentage = to_fixed(similarities[index] * 100)
        lines.append(f'Compared to: "{text}"')
        lines.append(f"Similarity: {percentage}%")
        lines.append("")

    return "\n".join(lines)


@traceable(name="similarity_query")
async def query_similarity(client: HuggingFaceClient, query: str, compare_texts: List[str]) -> Optional[List[float]]:
    """
    Score compare_texts against query and print the report

    Returns:
        The scores, or None if the request failed (the failure is logged, not raised)
    """
    try:
        all_texts = [query, *compare_texts]
        similarities = await client.get_similarities_for_texts(all_texts)

        print(format_similarity_report(query, compare_texts, similarities))
        return similarities

    except Exception as e:
        logger.error(f"Failed to get similarity scores: {str(e)}")
        return None
