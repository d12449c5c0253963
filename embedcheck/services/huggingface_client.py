import logging
from typing import List, Optional, Any

import httpx

from embedcheck.config import Settings
from embedcheck.exceptions import SimilarityRequestError, SimilarityResponseError
from embedcheck.models.similarity_models import SimilarityRequest, SimilarityResult

logger = logging.getLogger(__name__)


class HuggingFaceClient:
    """
    Client for the Hugging Face Inference API sentence-similarity task.
    One POST per call; no retry and no timeout beyond httpx defaults.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = settings.model_url
        self.api_key = settings.huggingface_api_key
        self.transport = transport

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def get_similarities(self, source_sentence: str, sentences: List[str]) -> List[float]:
        """
        Score each sentence against the source sentence

        Args:
            source_sentence: Reference text
            sentences: Texts to compare, scores come back in this order

        Returns:
            Similarity scores exactly as returned by the service

        Raises:
            SimilarityRequestError: transport failure or non-2xx status
            SimilarityResponseError: body is not one score per sentence
        """
        request = SimilarityRequest(source_sentence=source_sentence, sentences=sentences)

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(self.url, json=request.to_payload(), headers=self._headers())
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            payload = _error_payload(e.response)
            logger.error(f"Error getting embeddings from Hugging Face: {payload if payload is not None else str(e)}")
            raise SimilarityRequestError(str(e), payload=payload, status_code=e.response.status_code) from e

        except httpx.HTTPError as e:
            logger.error(f"Error getting embeddings from Hugging Face: {str(e)}")
            raise SimilarityRequestError(str(e)) from e

        return self._parse_scores(response, len(request.sentences)).scores

    async def get_similarities_for_texts(self, texts: List[str]) -> List[float]:
        """texts[0] is the reference; scores cover texts[1:]"""
        request = SimilarityRequest.from_texts(texts)
        return await self.get_similarities(request.source_sentence, request.sentences)

    def _parse_scores(self, response: httpx.Response, expected: int) -> SimilarityResult:
        try:
            body = response.json()
        except ValueError as e:
            raise SimilarityResponseError(f"Response is not JSON: {str(e)}", expected=expected) from e

        if not isinstance(body, list) or not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in body):
            raise SimilarityResponseError(f"Expected a list of scores, got: {type(body).__name__}", expected=expected)

        if len(body) != expected:
            raise SimilarityResponseError(
                f"Expected {expected} scores, received {len(body)}",
                expected=expected,
                received=len(body)
            )

        return SimilarityResult(scores=[float(x) for x in body])


def _error_payload(response: httpx.Response) -> Any:
    """Remote error body as JSON when possible, else text, else None"""
    try:
        return response.json()
    except ValueError:
        return response.text or None
