# Pydantic models for the similarity endpoint
from pydantic import BaseModel
from typing import List, Dict, Any


class SimilarityRequest(BaseModel):
    source_sentence: str
    sentences: List[str] = []

    @classmethod
    def from_texts(cls, texts: List[str]) -> "SimilarityRequest":
        """First text is the reference, the rest are compared against it"""
        return cls(source_sentence=texts[0], sentences=list(texts[1:]))

    def to_payload(self) -> Dict[str, Any]:
        return {
            "inputs": {
                "source_sentence": self.source_sentence,
                "sentences": self.sentences
            }
        }


class SimilarityResult(BaseModel):
    """Scores in the same order as SimilarityRequest.sentences"""
    scores: List[float]
