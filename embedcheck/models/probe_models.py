# Models for the setup connectivity probes
from pydantic import BaseModel, Field
from typing import List, Dict, Any
import numpy as np

EMBEDDING_DIMENSION = 384  # all-MiniLM-L6-v2 output size
PROBE_CONTENT = "test"


def _zero_vector() -> List[float]:
    return np.zeros(EMBEDDING_DIMENSION).tolist()


class EmbeddingProbeRecord(BaseModel):
    """Placeholder row written to the probe table"""
    content: str = PROBE_CONTENT
    embedding: List[float] = Field(default_factory=_zero_vector)

    def to_row(self) -> Dict[str, Any]:
        return {"content": self.content, "embedding": self.embedding}


