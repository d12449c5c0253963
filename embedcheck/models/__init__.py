# Similarity models
from .similarity_models import SimilarityRequest, SimilarityResult

# Probe models
from .probe_models import EmbeddingProbeRecord, EMBEDDING_DIMENSION

# Pipeline models
from .pipeline_models import SetupState

__all__ = [
    "SimilarityRequest",
    "SimilarityResult",
    "EmbeddingProbeRecord",
    "EMBEDDING_DIMENSION",
    "SetupState"
]
