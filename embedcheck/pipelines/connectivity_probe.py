from typing import Tuple, Optional
import asyncio
import logging

from embedcheck.database.supabase_client import SupabaseClient
from embedcheck.models.probe_models import EmbeddingProbeRecord
from embedcheck.services.huggingface_client import HuggingFaceClient

logger = logging.getLogger(__name__)

PROBE_SOURCE_SENTENCE = "Hello world"
PROBE_SENTENCE = "Hello there"


def probe_backend(supabase_client: SupabaseClient, cleanup: bool = False) -> Tuple[bool, Optional[str]]:
    """
    Insert one placeholder record, then read one row back from the same table

    Args:
        supabase_client: Client bound to the probe table
        cleanup: Delete the placeholder row once the read succeeds

    Returns:
        (success, error message or None); errors are logged, never raised
    """
    try:
        inserted = supabase_client.insert_embeddings([EmbeddingProbeRecord().to_row()])
        supabase_client.fetch_embeddings(limit=1)
        logger.info(f"Supabase connection OK, table '{supabase_client.table_name}' is reachable")

        if cleanup:
            row_id = inserted[0].get("id")
            if row_id is not None:
                supabase_client.delete_embedding(row_id)
            else:
                logger.warning("Inserted probe row has no id, skipping cleanup")

        return True, None

    except Exception as e:
        logger.error(f"Supabase connection test failed: {str(e)}")
        return False, f"Supabase: {str(e)}"


async def probe_backend_async(supabase_client: SupabaseClient, cleanup: bool = False) -> Tuple[bool, Optional[str]]:
    # supabase-py table calls block, keep them off the event loop
    return await asyncio.to_thread(probe_backend, supabase_client, cleanup)


async def probe_embedding_endpoint(hf_client: HuggingFaceClient) -> Tuple[bool, Optional[str]]:
    """
    One minimal similarity request to confirm the API token works
    """
    try:
        scores = await hf_client.get_similarities(PROBE_SOURCE_SENTENCE, [PROBE_SENTENCE])
        logger.info(f"Hugging Face API connection OK (test score {scores[0]:.4f})")
        return True, None

    except Exception as e:
        logger.error(f"Hugging Face API test failed: {str(e)}")
        return False, f"Hugging Face: {str(e)}"
