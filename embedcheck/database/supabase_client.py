from supabase import create_client, Client
from typing import List, Dict, Any, Optional
import logging

from embedcheck.config import Settings
from embedcheck.exceptions import BackendProbeError

logger = logging.getLogger(__name__)

class SupabaseClient:
    """
    Thin wrapper over the Supabase table API for the probe table.
    Raises BackendProbeError instead of returning empty results, so callers
    decide how a failed step is reported.
    """

    def __init__(self, settings: Settings, client: Optional[Client] = None):
        self.url = settings.supabase_url
        self.key = settings.supabase_anon_key
        self.table_name = settings.probe_table

        # Credentials are passed through unchecked; create_client rejects bad ones
        self.client: Client = client if client is not None else create_client(self.url, self.key)

    def insert_embeddings(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert rows into the probe table
        Returns the inserted rows as echoed back by Supabase
        """
        response = self.client.table(self.table_name).insert(rows).execute()
        self._check_response(response, "insert")

        logger.info(f"Inserted {len(response.data)} rows into {self.table_name}")
        return response.data

    def fetch_embeddings(self, limit: int = 1) -> List[Dict[str, Any]]:
        """
        Read up to `limit` rows from the probe table
        An empty result is a successful read (row-level security can hide rows)
        """
        response = self.client.table(self.table_name).select("*").limit(limit).execute()
        self._check_response(response, "select", require_rows=False)

        rows = response.data or []
        logger.info(f"Read {len(rows)} rows from {self.table_name}")
        return rows

    def delete_embedding(self, row_id: Any) -> bool:
        """
        Delete one probe row by id
        """
        try:
            response = self.client.table(self.table_name).delete().eq("id", row_id).execute()
            deleted = bool(response.data)
            if not deleted:
                logger.warning(f"No row with id {row_id} deleted from {self.table_name}")
            return deleted

        except Exception as e:
            logger.error(f"Error deleting row {row_id} from {self.table_name}: {str(e)}")
            return False

    def _check_response(self, response: Any, operation: str, require_rows: bool = True) -> None:
        # Older client versions return the error on the response instead of raising
        error = getattr(response, "error", None)
        if error:
            raise BackendProbeError(f"{operation} on {self.table_name} failed: {error}")

        # Insert must echo the row back, cleanup needs its id
        if require_rows and not getattr(response, "data", None):
            raise BackendProbeError(f"{operation} on {self.table_name} returned no rows")
