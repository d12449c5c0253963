import os
from pathlib import Path
from typing import Optional, Union
import logging

from dotenv import dotenv_values
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"
DEFAULT_MODEL_URL = "https://api-inference.huggingface.co/models/sentence-transformers/all-MiniLM-L6-v2"
DEFAULT_PROBE_TABLE = "embeddings"

# Keys written to the credential template, in file order
CREDENTIAL_KEYS = ["HUGGINGFACE_API_KEY", "SUPABASE_URL", "SUPABASE_ANON_KEY"]


class Settings(BaseModel):
    """
    Credentials and endpoints for one run.
    Built once from the credential file and handed to each client constructor,
    so nothing is read from the process environment after startup.
    """
    huggingface_api_key: str = ""
    supabase_url: str = ""
    supabase_anon_key: str = ""
    model_url: str = DEFAULT_MODEL_URL
    probe_table: str = DEFAULT_PROBE_TABLE

    @classmethod
    def from_env_file(cls, path: Union[str, Path] = DEFAULT_ENV_FILE) -> "Settings":
        """
        Parse KEY=value pairs from the env file. Values are taken as-is
        (empty strings included); presence and format are not validated here.
        """
        values = dotenv_values(path)
        logger.info(f"Loaded {len(values)} settings from {path}")
        return cls(
            huggingface_api_key=values.get("HUGGINGFACE_API_KEY") or "",
            supabase_url=values.get("SUPABASE_URL") or "",
            supabase_anon_key=values.get("SUPABASE_ANON_KEY") or "",
            model_url=values.get("HUGGINGFACE_MODEL_URL") or DEFAULT_MODEL_URL,
            probe_table=values.get("SUPABASE_PROBE_TABLE") or DEFAULT_PROBE_TABLE,
        )

    @classmethod
    def from_environment(cls, env_file: Optional[Union[str, Path]] = None) -> "Settings":
        """
        Env file values first, then the process environment for anything the file leaves empty
        """
        settings = cls.from_env_file(env_file) if env_file and Path(env_file).exists() else cls()
        return settings.model_copy(update={
            "huggingface_api_key": settings.huggingface_api_key or os.getenv("HUGGINGFACE_API_KEY", ""),
            "supabase_url": settings.supabase_url or os.getenv("SUPABASE_URL", ""),
            "supabase_anon_key": settings.supabase_anon_key or os.getenv("SUPABASE_ANON_KEY", ""),
        })
