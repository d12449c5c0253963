from pathlib import Path
from typing import Union
import logging

from embedcheck.config import CREDENTIAL_KEYS, DEFAULT_ENV_FILE

logger = logging.getLogger(__name__)


def env_template() -> str:
    return "".join(f"{key}=''\n" for key in CREDENTIAL_KEYS)


def write_env_template(path: Union[str, Path] = DEFAULT_ENV_FILE) -> Path:
    """
    Write the credential template, replacing any existing file.

    No backup is kept. OSError (permission denied, missing directory) propagates
    to the caller.
    """
    env_path = Path(path)
    if env_path.exists():
        logger.warning(f"Overwriting existing credential file {env_path}")

    env_path.write_text(env_template())
    logger.info(f"Wrote credential template to {env_path}")
    return env_path
