from typing import List, Optional, Annotated
import operator
from typing_extensions import TypedDict

from embedcheck.config import Settings


class SetupState(TypedDict, total=False):
    """
    State object for the setup and connectivity check pipeline
    Compatible with LangGraph's state handling
    """
    # Input
    env_path: str
    cleanup: bool
    write_template: bool

    # Pipeline data
    settings: Optional[Settings]
    backend_ok: Optional[bool]
    embedding_ok: Optional[bool]

    # Pipeline metadata; both probe branches append, so errors need a reducer
    errors: Annotated[List[str], operator.add]
    success: bool
