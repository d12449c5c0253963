from typing import Dict, Any, Callable, Optional
from datetime import datetime
import logging
from langgraph.graph import StateGraph, END

# LangSmith tracing
from langsmith import traceable

from embedcheck.config import Settings, DEFAULT_ENV_FILE
from embedcheck.database.supabase_client import SupabaseClient
from embedcheck.models.pipeline_models import SetupState
from embedcheck.pipelines.connectivity_probe import probe_backend_async, probe_embedding_endpoint
from embedcheck.services.env_bootstrap import write_env_template
from embedcheck.services.huggingface_client import HuggingFaceClient

logger = logging.getLogger(__name__)

class SetupOrchestrator:
    """
    Setup and connectivity check pipeline:
    1. Write the credential template (overwrites any existing file)
    2. Load settings from it
    3. Probe Supabase and the Hugging Face endpoint in parallel branches
    4. Join both outcomes into one report

    A failure writing the template raises out of run_setup; probe failures
    are recorded in the state and never stop the other branch.
    """

    def __init__(self,
                 supabase_factory: Callable[[Settings], SupabaseClient] = SupabaseClient,
                 hf_factory: Callable[[Settings], HuggingFaceClient] = HuggingFaceClient):
        self.supabase_factory = supabase_factory
        self.hf_factory = hf_factory
        self.graph = self._build_graph()

    def _build_graph(self):
        """Build the setup LangGraph workflow"""
        workflow = StateGraph(SetupState)

        workflow.add_node("write_env_template", self._write_env_template_node)
        workflow.add_node("load_settings", self._load_settings_node)
        workflow.add_node("probe_backend", self._probe_backend_node)
        workflow.add_node("probe_embedding", self._probe_embedding_node)
        workflow.add_node("report", self._report_node)

        # Fan out to both probes after loading settings, join in report
        workflow.set_entry_point("write_env_template")
        workflow.add_edge("write_env_template", "load_settings")
        workflow.add_edge("load_settings", "probe_backend")
        workflow.add_edge("load_settings", "probe_embedding")
        workflow.add_edge(["probe_backend", "probe_embedding"], "report")
        workflow.add_edge("report", END)

        compiled = workflow.compile()
        logger.info("Setup workflow compiled successfully")
        return compiled

    def _write_env_template_node(self, state: SetupState) -> Dict[str, Any]:
        if state.get("write_template", True):
            write_env_template(state["env_path"])
        else:
            logger.info(f"Keeping existing credential file {state['env_path']}")
        return {}

    def _load_settings_node(self, state: SetupState) -> Dict[str, Any]:
        return {"settings": Settings.from_env_file(state["env_path"])}

    async def _probe_backend_node(self, state: SetupState) -> Dict[str, Any]:
        try:
            supabase_client = self.supabase_factory(state["settings"])
        except Exception as e:
            logger.error(f"Could not create Supabase client: {str(e)}")
            return {"backend_ok": False, "errors": [f"Supabase: {str(e)}"]}

        ok, error = await probe_backend_async(supabase_client, state.get("cleanup", False))
        return {"backend_ok": ok, "errors": [error] if error else []}

    async def _probe_embedding_node(self, state: SetupState) -> Dict[str, Any]:
        try:
            hf_client = self.hf_factory(state["settings"])
        except Exception as e:
            logger.error(f"Could not create Hugging Face client: {str(e)}")
            return {"embedding_ok": False, "errors": [f"Hugging Face: {str(e)}"]}

        ok, error = await probe_embedding_endpoint(hf_client)
        return {"embedding_ok": ok, "errors": [error] if error else []}

    def _report_node(self, state: SetupState) -> Dict[str, Any]:
        backend_ok = bool(state.get("backend_ok"))
        embedding_ok = bool(state.get("embedding_ok"))
        success = backend_ok and embedding_ok

        logger.info("=== Setup Connectivity Report ===")
        logger.info(f"Supabase: {'OK' if backend_ok else 'FAILED'}")
        logger.info(f"Hugging Face API: {'OK' if embedding_ok else 'FAILED'}")
        for error in state.get("errors", []):
            logger.warning(f"  {error}")

        if success:
            logger.info("Setup completed successfully")
        else:
            logger.error("Setup failed, check the errors above and the values in the credential file")

        return {"success": success}

    @traceable(name="setup_pipeline")
    async def run_setup(self, env_path: str = DEFAULT_ENV_FILE, cleanup: bool = False,
                        write_template: bool = True) -> Dict[str, Any]:
        """
        Main entry point for the setup check

        Raises:
            OSError: the credential template could not be written
        """
        start_time = datetime.utcnow()

        initial_state: SetupState = {
            "env_path": str(env_path),
            "cleanup": cleanup,
            "write_template": write_template,
            "settings": None,
            "backend_ok": None,
            "embedding_ok": None,
            "errors": [],
            "success": False
        }

        result = await self.graph.ainvoke(initial_state)

        execution_time = (datetime.utcnow() - start_time).total_seconds()
        logger.info(f"Setup pipeline finished in {execution_time:.2f}s")

        return {
            "success": result.get("success", False),
            "backend_ok": bool(result.get("backend_ok")),
            "embedding_ok": bool(result.get("embedding_ok")),
            "errors": result.get("errors", []),
            "metadata": {
                "execution_time": execution_time,
                "env_path": str(env_path)
            }
        }


def exit_code(result: Optional[Dict[str, Any]]) -> int:
    """0 only when both probes succeeded"""
    return 0 if result and result.get("success") else 1
