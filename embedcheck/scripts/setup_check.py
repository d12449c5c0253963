#!/usr/bin/env python3
"""
Write the credential template and check Supabase and Hugging Face connectivity.

Exits 0 when both probes pass, 1 otherwise.

Usage:
    python -m embedcheck.scripts.setup_check
    python -m embedcheck.scripts.setup_check --keep-env --cleanup
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from embedcheck.config import DEFAULT_ENV_FILE, DEFAULT_PROBE_TABLE
from embedcheck.pipelines.setup_orchestrator import SetupOrchestrator, exit_code

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bootstrap credentials and run connectivity probes")
    parser.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="Credential file to write and load")
    parser.add_argument("--keep-env", action="store_true",
                        help="Do not overwrite the credential file, only load it")
    parser.add_argument("--cleanup", action="store_true",
                        help=f"Delete the placeholder row from the probe table (default '{DEFAULT_PROBE_TABLE}')")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        result = asyncio.run(SetupOrchestrator().run_setup(
            env_path=args.env_file,
            cleanup=args.cleanup,
            write_template=not args.keep_env
        ))
    except OSError as e:
        logger.error(f"Setup failed writing {args.env_file}: {str(e)}")
        return 1

    return exit_code(result)


if __name__ == "__main__":
    sys.exit(main())
