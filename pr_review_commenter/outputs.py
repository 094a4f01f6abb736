"""
Step outputs for the PR Review Commenter.
"""

import json
import logging
import os
from typing import Dict, Optional

from .models import OutputBundle, RunResult

logger = logging.getLogger(__name__)


def build_outputs(run_result: RunResult) -> OutputBundle:
    """Derive the step outputs from a run result."""
    return OutputBundle(
        comments_created_all=run_result.all_created,
        comments_created_some=run_result.some_created,
        comments_created_list=list(run_result.created)
    )


def format_outputs(bundle: OutputBundle) -> Dict[str, str]:
    """Render an output bundle as the string values Actions expects."""
    return {
        "comments-created-all": json.dumps(bundle.comments_created_all),
        "comments-created-some": json.dumps(bundle.comments_created_some),
        "comments-created-list": json.dumps(bundle.comments_created_list, separators=(",", ":")),
    }


def write_outputs(bundle: OutputBundle, output_path: Optional[str] = None) -> None:
    """Write step outputs to the GITHUB_OUTPUT file.

    Outside of Actions, where no output file is set, the values are only logged.
    """
    output_path = output_path or os.environ.get("GITHUB_OUTPUT")
    values = format_outputs(bundle)

    if not output_path:
        for name, value in values.items():
            logger.info(f"output {name}={value}")
        return

    with open(output_path, "a", encoding="utf-8") as f:
        for name, value in values.items():
            f.write(f"{name}={value}\n")
    logger.debug(f"Wrote {len(values)} outputs to {output_path}")
