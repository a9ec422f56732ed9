"""
Two-phase run handling for the dashboard.

A click only queues the form and flips `running`; the page is then rerun so
the sidebar renders with the button disabled, and the queued evaluation runs
on that second pass.
"""

import logging
from typing import Any

from agents.exceptions import AnalysisError
from models.schemas import EvaluationForm

logger = logging.getLogger(__name__)


def request_run(state: Any, form: EvaluationForm) -> None:
    state.pending_form = form
    state.running = True


def run_pending(state: Any) -> bool:
    """Evaluate the queued form, if any. Returns True when an evaluation ran."""
    form = state.pending_form
    if not state.running or form is None:
        state.running = False
        return False
    try:
        state.orchestrator.evaluate(form, state.weight_table)
    except AnalysisError as e:
        logger.error(f"Evaluation failed: {e}")
    finally:
        state.running = False
        state.pending_form = None
    return True
