"""
Base Agent class and fan-out helper
SynergyAI — Brand Partnership Evaluator
"""

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Dict, Sequence, Tuple
from dataclasses import dataclass, field
from datetime import datetime
import logging
import traceback

logger = logging.getLogger(__name__)


@dataclass
class AgentResult:
    """Standardized result envelope returned by every agent."""
    agent_name: str
    success: bool
    data: Any = None
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.started_at and self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return None

    def __repr__(self):
        status = "✅" if self.success else "❌"
        dur = f" ({self.duration_seconds:.1f}s)" if self.duration_seconds else ""
        return f"{status} {self.agent_name}{dur}"


class Agent(ABC):
    """
    Abstract base class for all pipeline agents.
    Subclasses must implement `run(data)`.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"agent.{name}")

    @abstractmethod
    def run(self, data: Any) -> Any:
        raise NotImplementedError

    def execute(self, data: Any) -> AgentResult:
        """
        Wraps `run()` with timing, structured logging, and error handling.
        """
        started_at = datetime.utcnow()
        self.logger.info(f"[{self.name}] Starting...")
        try:
            result = self.run(data)
            finished_at = datetime.utcnow()
            duration = (finished_at - started_at).total_seconds()
            self.logger.info(f"[{self.name}] Completed in {duration:.2f}s")
            return AgentResult(
                agent_name=self.name,
                success=True,
                data=result,
                started_at=started_at,
                finished_at=finished_at,
            )
        except Exception as e:
            finished_at = datetime.utcnow()
            self.logger.error(f"[{self.name}] Failed: {e}\n{traceback.format_exc()}")
            return AgentResult(
                agent_name=self.name,
                success=False,
                error=str(e),
                started_at=started_at,
                finished_at=finished_at,
            )

    def __repr__(self):
        return f"<Agent: {self.name}>"


def fan_out(tasks: Sequence[Tuple[Agent, Any]], max_workers: Optional[int] = None) -> List[AgentResult]:
    """
    Run independent agents concurrently and wait for all of them.

    Results come back in task order. A failing agent yields an unsuccessful
    AgentResult (data=None) and never cancels its siblings.
    """
    if not tasks:
        return []

    with ThreadPoolExecutor(max_workers=max_workers or len(tasks)) as executor:
        futures = [executor.submit(agent.execute, data) for agent, data in tasks]
        results = [f.result() for f in futures]

    ok = sum(1 for r in results if r.success and r.data is not None)
    logger.info(f"Fan-out complete — {ok}/{len(results)} tasks returned data")
    return results
