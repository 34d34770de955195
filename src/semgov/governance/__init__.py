"""Version governance pipelines."""

from .orchestrator import GovernanceOrchestrator
from .result import BumpOutcome, BumpStatus, CheckReport

__all__ = ["BumpOutcome", "BumpStatus", "CheckReport", "GovernanceOrchestrator"]
