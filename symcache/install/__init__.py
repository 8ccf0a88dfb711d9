from .orchestrator import InstallOrchestrator, InstallOutcome
from .runner import InstallRunner, run_install_command

__all__ = [
    "InstallOrchestrator",
    "InstallOutcome",
    "InstallRunner",
    "run_install_command",
]
