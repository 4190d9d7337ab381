"""Startup orchestration for application bootstrap."""

import logging
from dataclasses import dataclass
from typing import Literal, Tuple

from utils import config, session_manager

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]


def run_startup() -> StartupResult:
    """Prepare the per-session store and gateway; log the startup once per session."""
    executed_steps = []

    session_manager.init_session_state()
    executed_steps.append("init_session_state")

    if not session_manager.st.session_state.startup_logged:
        log.info(f"Session started (auth api: {config.auth_api_url()})")
        session_manager.st.session_state.startup_logged = True
        executed_steps.append("log_startup")

    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps))
