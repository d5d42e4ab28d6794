"""Host environment for shell side effects.

Commands never touch the outside world themselves; they return
`EnvironmentRequest` values that the interpreter hands to an environment
once the new state is committed. Both operations are fire-and-forget.
"""

import logging
import webbrowser
from typing import List, Optional, Protocol

from portfolio_mcp.shell.state import EnvironmentRequest

logger = logging.getLogger("portfolio-mcp.shell")

NAVIGATE = "navigate"
OPEN_EXTERNAL = "open"


class ShellEnvironment(Protocol):
    def navigate(self, anchor: str) -> None:
        """Move the host view to an in-page anchor such as "#projects"."""

    def open_external(self, url: str) -> None:
        """Open a URL in a new browsing context."""


class RecordingEnvironment:
    """Environment that only records what it was asked to do."""

    def __init__(self) -> None:
        self.requests: List[EnvironmentRequest] = []

    def navigate(self, anchor: str) -> None:
        self.requests.append(EnvironmentRequest(NAVIGATE, anchor))

    def open_external(self, url: str) -> None:
        self.requests.append(EnvironmentRequest(OPEN_EXTERNAL, url))

    def drain(self) -> List[EnvironmentRequest]:
        """Return recorded requests and forget them."""
        drained, self.requests = self.requests, []
        return drained


class BrowserEnvironment:
    """Environment backed by the local web browser.

    Args:
        site_url: Base URL of the rendered portfolio page. Anchors are opened
            as ``<site_url><anchor>``; without a site URL they are only logged.
    """

    def __init__(self, site_url: Optional[str] = None) -> None:
        self.site_url = site_url.rstrip("/") if site_url else None

    def navigate(self, anchor: str) -> None:
        if not self.site_url:
            logger.info("Navigation to %s requested (no site URL configured)", anchor)
            return
        self._open(f"{self.site_url}/{anchor}")

    def open_external(self, url: str) -> None:
        self._open(url)

    @staticmethod
    def _open(url: str) -> None:
        try:
            opened = webbrowser.open_new_tab(url)
        except webbrowser.Error as exc:
            logger.warning("Failed to open %s: %s", url, exc)
            return
        if not opened:
            logger.warning("No browser available to open %s", url)


def dispatch(environment: ShellEnvironment, request: EnvironmentRequest) -> None:
    """Forward one request to an environment."""
    if request.action == NAVIGATE:
        environment.navigate(request.target)
    elif request.action == OPEN_EXTERNAL:
        environment.open_external(request.target)
    else:
        raise ValueError(f"Unknown environment action: {request.action}")
