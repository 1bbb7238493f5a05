"""HTTP client for the Overworld backend's game-pass endpoint."""
import logging
import os

import requests

from app.domain.errors import UnknownPlayerError, UpstreamUnavailableError
from app.domain.game_result import UpstreamResultSummary

log = logging.getLogger("towerdefense.overworld")

DEFAULT_OVERWORLD_URL = "http://localhost/overworld/api/v1"
SUBMIT_PATH = "/internal/submit-game-pass"

UNAVAILABLE_MESSAGE = (
    "The Overworld backend is currently not available. "
    "The result was NOT saved. Please try again later"
)
UNKNOWN_PLAYER_MESSAGE = "The result could not be saved. Unknown User"


def _timeout_from_env() -> float:
    raw = os.environ.get("OVERWORLD_TIMEOUT_SECONDS", "5") or "5"
    try:
        return float(raw)
    except ValueError:
        log.warning("Invalid OVERWORLD_TIMEOUT_SECONDS=%r, using 5", raw)
        return 5.0


class OverworldResultClient:
    """Sends trimmed result summaries to the Overworld, authenticated per call."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        url = base_url or os.environ.get("OVERWORLD_URL", "") or DEFAULT_OVERWORLD_URL
        self._endpoint = url.rstrip("/") + SUBMIT_PATH
        self._timeout = timeout if timeout is not None else _timeout_from_env()
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def submit(self, access_token: str, summary: UpstreamResultSummary) -> None:
        """POST the summary. Raises a classified error unless the Overworld accepts it."""
        try:
            response = self._session.post(
                self._endpoint,
                json=summary.to_payload(),
                cookies={"access_token": access_token},
                timeout=self._timeout,
            )
        except requests.Timeout as exc:
            log.error("Overworld timed out after %ss: %s", self._timeout, exc)
            raise UpstreamUnavailableError(UNAVAILABLE_MESSAGE) from exc
        except requests.RequestException as exc:
            log.error("Overworld network error: %s: %s", type(exc).__name__, exc)
            raise UpstreamUnavailableError(UNAVAILABLE_MESSAGE) from exc

        status = response.status_code
        if status == 404:
            raise UnknownPlayerError(UNKNOWN_PLAYER_MESSAGE)
        if status >= 400:
            log.error("Overworld answered HTTP %d: %s", status, response.text[:200])
            raise UpstreamUnavailableError(UNAVAILABLE_MESSAGE)
        log.debug("Overworld accepted result for %s (HTTP %d)", summary.user_id, status)
