"""
HTTP transport for the OpenSky client.

A thin wrapper over a requests.Session: one GET per call, basic auth and
timeout taken from an immutable per-client TransportConfig, errors turned
into TransportError. No retries.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

import requests
from requests.auth import HTTPBasicAuth

from opensky_rest import __version__
from opensky_rest.errors import TransportError
from opensky_rest.models.credentials import Credentials

logger = logging.getLogger(__name__)

StatusPredicate = Callable[[int], bool]


def is_success(status: int) -> bool:
    return 200 <= status < 300


def is_success_or_not_found(status: int) -> bool:
    """OpenSky answers 404 when a query matched nothing."""
    return is_success(status) or status == 404


@dataclass(frozen=True)
class TransportConfig:
    """Request options for one client instance."""
    timeout: float = 5.0
    user_agent: str = f'opensky-rest/{__version__}'
    credentials: Optional[Credentials] = None

    @property
    def auth(self) -> Optional[HTTPBasicAuth]:
        if self.credentials is None:
            return None
        return HTTPBasicAuth(*self.credentials.as_auth())


class Transport:
    """Performs GET requests and decodes JSON bodies."""

    def __init__(self, config: TransportConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def get(
        self,
        url: str,
        params: List[Tuple[str, str]],
        accept_status: StatusPredicate = is_success,
    ) -> Tuple[int, Any]:
        """
        GET url with params.

        Returns (status_code, decoded JSON or None for an empty body).

        Raises:
            TransportError on network errors, timeouts, statuses rejected by
            accept_status, and undecodable bodies on 2xx responses.
        """
        logger.debug(f'GET {url} params={params}')

        try:
            response = self.session.get(
                url,
                params=params,
                auth=self.config.auth,
                headers={'User-Agent': self.config.user_agent},
                timeout=self.config.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f'OpenSky API timeout after {self.config.timeout}s: {url}')
            raise TransportError(f'Request to {url} timed out', url=url) from e
        except requests.exceptions.RequestException as e:
            logger.error(f'OpenSky request failed: {e}')
            raise TransportError(f'Request to {url} failed: {e}', url=url) from e

        status = response.status_code
        if not accept_status(status):
            if status == 429:
                logger.warning('OpenSky rate limit exceeded')
            else:
                logger.error(f'OpenSky API error: {status}')
            raise TransportError(
                f'OpenSky API error: status {status} - {response.reason}',
                status_code=status,
                url=url,
            )

        if not response.content:
            return status, None

        try:
            return status, response.json()
        except ValueError as e:
            if not is_success(status):
                # Accepted non-2xx (404) bodies are not required to be JSON
                return status, None
            logger.error(f'OpenSky returned invalid JSON from {url}')
            raise TransportError(f'Invalid JSON from {url}', status_code=status, url=url) from e

    def close(self) -> None:
        self.session.close()
