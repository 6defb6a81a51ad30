import time
import requests
import structlog
from typing import Any, Dict, Iterable, List, Optional

from django.conf import settings
from django.core.cache import cache

logger = structlog.get_logger(__name__)

API_KEY_CACHE_KEY = "sgt_api_key"
API_KEY_REFRESH_BUFFER = 300  # seconds before expiry that a new key is requested
INVALID_API_KEY = "INVALID API KEY"
PAGE_COUNT_KEYS = ("pages", "totalPages", "total_pages")


class SgtAPIError(Exception):
    """Base exception for SGT API errors"""

    pass


class SgtAuthError(SgtAPIError):
    """Authentication related errors"""

    pass


class SgtRateLimitError(SgtAPIError):
    """Rate limit exceeded errors"""

    pass


def extract_array(data: Any, keys: Iterable[str]) -> List[Any]:
    """
    Normalize an SGT response envelope to a list.

    Some endpoints return a bare list, others wrap it in an object under
    "results", "members", "standings" and so on.
    """
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in keys:
            if isinstance(data.get(key), list):
                return data[key]
    logger.debug("Unrecognized SGT response envelope", keys=list(keys), sample=str(data)[:500])
    return []


def _page_count(data: Any) -> int:
    if isinstance(data, dict):
        for key in PAGE_COUNT_KEYS:
            value = data.get(key)
            if isinstance(value, int) and value > 0:
                return value
    return 1


class SgtAPIClient:
    """
    Simulator Golf Tour club-admin API client for handling authentication and requests
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        base_url: Optional[str] = None,
        club_url: Optional[str] = None,
    ):
        self.username = username or settings.SGT_USERNAME
        self.password = password or settings.SGT_PASSWORD
        self.base_url = (base_url or settings.SGT_BASE_URL).rstrip("/")
        self.club_url = club_url or settings.SGT_CLUB_URL
        self.session = requests.Session()

        # Set default timeout
        self.timeout = 30

        # Rate limit retry configuration
        self.max_retries = 3
        self.retry_delay_base = 1  # Base delay in seconds
        self.retry_delay_max = 60  # Maximum delay in seconds

    @property
    def club_base_url(self) -> str:
        return f"{self.base_url}/{self.club_url}"

    def get_api_key(self) -> str:
        """
        Return the cached api key, requesting a new one when it is missing or
        about to expire.

        Raises:
            SgtAuthError: When credentials are missing or rejected
        """
        now = time.time()
        cached = cache.get(API_KEY_CACHE_KEY)
        if cached and cached["expires_at"] > now + API_KEY_REFRESH_BUFFER:
            return cached["key"]

        if not self.username or not self.password:
            raise SgtAuthError("SGT credentials not configured")

        logger.info("Requesting new SGT api key", club=self.club_url)

        try:
            response = self.session.post(
                f"{self.club_base_url}/apikey/create",
                data={"username": self.username, "password": self.password},
                timeout=self.timeout,
            )
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise SgtAuthError(f"Failed to authenticate with SGT API: {str(e)}")

        if not isinstance(data, dict) or not data.get("success") or not data.get("key"):
            logger.error("SGT api key request rejected", status_code=response.status_code)
            raise SgtAuthError("Failed to authenticate with SGT API")

        try:
            lifetime = int(data.get("expires") or 0)
        except (ValueError, TypeError):
            raise SgtAuthError(f"SGT API returned an invalid key expiry: {data.get('expires')}")

        cache.set(
            API_KEY_CACHE_KEY,
            {"key": data["key"], "expires_at": now + lifetime},
            timeout=lifetime if lifetime > 0 else None,
        )

        logger.info("SGT api key obtained", expires_in=lifetime)
        return data["key"]

    def invalidate_api_key(self):
        cache.delete(API_KEY_CACHE_KEY)

    def _retry_delay(self, attempt: int, retry_after: Optional[str] = None) -> int:
        delay = min(self.retry_delay_base * (2**attempt), self.retry_delay_max)
        if retry_after:
            try:
                delay = max(delay, min(int(retry_after), self.retry_delay_max))
            except (ValueError, TypeError):
                pass
        return delay

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make an authenticated GET request with retry logic for rate limiting and network errors

        Args:
            endpoint: API endpoint path below the club url, e.g. "/tours/list"
            params: Query parameters

        Returns:
            Decoded JSON response

        Raises:
            SgtAPIError: For API errors
            SgtAuthError: When the api key is rejected
            SgtRateLimitError: For rate limit errors after max retries
        """
        url = f"{self.club_base_url}{endpoint}"
        last_exception = None

        for attempt in range(self.max_retries + 1):
            query = {"api-key": self.get_api_key()}
            query.update({key: str(value) for key, value in (params or {}).items()})

            try:
                logger.debug("Making SGT API request", endpoint=endpoint, params=params, attempt=attempt + 1)

                response = self.session.get(url, params=query, timeout=self.timeout)

                if response.status_code == 429:
                    if attempt < self.max_retries:
                        delay = self._retry_delay(attempt, response.headers.get("Retry-After"))
                        logger.warning(
                            "Rate limit exceeded, retrying",
                            endpoint=endpoint,
                            attempt=attempt + 1,
                            delay=delay,
                        )
                        time.sleep(delay)
                        continue
                    logger.error("Rate limit exceeded, max retries reached", endpoint=endpoint)
                    raise SgtRateLimitError("Rate limit exceeded after maximum retries")

                if response.status_code >= 400:
                    logger.error("SGT API error", endpoint=endpoint, status_code=response.status_code,
                                 body=response.text[:500])
                    raise SgtAPIError(f"SGT API error: {response.status_code}")

                try:
                    return response.json()
                except ValueError:
                    raise SgtAPIError("SGT API returned an invalid JSON response")

            except (
                requests.exceptions.Timeout,
                requests.exceptions.ConnectionError,
                requests.exceptions.RequestException,
            ) as e:
                last_exception = e

                if attempt < self.max_retries:
                    delay = self._retry_delay(attempt)
                    logger.warning("Network error, retrying", error=str(e), attempt=attempt + 1, delay=delay)
                    time.sleep(delay)
                    continue

                logger.error("Network error, max retries reached", error=str(e), attempts=attempt + 1)
                break

        raise SgtAPIError(f"Request failed after retries: {str(last_exception)}")

    def request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Make a request, refreshing the api key once if SGT reports it as invalid
        """
        logger.info("SGT API request", endpoint=endpoint)

        data = self._make_request(endpoint, params)
        if data == INVALID_API_KEY:
            logger.warning("SGT rejected the cached api key, requesting a new one", endpoint=endpoint)
            self.invalidate_api_key()
            data = self._make_request(endpoint, params)
            if data == INVALID_API_KEY:
                self.invalidate_api_key()
                raise SgtAuthError("Invalid API key")

        return data

    def get_list(self, endpoint: str, keys: Iterable[str], params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """
        Fetch every page of a list endpoint and return the records as one list

        Args:
            endpoint: API endpoint path
            keys: Envelope keys that may hold the records
            params: Query parameters

        Returns:
            List of records
        """
        keys = tuple(keys)
        response = self.request(endpoint, params)
        records = list(extract_array(response, keys))

        pages = _page_count(response)
        for page in range(2, pages + 1):
            page_params = dict(params or {})
            page_params["page"] = page
            records.extend(extract_array(self.request(endpoint, page_params), keys))

        logger.info("Retrieved SGT records", endpoint=endpoint, count=len(records), pages=pages)
        return records

    def get_members(self) -> List[Dict[str, Any]]:
        return self.get_list("/members/list", ("members", "results"))

    def get_tours(self) -> List[Dict[str, Any]]:
        return self.get_list("/tours/list", ("tours", "results"))

    def get_tour_standings(self, tour_id: int, gross_or_net: str = "gross") -> List[Dict[str, Any]]:
        return self.get_list(
            "/tours/standings", ("standings", "results"), {"tourId": tour_id, "grossOrNet": gross_or_net}
        )

    def get_tour_members(self, tour_id: int) -> List[Dict[str, Any]]:
        return self.get_list("/tours/members", ("members", "results"), {"tourId": tour_id})

    def get_tournaments(self, tour_id: int) -> List[Dict[str, Any]]:
        return self.get_list("/tournaments/list", ("results", "tournaments"), {"tourId": tour_id})

    def get_scorecards(self, tournament_id: int) -> List[Dict[str, Any]]:
        return self.get_list("/tournaments/scorecards", ("scorecards", "results"), {"tournamentId": tournament_id})

    def get_registrations(self, tournament_id: int) -> List[Dict[str, Any]]:
        return self.get_list("/registrations/view", ("registrations", "results"), {"tournamentId": tournament_id})
