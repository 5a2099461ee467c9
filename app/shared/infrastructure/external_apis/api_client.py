# 📄 File: app/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# This file creates a smart HTTP client that knows how to talk to external services reliably,
# handling timeouts, retries, and errors gracefully when sending plant photos to the AI model.

# 🧪 Purpose (Technical Summary):
# Generic async HTTP client with retry logic for connection faults, status-code to
# exception mapping, request logging and basic performance statistics.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies

# 🔄 Connected Modules / Calls From:
# Used by: Gemini plant analyzer (plant_identification.infrastructure.external)

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from app.shared.core.exceptions import (
    APIAuthenticationError,
    APIQuotaExceededError,
    APITimeoutError,
    TransientServiceError,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


def _is_retryable_transport_error(exception: BaseException) -> bool:
    # A timed-out request may already have been processed upstream.
    if isinstance(exception, asyncio.TimeoutError):
        return False
    return isinstance(exception, aiohttp.ClientConnectionError)


class APIClient:
    """
    Generic async HTTP client for external API integrations.

    Features:
    - Optional retry with exponential backoff on connection errors (never on timeouts)
    - Status code mapping onto the application exception hierarchy
    - Request/response logging
    - Performance metrics
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        api_name: str,
        timeout: int = 30,
        max_retries: int = 1,
        retry_wait_min: float = 1,
        retry_wait_max: float = 10,
    ):
        """Initialize API client with configuration."""
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.api_name = api_name
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.retry_wait_min = retry_wait_min
        self.retry_wait_max = retry_wait_max

        self.session: Optional[ClientSession] = None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0,
            'last_request_time': None,
        }

    async def initialize(self):
        """Initialize the client session."""
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers=self._get_default_headers()
        )
        logger.info(f"API client initialized for {self.api_name}")

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        headers = {
            'User-Agent': f'PlantIdentifier/1.0 ({self.api_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        }

        if self.api_key:
            if 'gemini' in self.api_name.lower():
                headers['x-goog-api-key'] = self.api_key
            else:
                headers['Authorization'] = f'Bearer {self.api_key}'

        return headers

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict] = None,
        data: Optional[Union[Dict, str, bytes]] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        """Execute one HTTP exchange and decode the JSON body."""
        request_kwargs: Dict[str, Any] = {'method': method, 'url': url}

        if params:
            request_kwargs['params'] = params
        if data is not None:
            if isinstance(data, dict):
                request_kwargs['json'] = data
            else:
                request_kwargs['data'] = data
        if timeout:
            request_kwargs['timeout'] = ClientTimeout(total=timeout)

        start_time = time.time()

        async with self.session.request(**request_kwargs) as response:
            response_time = time.time() - start_time
            self._record_timing(response_time)

            await self._handle_response_status(response)

            try:
                response_data = await response.json(content_type=None)
            except ValueError:
                response_text = await response.text()
                raise TransientServiceError(
                    f"Malformed response from {self.api_name}",
                    service=self.api_name,
                    service_response=response_text[:500],
                )

            logger.info(
                f"{self.api_name} API request successful: "
                f"{method} {url} - {response.status} - {response_time:.2f}s"
            )
            return response_data

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict] = None,
        data: Optional[Union[Dict, str, bytes]] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        """Make HTTP request with retry logic."""
        if not self.session:
            await self.initialize()

        url = self._url(endpoint)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=1, min=self.retry_wait_min, max=self.retry_wait_max),
                retry=retry_if_exception(_is_retryable_transport_error),
                before_sleep=before_sleep_log(logger.logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    self.stats['total_requests'] += 1
                    response_data = await self._send(method, url, params, data, timeout)
        except Exception as e:
            self.stats['failed_requests'] += 1
            logger.error(
                f"API error for {self.api_name}",
                error_type=type(e).__name__,
                error_message=str(e),
                method=method,
                endpoint=endpoint,
            )
            raise self._transform_exception(e, timeout)

        self.stats['successful_requests'] += 1
        return response_data

    async def _handle_response_status(self, response: aiohttp.ClientResponse):
        """Handle HTTP response status codes."""
        if response.status == 200:
            return
        elif response.status in (401, 403):
            raise APIAuthenticationError(self.api_name)
        elif response.status in (402, 429):
            retry_after = response.headers.get('Retry-After')
            raise APIQuotaExceededError(
                self.api_name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None
            )
        elif 400 <= response.status < 600:
            response_text = await response.text()
            kind = "Client" if response.status < 500 else "Server"
            raise TransientServiceError(
                f"{kind} error for {self.api_name} ({response.status})",
                service=self.api_name,
                service_response=response_text[:500],
            )
        else:
            raise TransientServiceError(
                f"Unexpected status code for {self.api_name}: {response.status}",
                service=self.api_name,
            )

    def _transform_exception(self, exception: Exception, timeout: Optional[int] = None) -> Exception:
        """Transform transport exceptions to application exceptions."""
        if isinstance(exception, asyncio.TimeoutError):
            return APITimeoutError(self.api_name, timeout or self.timeout)
        elif isinstance(exception, aiohttp.ClientError):
            return TransientServiceError(
                f"Connection error for {self.api_name}: {exception}",
                service=self.api_name,
            )
        return exception

    def _record_timing(self, response_time: float):
        self.stats['last_request_time'] = datetime.now(timezone.utc).isoformat()
        if self.stats['average_response_time'] == 0:
            self.stats['average_response_time'] = response_time
        else:
            self.stats['average_response_time'] = (
                self.stats['average_response_time'] * 0.7 + response_time * 0.3
            )

    async def post(
        self,
        endpoint: str,
        data: Optional[Union[Dict, str, bytes]] = None,
        params: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Dict[str, Any]:
        """Make POST request."""
        return await self._make_request('POST', endpoint, params, data, timeout)

    def get_stats(self) -> Dict[str, Any]:
        """Get client performance statistics."""
        return {
            **self.stats,
            'api_name': self.api_name,
            'error_rate': (
                self.stats['failed_requests'] / max(self.stats['total_requests'], 1)
            ) * 100,
        }

    async def close(self):
        """Close the client session and cleanup resources."""
        if self.session:
            await self.session.close()
            self.session = None

        logger.info(f"API client closed for {self.api_name}")


def create_api_client(
    api_name: str,
    base_url: str,
    api_key: Optional[str],
    **kwargs
) -> APIClient:
    """Factory function to create configured API client."""
    return APIClient(
        base_url=base_url,
        api_key=api_key,
        api_name=api_name,
        **kwargs
    )
