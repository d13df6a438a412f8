# HTTP client for the SynapsePay REST API
import logging
from typing import Optional, Dict, Any

import httpx

from synapse_pay_client.app.observability import tracer, api_requests_counter
from synapse_pay_client.app.service.exceptions import ApiError

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Thin synchronous wrapper around httpx.Client that adds the SynapsePay
    gateway/user headers, parses JSON bodies and turns non-2xx answers into ApiError.
    """

    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        fingerprint: str,
        ip_address: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client_id = client_id
        self.client_secret = client_secret
        self.fingerprint = fingerprint
        self.ip_address = ip_address
        self.oauth_key = ""
        self.user_id: Optional[str] = None
        self.http_client = http_client or httpx.Client(timeout=timeout)

    def get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-SP-GATEWAY": f"{self.client_id}|{self.client_secret}",
            "X-SP-USER-IP": self.ip_address,
            "X-SP-USER": f"{self.oauth_key}|{self.fingerprint}",
        }

    def update_headers(
        self,
        oauth_key: Optional[str] = None,
        fingerprint: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        # Only the supplied values change
        if oauth_key is not None:
            self.oauth_key = oauth_key
        if fingerprint is not None:
            self.fingerprint = fingerprint
        if ip_address is not None:
            self.ip_address = ip_address
        if user_id is not None:
            self.user_id = user_id

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("POST", path, payload=payload)

    def patch(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("PATCH", path, payload=payload)

    def request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"Sending {method} {url}")

        with tracer.start_as_current_span("synapse_pay_client.http.request") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.url", url)
            try:
                response = self.http_client.request(
                    method, url, headers=self.get_headers(), json=payload, params=params
                )
            except httpx.RequestError as e:
                logger.error(f"Request error calling {method} {url}: {e}", exc_info=True)
                api_requests_counter.add(1, {"http.method": method, "http.status_class": "error"})
                raise ApiError(f"Request to {url} failed: {e}") from e

            span.set_attribute("http.status_code", response.status_code)
            api_requests_counter.add(1, {"http.method": method, "http.status_class": f"{response.status_code // 100}xx"})

            body = self._parse_body(response)
            if response.status_code >= 300:
                message = self._error_message(body) or response.text or "unknown error"
                logger.error(f"{method} {url} failed with status {response.status_code}: {message}")
                raise ApiError(message, status_code=response.status_code, response=body)

        return body

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"raw": response.text}

    @staticmethod
    def _error_message(body: Any) -> Optional[str]:
        # API errors look like {"error": {"en": "..."}, "error_code": "...", "http_code": "..."}
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                return error.get("en")
            if isinstance(error, str):
                return error
        return None

    def close(self) -> None:
        self.http_client.close()
