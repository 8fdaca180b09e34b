"""
Request dispatcher for the Box View API.

Every network call goes through Request.send: authentication, URL assembly,
throttle retries and error classification all happen here, so resource
classes only ever see a decoded payload or raw bytes.
"""

import json
import logging
import math
import time
from typing import IO, Any, Protocol

import requests

from ..config import ClientConfig

logger = logging.getLogger(__name__)

# Error codes carried by BoxViewError.error_code
BAD_REQUEST_ERROR = "bad_request"
UNAUTHORIZED_ERROR = "unauthorized"
NOT_FOUND_ERROR = "not_found"
METHOD_NOT_ALLOWED_ERROR = "method_not_allowed"
UNSUPPORTED_MEDIA_TYPE_ERROR = "unsupported_media_type"
TOO_MANY_REQUESTS_ERROR = "too_many_requests"
SERVER_ERROR = "server_error"
TRANSPORT_ERROR = "transport_error"
JSON_RESPONSE_ERROR = "server_response_not_valid_json"
REQUEST_TIMEOUT_ERROR = "request_timeout"
INVALID_FILE_ERROR = "invalid_file"
INVALID_RESPONSE_ERROR = "invalid_response"
INVALID_DATE_ERROR = "invalid_date"

HTTP_ERROR_CODES = {
    400: BAD_REQUEST_ERROR,
    401: UNAUTHORIZED_ERROR,
    404: NOT_FOUND_ERROR,
    405: METHOD_NOT_ALLOWED_ERROR,
    415: UNSUPPORTED_MEDIA_TYPE_ERROR,
    429: TOO_MANY_REQUESTS_ERROR,
}

# Checked in order; the first one present wins
THROTTLE_HEADERS = ("Retry-After", "X-Throttle-Wait-Seconds")


class BoxViewError(Exception):
    """The single exception raised by this library.

    Callers branch on ``error_code``; the message is meant for logs and
    carries whatever request/response context was available.
    """

    def __init__(
        self,
        error_code: str,
        message: str | None = None,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
        request_headers: dict | None = None,
        request_body: str | None = None,
        response_body: str | None = None,
        elapsed: float | None = None,
    ):
        self.error_code = error_code
        self.message = message or error_code
        self.status_code = status_code
        self.method = method
        self.url = url
        self.request_headers = request_headers
        self.request_body = request_body
        self.response_body = response_body
        self.elapsed = elapsed

        details = [self.message]
        if method or url:
            details.append("")
            details.append(f"Method: {method}")
            details.append(f"URL: {url}")
            details.append(f"Headers: {json.dumps(request_headers or {}, sort_keys=True)}")
            details.append(f"Request Body: {request_body or ''}")
        if response_body is not None:
            details.append("")
            details.append(f"Response Body: {response_body}")

        super().__init__("\n".join(details))

    @classmethod
    def from_exchange(
        cls,
        error_code: str,
        message: str | None,
        request: requests.PreparedRequest | None = None,
        response: requests.Response | None = None,
        **kwargs: Any,
    ) -> "BoxViewError":
        """Build an error enriched with the prepared request and response."""
        if request is None and response is not None:
            request = response.request

        context: dict[str, Any] = {}
        if request is not None:
            context["method"] = request.method
            context["url"] = request.url
            context["request_headers"] = _redact_headers(request.headers)
            context["request_body"] = _body_text(request.body)
        if response is not None:
            context["status_code"] = response.status_code
            context["response_body"] = response.text

        context.update(kwargs)
        return cls(error_code, message, **context)


class RequestHandler(Protocol):
    """Anything that can dispatch a Box View API call.

    Client and the resource classes only depend on this signature, so a test
    double can stand in for Request.
    """

    def send(
        self,
        path: str,
        get_params: dict | None = None,
        post_params: dict | None = None,
        *,
        host: str | None = None,
        file: IO[bytes] | None = None,
        http_method: str | None = None,
        raw_response: bool = False,
        timeout: float | None = None,
    ) -> Any:
        ...


def _redact_headers(headers: Any) -> dict[str, str]:
    redacted = {}
    for name, value in dict(headers or {}).items():
        if name.lower() == "authorization":
            value = value.split(" ", 1)[0] + " ***" if value else value
        redacted[name] = value
    return redacted


def _body_text(body: Any) -> str | None:
    if body is None:
        return None
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        return body
    # Streaming bodies cannot be replayed into a message
    return f"<{type(body).__name__}>"


def _form_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class Request:
    """
    Makes requests to the Box View API.

    Features:
    - Token authentication, attached to each request
    - JSON or multipart bodies, raw or decoded responses
    - Retry while the server sends Retry-After / X-Throttle-Wait-Seconds,
      bounded by an absolute timeout
    - Classification of all failures into BoxViewError codes
    """

    def __init__(
        self,
        api_key: str | None,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            api_key: Box View API key
            config: Hosts, base path and timeouts (defaults if omitted)
            session: Optional requests session to send through
        """
        self.api_key = api_key
        self.config = config or ClientConfig(api_key=api_key)
        self.session = session or requests.Session()

    def send(
        self,
        path: str,
        get_params: dict | None = None,
        post_params: dict | None = None,
        *,
        host: str | None = None,
        file: IO[bytes] | None = None,
        http_method: str | None = None,
        raw_response: bool = False,
        timeout: float | None = None,
    ) -> Any:
        """
        Send an API request.

        Args:
            path: Path appended to the versioned base path (e.g. "/documents/abc")
            get_params: Query string parameters
            post_params: Body parameters; JSON encoded unless a file is given
            host: Host override (file uploads use the upload host)
            file: Readable binary stream sent as a multipart "file" part
            http_method: Explicit method, overrides the inferred one
            raw_response: Return the body bytes instead of decoded JSON
            timeout: Absolute timeout in seconds for the throttle-retry loop

        Returns:
            Decoded JSON payload, or bytes when raw_response is set

        Raises:
            BoxViewError: On any transport, HTTP, decoding or API-level error
        """
        url = f"{self.config.base_url(host)}{path or ''}"

        headers = {
            "Authorization": f"Token {self.api_key}",
            "Accept": "*/*" if raw_response else "application/json",
            "User-Agent": self.config.user_agent,
        }

        kwargs: dict[str, Any] = {}
        method = "GET"

        if file is not None:
            method = "POST"
            kwargs["data"] = {k: _form_value(v) for k, v in (post_params or {}).items()}
            kwargs["files"] = {"file": file}
        elif post_params:
            method = "POST"
            kwargs["json"] = post_params

        if http_method:
            method = http_method.upper()

        if get_params:
            kwargs["params"] = get_params

        absolute_timeout = timeout if timeout is not None else self.config.absolute_timeout

        logger.debug(f"API Request: {method} {url}")
        if "json" in kwargs:
            logger.debug(f"Request body: {json.dumps(kwargs['json'], indent=2, default=str)}")

        response = self._execute(method, url, headers, kwargs, absolute_timeout)

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise self._http_error(response) from e

        return self._handle_response(response, raw_response)

    def _execute(
        self,
        method: str,
        url: str,
        headers: dict,
        kwargs: dict,
        absolute_timeout: float,
    ) -> requests.Response:
        """Send the request, resending it for as long as the server throttles."""
        started = time.monotonic()
        file = kwargs.get("files", {}).get("file")
        start_position = _tell(file)

        while True:
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    headers=headers,
                    timeout=(self.config.connect_timeout, self.config.read_timeout),
                    **kwargs,
                )
            except requests.exceptions.RequestException as e:
                logger.error(f"Request to {url} failed: {e}")
                raise BoxViewError.from_exchange(
                    TRANSPORT_ERROR,
                    f"HTTP transport error: {e}",
                    request=e.request if isinstance(e.request, requests.PreparedRequest) else None,
                    response=e.response,
                ) from e

            logger.debug(f"Response status: {response.status_code}")

            wait = self._throttle_wait(response)
            if wait is None:
                return response

            logger.info(f"Throttled by Box View, retrying {method} {url} in {wait:g}s")
            time.sleep(wait)

            elapsed = time.monotonic() - started
            if elapsed >= absolute_timeout:
                raise BoxViewError.from_exchange(
                    REQUEST_TIMEOUT_ERROR,
                    f"Request timed out after {elapsed:g} seconds while throttled "
                    f"(absolute timeout {absolute_timeout:g}s)",
                    response=response,
                    elapsed=elapsed,
                )

            if start_position is not None:
                file.seek(start_position)

    @staticmethod
    def _throttle_wait(response: requests.Response) -> float | None:
        """Seconds the server asked us to wait, or None if not throttled."""
        for header in THROTTLE_HEADERS:
            value = response.headers.get(header)
            if not value:
                continue
            try:
                seconds = float(value)
            except ValueError:
                seconds = None
            if seconds is None or not math.isfinite(seconds) or seconds <= 0:
                logger.warning(f"Ignoring unusable {header} header: {value!r}")
                continue
            return seconds
        return None

    @staticmethod
    def _http_error(response: requests.Response) -> BoxViewError:
        """Classify an HTTP error status into a BoxViewError."""
        status = response.status_code
        error_code = HTTP_ERROR_CODES.get(status)
        message = "Server error"

        if error_code is None and 500 <= status < 600:
            error_code = SERVER_ERROR

        if error_code is None:
            error_code = TRANSPORT_ERROR
            message = f"HTTP error {status}: {response.reason}"

        return BoxViewError.from_exchange(error_code, message, response=response)

    @staticmethod
    def _handle_response(response: requests.Response, raw_response: bool) -> Any:
        """Return raw bytes, or decode JSON and surface embedded API errors."""
        if raw_response:
            return response.content

        try:
            decoded = response.json()
        except ValueError:
            decoded = None

        if decoded is None or decoded is False:
            raise BoxViewError.from_exchange(
                JSON_RESPONSE_ERROR,
                "Server response is not valid JSON",
                response=response,
            )

        if (
            isinstance(decoded, dict)
            and (decoded.get("status") == "error" or decoded.get("type") == "error")
            and ("error_message" in decoded or "message" in decoded)
        ):
            message = decoded["error_message"] if "error_message" in decoded else decoded["message"]
            raise BoxViewError.from_exchange(SERVER_ERROR, str(message), response=response)

        return decoded


def _tell(file: IO[bytes] | None) -> int | None:
    """Current stream position, so a throttled upload can be rewound."""
    if file is None:
        return None
    try:
        return file.tell()
    except (AttributeError, OSError, ValueError):
        return None
