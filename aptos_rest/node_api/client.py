"""
Thin async HTTP client for the Aptos node REST API.

The client turns a request descriptor into a response envelope, maps
non-success envelopes and unusable bodies to the package's error taxonomy, and
optionally validates the decoded body against the shape expected for the
endpoint. It performs no retries; that policy belongs to the caller.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from aptos_rest import __version__
from aptos_rest.config import AptosConfig, ClientConfig
from aptos_rest.errors import ApiError, ParseError, TransportError
from aptos_rest.node_api.request import AptosRequest, AptosResponse, Method, ParamValue, stringify_param

logger = logging.getLogger(__name__)

CLIENT_HEADER = "x-aptos-client"
CLIENT_HEADER_VALUE = f"aptos-rest-core/{__version__}"


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


class NodeApiClient:
    """Async client shared by the domain APIs of one connection."""

    def __init__(
        self,
        config: AptosConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or AptosConfig()
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "NodeApiClient":
        return self

    async def __aexit__(self, *_exc_info) -> None:
        await self.aclose()

    def build_request(
        self,
        method: Method = "GET",
        *,
        endpoint: Optional[str] = None,
        params: Optional[Mapping[str, ParamValue]] = None,
        body: Any = None,
        content_type: Optional[str] = None,
        origin_method: Optional[str] = None,
        overrides: Optional[ClientConfig] = None,
    ) -> AptosRequest:
        """Assemble a descriptor against the configured network."""
        return AptosRequest(
            url=self.config.network,
            method=method,
            endpoint=endpoint,
            body=body,
            content_type=content_type,
            params=params or {},
            origin_method=origin_method,
            overrides=self.config.client_config.merged(overrides),
        )

    def _build_headers(self, request: AptosRequest) -> Dict[str, str]:
        headers: Dict[str, str] = {CLIENT_HEADER: CLIENT_HEADER_VALUE}
        content_type = request.effective_content_type()
        if content_type:
            headers["content-type"] = content_type
        overrides = request.overrides
        if overrides.token:
            headers["authorization"] = f"Bearer {overrides.token}"
        for name, value in overrides.headers.items():
            headers[name.lower()] = stringify_param(value)
        return headers

    async def invoke(self, request: AptosRequest) -> AptosResponse:
        """Issue ``request`` and wrap whatever came back, whatever its status."""
        client = await self._get_client()
        body_kwargs: Dict[str, Any] = {}
        if isinstance(request.body, (bytes, bytearray)):
            body_kwargs["content"] = bytes(request.body)
        elif request.body is not None:
            body_kwargs["json"] = request.body

        url = request.full_url()
        logger.debug("%s %s origin=%s", request.method, url, request.origin_method)
        try:
            outbound = client.build_request(
                request.method, url, headers=self._build_headers(request), **body_kwargs
            )
            if not request.overrides.forwards_credentials:
                outbound.headers.pop("cookie", None)
            response = await client.send(outbound)
        except httpx.RequestError as exc:
            logger.warning("Aptos node unreachable for %s (origin=%s)", url, request.origin_method)
            raise TransportError(f"Node unreachable: {exc}", request=request) from exc

        text = response.text
        try:
            data = response.json()
            json_ok = True
        except ValueError:
            data = None
            json_ok = False

        return AptosResponse(
            status=response.status_code,
            status_text=response.reason_phrase,
            data=data,
            text=text,
            json_ok=json_ok,
            url=str(response.url),
            headers=response.headers,
            request=request,
        )

    def check_response(self, response: AptosResponse) -> AptosResponse:
        """Raise ApiError / ParseError for unusable envelopes, else pass through."""
        if not response.ok:
            body = response.data if response.json_ok else response.text
            message: Optional[str] = None
            error_code: Optional[str] = None
            vm_error_code: Optional[int] = None
            if isinstance(body, dict):
                raw_message = body.get("message")
                if isinstance(raw_message, str):
                    message = raw_message
                raw_code = body.get("error_code")
                if isinstance(raw_code, str):
                    error_code = raw_code
                raw_vm_code = body.get("vm_error_code")
                if isinstance(raw_vm_code, int):
                    vm_error_code = raw_vm_code
            logger.debug(
                "Node returned %s for %s",
                response.status,
                response.url,
                extra={"origin_method": response.request.origin_method, "status": response.status},
            )
            raise ApiError(
                message or response.status_text or f"HTTP {response.status}",
                status=response.status,
                status_text=response.status_text,
                data=body,
                url=response.url,
                request=response.request,
                error_code=error_code,
                vm_error_code=vm_error_code,
            )

        if not response.json_ok:
            raise ParseError(
                "Unexpected non-JSON response from node.",
                status=response.status,
                raw=response.text,
                request=response.request,
            )
        return response

    def decode(self, response: AptosResponse, shape: Any = None) -> Any:
        """Validate the envelope body against ``shape`` (any pydantic-compatible type)."""
        if shape is None:
            return response.data
        try:
            return _adapter(shape).validate_python(response.data)
        except ValidationError as exc:
            raise ParseError(
                f"Unexpected response shape from node: {exc.error_count()} validation error(s)",
                status=response.status,
                raw=response.text,
                request=response.request,
            ) from exc

    async def request(self, request: AptosRequest, shape: Any = None) -> Any:
        response = self.check_response(await self.invoke(request))
        return self.decode(response, shape)

    async def get(
        self,
        *,
        endpoint: Optional[str] = None,
        params: Optional[Mapping[str, ParamValue]] = None,
        origin_method: Optional[str] = None,
        overrides: Optional[ClientConfig] = None,
        shape: Any = None,
    ) -> Any:
        request = self.build_request(
            "GET",
            endpoint=endpoint,
            params=params,
            origin_method=origin_method,
            overrides=overrides,
        )
        return await self.request(request, shape)

    async def post(
        self,
        *,
        endpoint: Optional[str] = None,
        body: Any = None,
        content_type: Optional[str] = None,
        params: Optional[Mapping[str, ParamValue]] = None,
        origin_method: Optional[str] = None,
        overrides: Optional[ClientConfig] = None,
        shape: Any = None,
    ) -> Any:
        request = self.build_request(
            "POST",
            endpoint=endpoint,
            params=params,
            body=body,
            content_type=content_type,
            origin_method=origin_method,
            overrides=overrides,
        )
        return await self.request(request, shape)
