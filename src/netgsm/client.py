from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import requests
from requests import Response

from .config import ClientConfig, build_client_config
from .url_utils import encode_component, normalize_query_string


USER_AGENT = "NetGsm REST API - Python Client"
JSON_CONTENT_TYPE = "application/json;charset=utf-8"


class NetGsmClient:
    """Client for the NetGSM REST API.

    Either pass a ``ClientConfig`` or the same options as keyword arguments::

        client = NetGsmClient(usercode="850xxxxxxx", password="secret", msgheader="ACME")
        resp = client.get("balance/list/json", {"filter": {"status": 1}})

    Every call returns the ``requests.Response``. Non-2xx statuses raise
    ``requests.HTTPError`` and transport failures raise the matching
    ``requests`` exception, both unmodified.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = build_client_config(options)
        config.validate()
        self.config = config
        self.base_url = config.base_url
        self.msgheader = config.msgheader
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        if not config.query_string_auth:
            self.session.auth = (config.usercode, config.password)

    def __enter__(self) -> NetGsmClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Response:
        return self.request("get", endpoint, None, params)

    def post(self, endpoint: str, data: Any, params: Mapping[str, Any] | None = None) -> Response:
        return self.request("post", endpoint, data, params)

    def put(self, endpoint: str, data: Any, params: Mapping[str, Any] | None = None) -> Response:
        return self.request("put", endpoint, data, params)

    def delete(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Response:
        return self.request("delete", endpoint, None, params)

    def build_url(self, endpoint: str, params: Mapping[str, Any] | None = None) -> str:
        url = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        url = url + "api/" + endpoint
        return normalize_query_string(url, params or {})

    def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Response:
        query = dict(params or {})
        if self.config.query_string_auth:
            query["usercode"] = self.config.usercode
            query["password"] = self.config.password
        url = self.build_url(endpoint, query)

        headers = {"Accept": "application/json"}
        if self.config.send_user_agent:
            headers["User-Agent"] = USER_AGENT

        options: dict[str, Any] = {
            "method": method.upper(),
            "url": url,
            "headers": headers,
            "timeout": self.config.timeout_seconds,
        }
        if data is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            options["data"] = json.dumps(data, ensure_ascii=False).encode("utf-8")

        # request_options may override anything computed above
        options.update(self.config.request_options)

        self.logger.debug(
            "netgsm request",
            extra={"extra": {"method": options["method"], "url": self._mask_url(url), "has_body": data is not None}},
        )
        resp = self.session.request(**options)
        resp.raise_for_status()
        if self.config.encoding:
            resp.encoding = self.config.encoding
        return resp

    def _mask_url(self, url: str) -> str:
        if not self.config.query_string_auth:
            return url
        return url.replace(f"password={encode_component(self.config.password)}", "password=***")
