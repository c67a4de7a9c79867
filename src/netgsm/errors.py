from __future__ import annotations

from requests import RequestException


class NetGsmError(Exception):
    pass


class InvalidConfiguration(NetGsmError, ValueError):
    pass


class MissingCredentials(InvalidConfiguration):
    pass


class InvalidURL(NetGsmError, ValueError):
    pass


class UnsupportedParamValue(NetGsmError, TypeError):
    pass


# Transport failures are raised by requests as-is; this name only gives callers one thing to catch.
TransportError = RequestException
