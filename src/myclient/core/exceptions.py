"""
Иерархия исключений myclient.

Конвейер запросов не выбрасывает исключений вызывающему коду: сбои
транспорта и декодирования возвращаются как ``(Marker.ERROR, ...)``.
Исключения здесь используются внутри (DecodeError), вспомогательными
клиентами (UnexpectedResponseError) и загрузчиками конфигурации.
"""

from typing import Any, Optional

import requests

from .outcome import Reason

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MyclientException(Exception):
    """Базовое исключение myclient."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# PAYLOAD
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class DecodeError(MyclientException):
    """
    Тело ответа не разбирается для своего content type.

    Args:
        content_type: Content type, которым пытались декодировать
        body: Исходное тело ответа
        message: Дополнительное сообщение
    """

    def __init__(self, content_type: str, body: Any, message: str = ""):
        self.content_type = content_type
        self.body = body

        msg = f"Cannot decode {content_type} body"
        if message:
            msg += f": {message}"

        super().__init__(msg)

class UnexpectedResponseError(MyclientException):
    """
    Ответ сервиса не совпал с ожидаемой формой.

    Args:
        status: Статус из Result (код или Marker.ERROR)
        body: Декодированное тело или причина сбоя
        expected: Описание ожидаемого ответа
    """

    def __init__(self, status: Any, body: Any, expected: str = ""):
        self.status = status
        self.body = body

        msg = f"Unexpected response {status!r}: {body!r}"
        if expected:
            msg += f" (expected {expected})"

        super().__init__(msg)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ConfigurationError(MyclientException):
    """Ошибка конфигурации."""
    pass

class ConfigValidationError(ConfigurationError):
    """Файл конфигурации невалиден."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

_DNS_MARKERS = (
    "nameresolutionerror",
    "failed to resolve",
    "name or service not known",
    "nodename nor servname",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "getaddrinfo failed",
)

_REFUSED_MARKERS = (
    "connection refused",
    "connectionrefusederror",
    "actively refused",
)


def _classify_connection_error(exc: Exception) -> Reason:
    """Разобрать ConnectionError по тексту цепочки исключений urllib3."""
    text = str(exc).lower()
    cause: Optional[BaseException] = exc.__cause__ or exc.__context__
    while cause is not None:
        text += " " + type(cause).__name__.lower() + " " + str(cause).lower()
        cause = cause.__cause__ or cause.__context__

    if any(marker in text for marker in _DNS_MARKERS):
        return Reason.NXDOMAIN
    if any(marker in text for marker in _REFUSED_MARKERS):
        return Reason.ECONNREFUSED
    return Reason.CONNECTION_ERROR


def classify_requests_exception(exc: Exception) -> Reason:
    """
    Свести исключение requests к причине сбоя транспорта.

    Args:
        exc: Исключение из requests

    Returns:
        Reason для кортежа (Marker.ERROR, reason)

    Examples:
        >>> classify_requests_exception(requests.exceptions.ConnectTimeout())
        Reason.TIMEOUT
        >>> classify_requests_exception(requests.exceptions.InvalidSchema("ppq://url.com"))
        Reason.INVALID_URL
    """

    if isinstance(exc, requests.exceptions.Timeout):
        return Reason.TIMEOUT

    elif isinstance(exc, requests.exceptions.ProxyError):
        return Reason.PROXY_ERROR

    elif isinstance(exc, requests.exceptions.SSLError):
        return Reason.SSL_ERROR

    elif isinstance(exc, requests.exceptions.ConnectionError):
        return _classify_connection_error(exc)

    elif isinstance(exc, requests.exceptions.TooManyRedirects):
        return Reason.TOO_MANY_REDIRECTS

    elif isinstance(exc, (
        requests.exceptions.InvalidSchema,
        requests.exceptions.MissingSchema,
        requests.exceptions.InvalidURL,
    )):
        return Reason.INVALID_URL

    else:
        return Reason.UNKNOWN
