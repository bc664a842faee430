"""
Типы результатов конвейера запрос -> content-type -> декодирование.

Каждый этап возвращает кортеж, первый элемент которого - статус:
числовой HTTP код или маркер ``Marker.ERROR``.

    call()          -> Outcome(status, body, headers)
    content_type()  -> TypedOutcome(status, body, content_type)
    decode()        -> Result(status, body)
"""

from enum import Enum
from typing import Any, List, NamedTuple, Tuple, Union

Header = Tuple[str, str]
HeaderList = List[Header]


class Marker(Enum):
    """Маркер неуспешного результата (вместо HTTP статуса)."""

    ERROR = "error"

    def __repr__(self) -> str:
        return f"Marker.{self.name}"


class Reason(Enum):
    """
    Причина сбоя транспорта.

    Намеренно не наследуется от str: декодер отличает причину от тела
    ответа по тому, что причина не является текстом.
    """

    NXDOMAIN = "nxdomain"
    ECONNREFUSED = "econnrefused"
    TIMEOUT = "timeout"
    SSL_ERROR = "ssl_error"
    PROXY_ERROR = "proxy_error"
    TOO_MANY_REDIRECTS = "too_many_redirects"
    INVALID_URL = "invalid_url"
    CONNECTION_ERROR = "connection_error"
    UNKNOWN = "unknown"

    def __repr__(self) -> str:
        return f"Reason.{self.name}"


Status = Union[int, Marker]


class Outcome(NamedTuple):
    """Результат транспорта: (status, raw body, header list)."""

    status: Status
    body: Any
    headers: HeaderList


class TypedOutcome(NamedTuple):
    """Outcome с заголовками, сведёнными к content type."""

    status: Status
    body: Any
    content_type: str


class Result(NamedTuple):
    """Итог конвейера: (status, decoded body)."""

    status: Status
    body: Any

    @property
    def ok(self) -> bool:
        """True для числового статуса 2xx."""
        return isinstance(self.status, int) and 200 <= self.status < 300


ERROR = Marker.ERROR


def is_error(status: Any) -> bool:
    """Проверить, что статус - маркер ошибки."""
    return status is Marker.ERROR
