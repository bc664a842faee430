"""
HTTP транспорт на базе requests.

Транспорт делает ровно один запрос и никогда не выбрасывает исключений
requests: результат - либо TransportResponse, либо TransportFailure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

from .config import ClientConfig
from .exceptions import classify_requests_exception
from .outcome import HeaderList, Reason


@dataclass(frozen=True)
class TransportResponse:
    """Успешный ответ: статус, сырое тело и заголовки в порядке получения."""
    status_code: int
    body: bytes
    headers: HeaderList = field(default_factory=list)


@dataclass(frozen=True)
class TransportFailure:
    """Сбой транспорта: классифицированная причина и исходное исключение."""
    reason: Reason
    error: Optional[BaseException] = field(default=None, compare=False)


TransportResult = Union[TransportResponse, TransportFailure]


def response_headers(response: requests.Response) -> HeaderList:
    """
    Извлечь заголовки ответа списком пар.

    urllib3 хранит повторяющиеся заголовки по отдельности, поэтому
    сначала берём raw заголовки; CaseInsensitiveDict requests склеивает
    дубликаты и используется только как запасной вариант.
    """
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "items"):
        return [(str(name), str(value)) for name, value in raw_headers.items()]
    return [(str(name), str(value)) for name, value in response.headers.items()]


def _headers_for_requests(headers: Union[Mapping[str, str], HeaderList, None]) -> Dict[str, str]:
    # requests принимает только mapping; при дубликатах побеждает последний
    if not headers:
        return {}
    if isinstance(headers, Mapping):
        return dict(headers)
    return {name: value for name, value in headers}


class RequestsTransport:
    """
    Транспорт, выполняющий один запрос через requests.Session.

    Args:
        config: ClientConfig (таймауты, SSL, редиректы)
        session: Готовая сессия (иначе создаётся новая на каждый запрос)

    Example:
        >>> transport = RequestsTransport()
        >>> result = transport.request("GET", "http://localhost:4000/")
        >>> isinstance(result, (TransportResponse, TransportFailure))
        True
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ClientConfig()
        self._session = session

    def request(
        self,
        method: str,
        url: str,
        body: Any = None,
        headers: Union[Mapping[str, str], HeaderList, None] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> TransportResult:
        """
        Выполнить запрос.

        Args:
            method: HTTP метод (регистр не важен)
            url: Абсолютный URL
            body: Уже закодированное тело (str/bytes) или None
            headers: Заголовки запроса
            params: Query параметры

        Returns:
            TransportResponse или TransportFailure
        """
        try:
            if self._session is not None:
                response = self._send(self._session, method, url, body, headers, params)
            else:
                with requests.Session() as session:
                    response = self._send(session, method, url, body, headers, params)
        except requests.exceptions.RequestException as e:
            return TransportFailure(reason=classify_requests_exception(e), error=e)

        return TransportResponse(
            status_code=response.status_code,
            body=response.content,
            headers=response_headers(response),
        )

    def _send(self, session, method, url, body, headers, params) -> requests.Response:
        return session.request(
            method=method.upper(),
            url=url,
            data=body,
            headers=_headers_for_requests(headers),
            params=dict(params) if params else None,
            **self.config.request_options()
        )


def header_list(headers: Union[Mapping[str, str], HeaderList, None]) -> List:
    """Нормализовать заголовки к списку пар, сохраняя порядок."""
    if not headers:
        return []
    if isinstance(headers, Mapping):
        return list(headers.items())
    return [(name, value) for name, value in headers]
