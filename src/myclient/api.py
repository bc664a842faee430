"""
Конвейер запроса: dispatch -> content type -> decode.

    >>> from myclient import get, post
    >>> get("http://localhost:4000")
    Result(status=200, body={'version': '0.1.0'})
    >>> get("http://localhost:4849")
    Result(status=Marker.ERROR, body=Reason.ECONNREFUSED)
    >>> post("http://localhost:4000", {"version": "2.0.0"})
    Result(status=201, body={'version': '2.0.0'})

Ни одна функция здесь не выбрасывает исключений при сбое сети или
невалидном теле ответа - результат всегда кортеж со статусом.
"""

import time
from typing import Any, Mapping, Optional, Union

from .core.codecs import FORM, JSON, XML, decode_json, decode_xml, encode_form, encode_json
from .core.exceptions import DecodeError
from .core.logging import get_logger, new_correlation_id, clear_correlation_id
from .core.outcome import ERROR, HeaderList, Outcome, Result, TypedOutcome
from .core.transport import RequestsTransport, TransportFailure, header_list
from .utils.sanitizer import mask_headers, mask_url

Headers = Union[Mapping[str, str], HeaderList, None]

DEFAULT_CONTENT_TYPE = JSON
DEFAULT_HEADERS = [("Content-Type", "application/json; charset=utf-8")]


def get(
    url: str,
    query_params: Optional[Mapping[str, Any]] = None,
    headers: Headers = None,
    *,
    transport: Optional[RequestsTransport] = None,
) -> Result:
    """
    Отправить GET запрос и декодировать ответ.

    Returns:
        (status_code, decoded_body) или (Marker.ERROR, reason)
    """
    return request(url, "get", None, query_params, headers, transport=transport)


def post(
    url: str,
    body: Any = None,
    headers: Headers = None,
    *,
    transport: Optional[RequestsTransport] = None,
) -> Result:
    """
    Отправить POST запрос и декодировать ответ.

    Тело кодируется по Content-Type из headers (по умолчанию JSON).
    """
    return request(url, "post", body, None, headers, transport=transport)


def request(
    url: str,
    method: str = "get",
    body: Any = None,
    query_params: Optional[Mapping[str, Any]] = None,
    headers: Headers = None,
    *,
    transport: Optional[RequestsTransport] = None,
) -> Result:
    """Полный конвейер: decode(content_type(call(...)))."""
    outcome = call(url, method, body, query_params, headers, transport=transport)
    return decode(content_type(outcome))


def call(
    url: str,
    method: str = "get",
    body: Any = None,
    query_params: Optional[Mapping[str, Any]] = None,
    headers: Headers = None,
    *,
    transport: Optional[RequestsTransport] = None,
) -> Outcome:
    """
    Выполнить один запрос и свести результат к Outcome.

    Args:
        url: Абсолютный URL
        method: HTTP метод
        body: Тело; кодируется по content type из headers
        query_params: Query параметры
        headers: Заголовки (пусто -> JSON Content-Type по умолчанию)
        transport: Транспорт (по умолчанию RequestsTransport())

    Returns:
        Outcome(status_code, raw_body, headers) или
        Outcome(Marker.ERROR, reason, [])
    """
    transport = transport or RequestsTransport()
    logger = get_logger()
    target = clean_url(url)
    request_headers = clean_headers(headers)
    payload = encode(body, content_type(header_list(headers)))

    new_correlation_id()
    start_time = time.time()
    try:
        logger.debug(
            "Request dispatched",
            method=method.upper(),
            url=mask_url(target),
            headers=mask_headers(request_headers),
            has_body=payload is not None,
        )

        result = transport.request(method, target, payload, request_headers, query_params)
        duration_ms = round((time.time() - start_time) * 1000, 2)

        if isinstance(result, TransportFailure):
            logger.warning(
                "Transport failure",
                method=method.upper(),
                url=mask_url(target),
                reason=result.reason.value,
                error=str(result.error) if result.error else None,
                duration_ms=duration_ms,
            )
            return Outcome(ERROR, result.reason, [])

        logger.info(
            "Response received",
            method=method.upper(),
            url=mask_url(target),
            status_code=result.status_code,
            response_size=len(result.body),
            duration_ms=duration_ms,
        )
        return Outcome(result.status_code, result.body, list(result.headers))
    finally:
        clear_correlation_id()


def get_raw(
    url: str,
    headers: Headers = None,
    *,
    transport: Optional[RequestsTransport] = None,
) -> Result:
    """
    GET без декодирования и без очистки URL/заголовков.

    Returns:
        (status_code, raw_bytes) или (Marker.ERROR, reason)
    """
    transport = transport or RequestsTransport()
    result = transport.request("get", url, None, header_list(headers), None)
    if isinstance(result, TransportFailure):
        get_logger().warning("Transport failure", url=mask_url(url), reason=result.reason.value)
        return Result(ERROR, result.reason)
    return Result(result.status_code, result.body)


def _is_outcome(value: Any) -> bool:
    # Статус - int или Marker, заголовок - всегда пара, так что их не спутать
    return isinstance(value, tuple) and len(value) == 3 and not isinstance(value[0], (tuple, list))


def content_type(headers_or_outcome: Any) -> Union[str, TypedOutcome]:
    """
    Определить content type по заголовкам.

    Для списка заголовков возвращает строку; для Outcome (status, body,
    headers) - TypedOutcome с content type вместо заголовков.

    Examples:
        >>> content_type([])
        'application/json'
        >>> content_type([("Server", "GitHub.com"), ("Content-Type", "application/xml; charset=utf-8")])
        'application/xml'
        >>> content_type((200, b"<xml />", [("Content-Type", "application/xml; charset=utf-8")]))
        TypedOutcome(status=200, body=b'<xml />', content_type='application/xml')
    """
    if _is_outcome(headers_or_outcome):
        status, body, headers = headers_or_outcome
        return TypedOutcome(status, body, content_type(headers))

    # Линейный поиск: при повторах побеждает первый заголовок
    for name, value in header_list(headers_or_outcome):
        if name == "Content-Type":
            return value.split(";")[0].strip()
    return DEFAULT_CONTENT_TYPE


def encode(data: Any, content_type: str) -> Any:
    """
    Закодировать тело запроса по его content type.

    Examples:
        >>> encode({"a": 1}, "application/json")
        '{"a":1}'
        >>> encode({"a": "o ne"}, "application/x-www-form-urlencoded")
        'a=o+ne'
        >>> encode("goop", "application/mystuff")
        'goop'
    """
    if data is None:
        return None
    if content_type == JSON:
        return encode_json(data)
    elif content_type == FORM:
        return encode_form(data)
    else:
        return data


def decode(outcome: Any) -> Result:
    """
    Декодировать тело ответа.

    Args:
        outcome: (status, body, content_type)

    Returns:
        Result(status, decoded); при ошибке разбора - (Marker.ERROR, исходное тело)

    Examples:
        >>> decode((200, '{"a": 1}', "application/json"))
        Result(status=200, body={'a': 1})
        >>> decode((200, "{goop}", "application/json"))
        Result(status=Marker.ERROR, body='{goop}')
        >>> decode((Marker.ERROR, Reason.NXDOMAIN, "application/dontcare"))
        Result(status=Marker.ERROR, body=Reason.NXDOMAIN)
    """
    status, body, ctype = outcome

    if not isinstance(body, (str, bytes, bytearray)):
        return Result(status, body)

    if not body:
        return Result(status, "")

    try:
        if ctype == JSON:
            return Result(status, decode_json(body))
        elif ctype == XML:
            return Result(status, decode_xml(body))
        else:
            return Result(status, body)
    except DecodeError as e:
        # Невалидное тело понижает даже успешный HTTP статус до ERROR
        get_logger().warning(
            "Body decode failed",
            status_code=status if isinstance(status, int) else None,
            content_type=ctype,
            error=e.message,
        )
        return Result(ERROR, body)


def clean_url(url: str) -> str:
    """
    Добавить "/" к URL, который заканчивается голым портом.

    Examples:
        >>> clean_url("http://localhost")
        'http://localhost'
        >>> clean_url("http://localhost:4000/b")
        'http://localhost:4000/b'
        >>> clean_url("http://localhost:4000")
        'http://localhost:4000/'
    """
    tail = url.rsplit(":", 1)[-1]
    if tail.isdigit():
        return url + "/"
    return url


def clean_headers(headers: Headers) -> HeaderList:
    """
    Подставить JSON Content-Type, если заголовков нет.

    Examples:
        >>> clean_headers([])
        [('Content-Type', 'application/json; charset=utf-8')]
        >>> clean_headers([("apples", "delicious")])
        [('apples', 'delicious')]
    """
    pairs = header_list(headers)
    if not pairs:
        return list(DEFAULT_HEADERS)
    return pairs
