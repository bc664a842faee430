"""
Кодеки тела запроса и ответа.

Кодирование выбирается по content type запроса, декодирование - по
content type ответа. Декодеры сообщают об ошибке через DecodeError;
превращение её в кортеж (Marker.ERROR, body) делает api.decode().
"""

import json
import sys
import xml.etree.ElementTree as ET
from typing import Any, Iterable, Mapping, Tuple, Union
from urllib.parse import urlencode

from .exceptions import DecodeError

JSON = "application/json"
XML = "application/xml"
FORM = "application/x-www-form-urlencoded"

Body = Union[str, bytes, bytearray]


def encode_json(data: Any) -> Any:
    """
    Сериализовать тело в компактный JSON.

    Уже готовые байты отправляются как есть.

    Examples:
        >>> encode_json({"a": 1})
        '{"a":1}'
    """
    if isinstance(data, (bytes, bytearray)):
        return data
    return json.dumps(data, separators=(",", ":"))


def encode_form(data: Any) -> Any:
    """
    Закодировать mapping как application/x-www-form-urlencoded.

    Examples:
        >>> encode_form({"a": "o ne"})
        'a=o+ne'
    """
    if not isinstance(data, Mapping):
        return data
    return urlencode(data, doseq=True)


def _symbol_keys(pairs: Iterable[Tuple[str, Any]]) -> dict:
    # Interned keys are shared across all decoded documents
    return {sys.intern(key): value for key, value in pairs}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def decode_json(body: Body) -> Any:
    """
    Разобрать JSON тело.

    NaN, Infinity и -Infinity не являются JSON и отклоняются.

    Raises:
        DecodeError: Невалидный JSON, кодировка или слишком глубокая вложенность
    """
    try:
        return json.loads(body, object_pairs_hook=_symbol_keys, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError и UnicodeDecodeError - оба ValueError
        raise DecodeError(JSON, body, str(e)) from e


def decode_xml(body: Body) -> ET.Element:
    """
    Разобрать XML тело в ElementTree.Element.

    Raises:
        DecodeError: Документ не является well-formed XML или объявляет
            неизвестную кодировку
    """
    try:
        return ET.fromstring(body)
    except (ET.ParseError, LookupError, ValueError) as e:
        raise DecodeError(XML, body, str(e)) from e
