"""
Маскирование чувствительных данных перед записью в лог.

Защищает токены, пароли и API ключи в query string, заголовках и
произвольных полях лог-записи.
"""

import re
from typing import Any, Iterable, List, Mapping, Tuple, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

MASK = "***REDACTED***"

# Список чувствительных полей (case-insensitive)
SENSITIVE_KEYS = {
    # Пароли
    'password', 'passwd', 'pwd', 'pass',
    # Токены
    'token', 'access_token', 'refresh_token', 'auth_token', 'api_token', 'id_token', 'jwt',
    # Секреты и ключи
    'secret', 'client_secret', 'api_secret', 'api_key', 'apikey', 'key', 'private_key',
    # Аутентификация
    'authorization', 'proxy-authorization', 'auth', 'x-api-key', 'x-auth-token',
    # Сессии и куки
    'cookie', 'set-cookie', 'session', 'session_id', 'sessionid', 'csrf_token',
}

SENSITIVE_PATTERNS = [
    # Bearer / Basic credentials внутри строк
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)', re.IGNORECASE), r'\1' + MASK),
    (re.compile(r'(Basic\s+)([A-Za-z0-9+/]+=*)', re.IGNORECASE), r'\1' + MASK),
    # key=value формы
    (re.compile(r'((?:api[_-]?key|token|password)=)([^\s&,;]+)', re.IGNORECASE), r'\1' + MASK),
]


def is_sensitive_key(key: Any) -> bool:
    return isinstance(key, str) and key.lower() in SENSITIVE_KEYS


def mask_string(value: str, mask: str = MASK) -> str:
    """Заменить известные шаблоны секретов в строке."""
    for pattern, replacement in SENSITIVE_PATTERNS:
        value = pattern.sub(replacement.replace(MASK, mask), value)
    return value


def mask_sensitive_data(data: Any, mask: str = MASK) -> Any:
    """
    Рекурсивно маскирует чувствительные данные в dict/list/tuple/str.

    Исходные данные не изменяются, возвращается копия.

    Examples:
        >>> mask_sensitive_data({"user": "alice", "password": "secret123"})
        {'user': 'alice', 'password': '***REDACTED***'}
    """
    if isinstance(data, Mapping):
        return {
            key: mask if is_sensitive_key(key) else mask_sensitive_data(value, mask)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive_data(item, mask) for item in data]
    if isinstance(data, tuple):
        # (name, value) пара заголовка
        if len(data) == 2 and is_sensitive_key(data[0]):
            return (data[0], mask)
        return tuple(mask_sensitive_data(item, mask) for item in data)
    if isinstance(data, str):
        return mask_string(data, mask)
    return data


def mask_url(url: str, mask: str = MASK) -> str:
    """
    Замаскировать чувствительные query параметры URL.

    Examples:
        >>> mask_url("http://api.local/data?user=andrew&token=abc")
        'http://api.local/data?user=andrew&token=***REDACTED***'
    """
    if not url or "?" not in url:
        return url

    parts = urlsplit(url)
    params = [
        (name, mask if is_sensitive_key(name) else value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(params, safe="*")))


def mask_headers(
    headers: Union[Mapping[str, str], Iterable[Tuple[str, str]], None],
    mask: str = MASK,
) -> List[Tuple[str, str]]:
    """Вернуть список пар заголовков с замаскированными значениями."""
    if not headers:
        return []
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    return [(name, mask if is_sensitive_key(name) else value) for name, value in pairs]
