"""Клиент version-сервиса поверх конвейера api.get/api.post."""

from typing import Any, Optional

from . import api
from .core.config import ClientConfig
from .core.env_config import load_from_env
from .core.exceptions import UnexpectedResponseError
from .core.logging import configure_logging
from .core.outcome import Result
from .core.transport import RequestsTransport


class VersionClient:
    """
    Читает и устанавливает версию сервиса.

    Сервис отвечает на GET ``{"version": "..."}`` со статусом 200 и на
    POST с тем же телом - статусом 201.

    Args:
        base_url: Адрес сервиса (по умолчанию config.base_url)
        config: ClientConfig
        transport: Транспорт (по умолчанию RequestsTransport(config))

    Example:
        >>> client = VersionClient("http://localhost:4000")
        >>> client.current_version()
        '0.1.0'
        >>> client.next_version("1.2.3")
        '1.2.3'
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[RequestsTransport] = None,
    ):
        self.config = config or ClientConfig.create(base_url=base_url)
        self.base_url = (base_url or self.config.base_url).rstrip("/")
        self._transport = transport or RequestsTransport(self.config)

        if self.config.logging is not None:
            configure_logging(self.config.logging)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides) -> "VersionClient":
        """Создать клиент из MYCLIENT_* переменных окружения."""
        return cls(config=load_from_env(env_file=env_file, **overrides))

    def current_version(self) -> str:
        """
        Получить текущую версию.

        Raises:
            UnexpectedResponseError: Ответ не (200, {"version": ...})
        """
        result = api.get(self.base_url, transport=self._transport)
        return self._version_from(result, expected_status=200)

    def next_version(self, version: str) -> str:
        """
        Установить следующую версию.

        Raises:
            UnexpectedResponseError: Ответ не (201, {"version": ...})
        """
        result = api.post(self.base_url, {"version": version}, transport=self._transport)
        return self._version_from(result, expected_status=201)

    @staticmethod
    def _version_from(result: Result, expected_status: int) -> Any:
        status, body = result
        if status == expected_status and isinstance(body, dict) and "version" in body:
            return body["version"]
        raise UnexpectedResponseError(
            status, body, expected=f'({expected_status}, {{"version": ...}})'
        )
