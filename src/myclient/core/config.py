"""
Конфигурация myclient.

Все конфиги immutable (frozen dataclasses), поэтому один экземпляр можно
разделять между потоками.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .logging import LoggingConfig

DEFAULT_BASE_URL = "http://localhost:4000"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов транспорта.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CLIENT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class ClientConfig:
    """
    Главная конфигурация.

    Args:
        base_url: Адрес сервиса для VersionClient
        timeout: Таймауты транспорта (None = поведение requests по умолчанию)
        verify_ssl: Проверять SSL сертификаты
        allow_redirects: Следовать редиректам
        logging: Конфигурация логирования (None = только NullHandler)

    Examples:
        >>> ClientConfig()
        >>> ClientConfig.create(base_url="http://api.local:4000", timeout=10)
    """
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[TimeoutConfig] = None
    verify_ssl: bool = True
    allow_redirects: bool = True
    logging: Optional["LoggingConfig"] = None

    def __post_init__(self):
        """Валидация."""
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an absolute http(s) URL, got {self.base_url!r}")

    @classmethod
    def create(
        cls,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
        verify_ssl: bool = True,
        allow_redirects: bool = True,
        logging: Optional["LoggingConfig"] = None,
    ) -> "ClientConfig":
        """
        Создать конфиг из простых значений.

        Args:
            base_url: Адрес сервиса
            timeout: Таймаут чтения (сек)
            connect_timeout: Таймаут подключения (по умолчанию = timeout)
            verify_ssl: Проверять SSL
            allow_redirects: Следовать редиректам
            logging: LoggingConfig

        Returns:
            ClientConfig
        """
        timeout_cfg = None
        if timeout is not None or connect_timeout is not None:
            read = timeout if timeout is not None else TimeoutConfig.read
            connect = connect_timeout if connect_timeout is not None else read
            timeout_cfg = TimeoutConfig(connect=connect, read=read)

        return cls(
            base_url=(base_url or DEFAULT_BASE_URL).rstrip("/") or DEFAULT_BASE_URL,
            timeout=timeout_cfg,
            verify_ssl=verify_ssl,
            allow_redirects=allow_redirects,
            logging=logging,
        )

    def request_options(self) -> dict:
        """Параметры для requests.Session.request()."""
        options = {
            "verify": self.verify_ssl,
            "allow_redirects": self.allow_redirects,
        }
        if self.timeout is not None:
            options["timeout"] = self.timeout.as_tuple()
        return options
