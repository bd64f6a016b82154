"""
Docbox client configuration.
"""

from dataclasses import dataclass, field
from urllib.parse import quote, urlsplit, urlunsplit

API_PREFIX = "/api/v2"
DEFAULT_PORT = 8081

_PROXY_PROTOCOLS = frozenset({"http", "https", "socks5"})


def _user_agent() -> str:
    from docbox import __version__

    return f"docbox-client/{__version__}"


@dataclass(frozen=True, kw_only=True)
class ProxyConfig:
    """
    Attributes:
        host: Proxy host name or address.
        port: Proxy port.
        protocol: Proxy scheme (http, https or socks5).
        username: Optional proxy user.
        password: Optional proxy password.
    """

    host: str
    port: int
    protocol: str = "http"
    username: str | None = None
    password: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.host:
            msg = "proxy host must not be empty"
            raise ValueError(msg)
        if not 0 < self.port < 65536:
            msg = "proxy port must be between 1 and 65535"
            raise ValueError(msg)
        if self.protocol not in _PROXY_PROTOCOLS:
            msg = f"unsupported proxy protocol: {self.protocol}"
            raise ValueError(msg)

    @property
    def url(self) -> str:
        """Proxy URL in the form httpx expects."""
        auth = ""
        if self.username:
            auth = quote(self.username, safe="")
            if self.password:
                auth += ":" + quote(self.password, safe="")
            auth += "@"
        return f"{self.protocol}://{auth}{self.host}:{self.port}"


def build_api_url(base_url: str, port: int | None = None, proxy: ProxyConfig | None = None) -> str:
    """
    Derive the API root from the configured base URL.

    A port already present in ``base_url`` always wins. Otherwise ``port`` is
    inserted when set, or ``DEFAULT_PORT`` when only a proxy is configured.

    Args:
        base_url: Base URL of the Docbox instance, e.g. ``https://docbox.example.com``.
        port: Explicit API port.
        proxy: Proxy settings, if any.

    Returns:
        Base URL with exactly one ``/api/v2`` suffix.
    """
    base = base_url.rstrip("/")
    if base.endswith(API_PREFIX):
        base = base[: -len(API_PREFIX)].rstrip("/")

    parts = urlsplit(base)
    netloc = parts.netloc
    if parts.port is None:
        if port is not None:
            netloc = f"{netloc}:{port}"
        elif proxy is not None:
            netloc = f"{netloc}:{DEFAULT_PORT}"

    base = urlunsplit((parts.scheme, netloc, parts.path, "", ""))
    return f"{base}{API_PREFIX}"


@dataclass(frozen=True, kw_only=True)
class DocboxConfig:
    """
    Attributes:
        base_url: Base URL of the Docbox instance.
        api_key: API key sent with every request.
        cloud_id: Tenant identifier for the cloud version.
        username: Basic auth user, used together with ``password``.
        password: Basic auth password, used together with ``username``.
        port: API port when ``base_url`` carries none.
        proxy: Outbound proxy settings.
        timeout: Request timeout in seconds, ``None`` to wait indefinitely.
        user_agent: User-Agent header value.
        api_url: Derived API root, computed once from the fields above.
    """

    base_url: str
    api_key: str = field(repr=False)
    cloud_id: str | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    port: int | None = None
    proxy: ProxyConfig | None = None
    timeout: float | None = 30.0
    user_agent: str = field(default_factory=_user_agent)
    api_url: str = field(init=False)

    def __post_init__(self) -> None:
        scheme = urlsplit(self.base_url).scheme
        if scheme not in ("http", "https"):
            msg = "base_url must be an http(s) URL"
            raise ValueError(msg)
        if not self.api_key:
            msg = "api_key must not be empty"
            raise ValueError(msg)
        if self.port is not None and not 0 < self.port < 65536:
            msg = "port must be between 1 and 65535"
            raise ValueError(msg)
        if self.timeout is not None and self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        object.__setattr__(self, "api_url", build_api_url(self.base_url, self.port, self.proxy))

    @property
    def has_basic_auth(self) -> bool:
        """Check if both basic auth credentials are configured."""
        return bool(self.username and self.password)
