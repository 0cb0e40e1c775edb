"""Runtime settings.

Settings come from explicit arguments or the environment:

``PRODCAL_USER_AGENT``
    ``User-Agent`` header sent with every request.
``PRODCAL_TIMEOUT``
    Socket timeout in seconds. Unset or empty means no timeout.
``PRODCAL_LOCALE``
    Month-naming convention (``ru`` or ``en``).
``PRODCAL_CONSULTANT_URL``, ``PRODCAL_HEADHUNTER_URL``, ``PRODCAL_XMLCALENDAR_URL``
    Replace a provider's default base URL. A ``base_url`` carried by the
    request still takes precedence.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .models import Provider
from .months import DEFAULT_LOCALE, MonthNaming, get_naming
from .transport import DEFAULT_USER_AGENT, Transport, UrllibTransport

ENV_PREFIX = "PRODCAL_"


@dataclass(frozen=True, slots=True)
class Settings:
    """Validated prodcal settings.

    Attributes:
        user_agent: ``User-Agent`` header value.
        timeout: Socket timeout in seconds, or ``None``.
        locale: Month-naming locale.
        base_urls: Per-provider replacements for the default base URL.
    """

    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = None
    locale: str = DEFAULT_LOCALE
    base_urls: Mapping[Provider, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Fail early on an unknown locale
        get_naming(self.locale)
        if self.timeout is not None and self.timeout <= 0:
            msg = f"Timeout must be positive, got {self.timeout}"
            raise ValueError(msg)
        for provider, url in self.base_urls.items():
            if not isinstance(url, str) or not url.strip():
                msg = f"Base URL for {Provider(provider).value} must not be empty"
                raise ValueError(msg)

    @property
    def naming(self) -> MonthNaming:
        """The configured month-naming convention."""
        return get_naming(self.locale)

    def base_url_for(self, provider: Provider) -> str | None:
        """Return the configured base URL override for *provider*, if any."""
        return self.base_urls.get(provider)

    def make_transport(self) -> Transport:
        """Create the default transport for these settings."""
        return UrllibTransport(user_agent=self.user_agent, timeout=self.timeout)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from environment variables.

    Args:
        environ: Mapping to read instead of :data:`os.environ`.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    timeout_raw = env.get(f"{ENV_PREFIX}TIMEOUT", "").strip()
    timeout: float | None = None
    if timeout_raw:
        try:
            timeout = float(timeout_raw)
        except ValueError:
            msg = f"{ENV_PREFIX}TIMEOUT must be a number of seconds, got {timeout_raw!r}"
            raise ValueError(msg) from None

    base_urls: dict[Provider, str] = {}
    for provider in Provider:
        if provider is Provider.UNDEFINED:
            continue
        url = env.get(f"{ENV_PREFIX}{provider.name}_URL", "").strip()
        if url:
            base_urls[provider] = url

    return Settings(
        user_agent=env.get(f"{ENV_PREFIX}USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
        timeout=timeout,
        locale=env.get(f"{ENV_PREFIX}LOCALE", "").strip() or DEFAULT_LOCALE,
        base_urls=base_urls,
    )
