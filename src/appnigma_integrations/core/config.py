# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..common.constants import API_KEY_ENV_VAR, DEFAULT_BASE_URL
from .errors import ConfigurationError


def _normalize_base_url(base_url: str) -> str:
    # Strip exactly one trailing slash
    return base_url[:-1] if base_url.endswith("/") else base_url


@dataclass(frozen=True)
class AppnigmaConfig:
    """
    Configuration settings for Appnigma client operations.

    Instances are immutable. Prefer :meth:`resolve` or :meth:`from_env` over
    direct construction so that the API key check and base URL normalization
    are applied.

    :param api_key: API key used in the ``Authorization`` header.
    :type api_key: str
    :param base_url: API base URL without trailing slash (default: ``https://integrations.appnigma.ai``).
    :type base_url: str
    :param debug: Whether to log redacted request and response details (default: False).
    :type debug: bool
    :param logger_name: Name of the :mod:`logging` logger used for debug output.
    :type logger_name: str
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    debug: bool = False
    logger_name: str = "appnigma_integrations"

    @classmethod
    def resolve(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        debug: bool = False,
        *,
        fallback_api_key: Optional[str] = None,
    ) -> "AppnigmaConfig":
        """
        Build a configuration from explicit values and one fallback key.

        The explicit ``api_key`` wins; otherwise ``fallback_api_key`` is used.

        :raises ConfigurationError: If neither source yields a non-empty key.
        """
        key = api_key or fallback_api_key or ""
        if not key:
            raise ConfigurationError(
                "API key is required. Provide it in the constructor or set "
                f"{API_KEY_ENV_VAR} environment variable."
            )
        return cls(
            api_key=key,
            base_url=_normalize_base_url(base_url or DEFAULT_BASE_URL),
            debug=bool(debug),
        )

    @classmethod
    def from_env(
        cls,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        debug: bool = False,
        *,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "AppnigmaConfig":
        """
        Create a configuration, falling back to ``APPNIGMA_API_KEY`` for the key.

        :param environ: Mapping to read the fallback key from. Defaults to :data:`os.environ`.
        :type environ: ~typing.Mapping[str, str] or None
        :return: Resolved configuration.
        :rtype: ~appnigma_integrations.core.config.AppnigmaConfig
        :raises ConfigurationError: If no API key is available.
        """
        env = os.environ if environ is None else environ
        return cls.resolve(
            api_key,
            base_url,
            debug,
            fallback_api_key=env.get(API_KEY_ENV_VAR),
        )
