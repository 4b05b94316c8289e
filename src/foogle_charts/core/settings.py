"""Environment-driven settings (.env supported)."""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

from foogle_charts.core.constants import ENV_DEFAULT_ENGINE, Engine
from foogle_charts.core.errors import ConfigError


def default_engine_from_env(load_env_file: bool = True) -> Engine | None:
    """
    Read the preferred rendering engine from FOOGLE_DEFAULT_ENGINE.

    Returns None when the variable is unset or blank, so the renderer keeps
    its own default.
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    raw = os.environ.get(ENV_DEFAULT_ENGINE, "").strip()
    if not raw:
        return None
    try:
        return Engine(raw.lower())
    except ValueError as e:
        allowed = [e_.value for e_ in Engine]
        raise ConfigError(
            f"Invalid {ENV_DEFAULT_ENGINE}='{raw}'. Expected one of: {allowed}"
        ) from e
