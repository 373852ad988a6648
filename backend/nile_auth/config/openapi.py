from typing import Any, Dict, Mapping, Optional
import os

from ..openapi_parts.constants import DEFAULT_TITLE, DEFAULT_VERSION

TRUTHY = {'1', 'true', 'yes', 'on'}

# (config key, default) pairs read from the environment by create_app
OPENAPI_SETTINGS = (
    ('OPENAPI_TITLE', DEFAULT_TITLE),
    ('OPENAPI_VERSION', DEFAULT_VERSION),
    ('OPENAPI_DESCRIPTION', None),
    ('OPENAPI_V2_TITLE', DEFAULT_TITLE),
    ('OPENAPI_V2_VERSION', DEFAULT_VERSION),
    ('OPENAPI_V2_DESCRIPTION', None),
)


def env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def openapi_config_from_env() -> Dict[str, Any]:
    config: Dict[str, Any] = {key: os.getenv(key, default) for key, default in OPENAPI_SETTINGS}
    config['OPENAPI_CACHE'] = env_flag('OPENAPI_CACHE', True)
    return config


def metadata_kwargs(config: Mapping[str, Any], variant: Optional[str] = None) -> Dict[str, Any]:
    """Title/version/description for a document variant (None or 'V2')."""
    prefix = f'OPENAPI_{variant}_' if variant else 'OPENAPI_'
    return {
        'title': config.get(f'{prefix}TITLE'),
        'version': config.get(f'{prefix}VERSION'),
        'description': config.get(f'{prefix}DESCRIPTION'),
    }
