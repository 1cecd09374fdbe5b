from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import CacheConfig, DomDiffConfig

__all__ = [
    "CacheConfig",
    "DEFAULT_CONFIG_TEMPLATE",
    "DomDiffConfig",
    "load_config",
]
