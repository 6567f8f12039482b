from .loader import load_config
from .models import NodegraphConfig, TraversalConfig

__all__ = [
    "NodegraphConfig",
    "TraversalConfig",
    "load_config",
]
