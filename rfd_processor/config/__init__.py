from .loader import load_config
from .models import (
    RenderConfig,
    RfdProcessorConfig,
    VCSConfig,
)

__all__ = [
    "RenderConfig",
    "RfdProcessorConfig",
    "VCSConfig",
    "load_config",
]
