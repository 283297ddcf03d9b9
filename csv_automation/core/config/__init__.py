"""
Pipeline configuration loading.
"""

from .loader import ENV_PREFIX, PipelineConfigLoader

__all__ = [
    "ENV_PREFIX",
    "PipelineConfigLoader",
]
