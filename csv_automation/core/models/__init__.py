"""
Core data models for the CSV automation pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .output_file import OutputFile
from .pipeline_config import PipelineConfig
from .record import Record, utc_now_iso
from .run_context import PipelineStage, RunContext
from .run_report import RunReport

__all__ = [
    "Record",
    "utc_now_iso",
    "PipelineConfig",
    "OutputFile",
    "PipelineStage",
    "RunContext",
    "RunReport",
]
