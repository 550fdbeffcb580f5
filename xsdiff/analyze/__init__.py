"""
Schema analysis: descriptor formatting, model building and model comparison.
"""

from xsdiff.analyze.diff import ComparisonRecord, compare_models, summarize_records
from xsdiff.analyze.schema import SchemaAnalyzer, SchemaModel, TypeDescriptor, build_schema_model

__all__ = [
    "ComparisonRecord",
    "SchemaAnalyzer",
    "SchemaModel",
    "TypeDescriptor",
    "build_schema_model",
    "compare_models",
    "summarize_records",
]
