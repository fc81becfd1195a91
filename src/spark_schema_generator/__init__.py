"""Generate Spark StructType schema JSON from document models."""

__version__ = "0.1.0"
