"""One-class-per-file model implementations; import from ``ai_udf.base.models``."""
