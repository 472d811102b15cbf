from .demo import bootstrap_schema, build_tables, detect_dialect, run_demo

__all__ = ["bootstrap_schema", "build_tables", "detect_dialect", "run_demo"]
