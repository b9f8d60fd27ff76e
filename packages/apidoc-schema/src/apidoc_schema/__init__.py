__version__ = "0.1.0"

__all__ = [
    "__version__",
    "apidoc",
    "cli",
    "core",
    "errors",
    "exit_codes",
    "schema",
]
