__version__ = "0.1.0"

__all__ = [
    "__version__",
    "cli",
    "contracts",
    "core",
    "errors",
    "exit_codes",
    "manifest",
    "render",
    "validator",
]
