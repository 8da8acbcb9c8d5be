__version__ = "0.1.0"

PACKAGE_NAME = "indexinfo"

__all__ = [
    "__version__",
    "PACKAGE_NAME",
    "cli",
    "emitter",
    "errors",
    "exit_codes",
    "indexer",
    "linesource",
    "logging",
    "parser",
    "registry",
    "walker",
]
