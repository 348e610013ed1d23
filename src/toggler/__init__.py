"""Toggler - Cycle the selected word through configured toggle groups"""

__version__ = "1.0.0"
__description__ = "Cycle the selected word through configured toggle groups"

__all__ = ["main", "Toggler", "resolve", "__version__"]


def __getattr__(name: str):
    """Lazy import to avoid triggering pynput initialization on package import.

    This allows importing toggler.core without requiring an X display,
    which is needed for CI/headless environments.
    """
    if name == "Toggler":
        from .main import Toggler

        return Toggler
    if name == "main":
        from .main import main

        return main
    if name == "resolve":
        from .core.resolver import resolve

        return resolve
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
