"""cenv — scaffold a new C/C++ project directory."""

__version__ = "0.1.0"
