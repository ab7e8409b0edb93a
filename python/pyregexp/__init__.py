# The version must be the same as the one defined in `pyproject.toml`.
__version__: str = "0.1.0"

__all__ = ["__version__"]
