"""leaksniff package metadata."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("leaksniff")
except PackageNotFoundError:
    __version__ = "0.3.0"
