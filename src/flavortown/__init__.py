"""flavortown — browse the Flavortown store from the command line."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("flavortown")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"
