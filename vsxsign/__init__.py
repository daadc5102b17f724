"""vsxsign - detached signatures for VS Code extension packages.

Signs ``.vsix`` packages and verifies them against ``.sigzip`` signature
artifacts published alongside them by an extension registry.
"""

__version__ = "0.1.0"
__author__ = "vsxsign Contributors"

from vsxsign.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
