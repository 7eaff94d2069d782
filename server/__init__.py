"""Language server for include references in grlx documents."""

__version__ = "0.1.0"

from .core import GrlxLanguageServer, create_server
from .service import IncludeService

__all__ = ["GrlxLanguageServer", "create_server", "IncludeService", "__version__"]
