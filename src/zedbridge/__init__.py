"""zedbridge: Zed editor integration for game-engine project pipelines."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
