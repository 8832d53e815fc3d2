"""
localnode - Local consensus node, mirror node and relay network on Docker
"""

__version__ = "0.1.0"

from .core import LocalNode, LocalNodeError

__all__ = ["LocalNode", "LocalNodeError"]
