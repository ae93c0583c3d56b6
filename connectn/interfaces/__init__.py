"""
connectn.interfaces - User interfaces for Connect N

This package contains the terminal renderer and the command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
