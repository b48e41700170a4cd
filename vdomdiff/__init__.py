"""Diff virtual DOM trees into ordered, index-addressed patches."""

__version__ = "0.1.0"
__all__ = ["vnode", "patch", "attributes", "diff"]