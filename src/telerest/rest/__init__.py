"""
REST resource layer.

Keep package import side-effects to a minimum to avoid circular imports.
Do not import clients or resource modules here.
"""

__all__ = [
    "interface",
    "http_client",
    "list_resource",
    "instance_resource",
    "page",
    "client",
]
