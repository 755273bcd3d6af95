"""memberhub: community membership service with role-based authorization."""

__version__ = "1.0.0"
