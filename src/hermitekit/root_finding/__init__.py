"""Root finding utilities."""

from hermitekit.root_finding.newton import newtons_method

__all__ = ["newtons_method"]
