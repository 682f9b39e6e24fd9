"""
Unity editor lookup and installation, including optional modules.
"""

from .locator import EditorLocator
from .modules import ModuleProvisioner
from .provisioner import EditorProvisioner

__all__ = ["EditorLocator", "EditorProvisioner", "ModuleProvisioner"]
