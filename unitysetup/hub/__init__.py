"""
Unity Hub integration: headless command client and hub installation.
"""

from .client import HubClient
from .provisioner import HubProvisioner

__all__ = ["HubClient", "HubProvisioner"]
