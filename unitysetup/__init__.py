"""
unity-setup: provision a pinned Unity editor on CI machines.

Resolves the required editor version, installs Unity Hub if needed, and drives
the hub through its headless command line to install the editor and modules.
"""
