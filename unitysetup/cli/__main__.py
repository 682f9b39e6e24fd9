"""
Entry point for running unity-setup CLI as a module.

Usage: python -m unitysetup.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
