"""
Entry point for running unity-setup as a module.

Usage: python -m unitysetup [command] [options]
"""

from unitysetup.cli.parser import main

if __name__ == "__main__":
    main()
