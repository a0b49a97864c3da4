"""
CipherLab Module Entry Point
=============================

Allows running the CipherLab CLI via: python -m cipherlab
"""

from cipherlab.cli import main

if __name__ == "__main__":
    main()
