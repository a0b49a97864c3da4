"""
CipherLab -- Classical Cipher Lab for the Kids Code Club
========================================================

Encode and decode messages with the classical ciphers taught in the
club (Caesar, Vigenère, Keyword, Atbash, Rail Fence, Pigpen, Morse) and
crack keyword ciphers with a dictionary attack ranked by an English
likelihood score.

Modules:
    - cipherlab.transforms: Pure cipher transforms
    - cipherlab.analyzers: Scoring, dictionary attack, brute force, IoC
    - cipherlab.wordlists: Candidate keyword sources
    - cipherlab.core.engine: Central orchestrator
    - cipherlab.core.models: Pydantic data models
    - cipherlab.output: Console and report output
    - cipherlab.cli: Click-based command-line interface

References:
    - Singh, S. (1999). The Code Book. Fourth Estate.
    - Friedman, W. F. (1922). The Index of Coincidence and Its
      Applications in Cryptanalysis.
"""

__version__ = "1.0.0"
__tool_name__ = "cipherlab"
