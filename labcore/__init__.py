"""
CipherLab Shared Core
=====================

Configuration, structured logging, console, HTTP client and the result
envelope shared across all CipherLab modules.
"""

from labcore.config import CipherLabConfig, GlobalConfig, LabConfig
from labcore.models import LabResult

__all__ = ["CipherLabConfig", "GlobalConfig", "LabConfig", "LabResult"]
