"""
CipherLab Output Module
========================

Console display and report generation for CipherLab results.
"""

from cipherlab.output.console import CipherLabConsoleOutput
from cipherlab.output.report import CipherLabReportGenerator

__all__ = ["CipherLabConsoleOutput", "CipherLabReportGenerator"]
