"""
UI Module - Terminal Interaction
================================
Prompts and console output for the interactive session.
"""

from .prompts import Prompter

__all__ = ["Prompter"]
