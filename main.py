"""
Watermark Manager - Main Entry Point
====================================
An interactive terminal tool for watermarking and editing images.

Usage:
    python main.py

Architecture:
    - Model: watermark_manager/core/ (naming and image operations)
    - View: watermark_manager/ui/ (rich prompts)
    - Controller: watermark_manager/controller.py (session loop)

Features:
    - Text or image watermarks centred on the picture
    - One follow-up edit: brightness, contrast, black & white, invert
    - Results saved next to the source as "<name>-<operation>.<ext>"
"""

import sys

from watermark_manager.controller import main

if __name__ == "__main__":
    sys.exit(main())
