"""
CLI module for message decoding.

Provides a command-line tool to decode .eml files and extract attachments.
"""

from eml_decoder.cli.decode import main as decode_main

__all__ = ["decode_main"]
