"""
wdym - What Do You Mean?

An interactive terminal lookup tool that sends a word or sentence to a
translation/dictionary provider and renders definitions, sentence
translations and transliterations as styled terminal text.
"""

__version__ = "0.2.0"
__author__ = "wdym Contributors"
