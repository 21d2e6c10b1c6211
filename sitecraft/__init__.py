"""
Sitecraft context engine.

Picks which files of a generated website project belong in an edit
prompt, without asking a model to choose.
"""

__version__ = "0.1.0"
