"""Print text and files on a networked ESC/POS receipt printer."""

__version__ = "0.1.0"