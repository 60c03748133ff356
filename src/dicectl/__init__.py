"""dicectl — dice notation parser, roller, and renderers."""

__version__ = "0.1.0"
