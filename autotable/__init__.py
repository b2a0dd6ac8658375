"""This package resolves tabular data into a sized and styled table model."""

__app_name__ = "autotable"
__version__ = "0.1.0"
__license__ = "MIT"
