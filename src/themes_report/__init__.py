"""Market Themes Report - sortable stock table engine and Qt host."""

__version__ = "0.1.0"
