"""rowfeed — synthetic checklist rows for stress-testing dialog tools."""

__version__ = "0.1.0"
