"""
Default values used when an upstream field is absent.
"""

EMPTY_STRING = ""
UNASSIGNED = "Unassigned"
NONE_VALUE = "None"
UNKNOWN = "Unknown"
