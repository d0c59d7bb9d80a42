"""
Command-line tools built on the productcode library.
"""
