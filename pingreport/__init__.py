"""
pingreport: pings the ESXi hosts listed in an inventory export and writes a report.
"""

__version__ = "1.0.0"
