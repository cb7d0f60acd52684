"""
PORTS - Interfaces that infrastructure implements

A port defines WHAT the domain needs without specifying HOW it is done.

Subfolders:
- repositories/  -> Data persistence interfaces
"""
