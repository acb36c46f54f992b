"""
Account Ledger - Source Package

A single-user, in-process account ledger driven by a text menu.

DESIGN PRINCIPLES:
1. One balance, owned by one store
2. Business rules live in the router, never in the store
3. Bad input is normalized, not fatal
4. Every outcome is reported as a message
5. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Account Ledger Team"
