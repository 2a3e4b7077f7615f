"""
Inventory ledger service - products, stock movements and movement statistics
"""

__version__ = '1.0.0'
