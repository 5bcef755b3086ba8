"""Lending Library - Core Application Package

This package contains the core application modules including:
- Book and loan records (book.py, loan.py)
- Inventory management (catalog.py)
- Issue/return and fine logic (ledger.py)
- Library facade with sample data (library.py)
- CLI interface (main.py)
"""
