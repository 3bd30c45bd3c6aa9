"""Domain layer for jobledger application.

Services are imported from their own modules; this package stays free of
eager imports so the database layer can import entities without a cycle.
"""
