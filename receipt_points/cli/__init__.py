"""Unified command-line interface for the receipt points service.

Usage:
    receipt-points serve [--host] [--port] [--config]
    receipt-points points <receipt.json>
    receipt-points points <receipt.json> --breakdown
"""
