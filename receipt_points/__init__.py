"""Receipt points service: submit receipts, redeem ids for points."""

__version__ = "0.1.0"
