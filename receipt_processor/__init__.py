"""Receipt Processor — score purchase receipts with loyalty points."""

__version__ = "0.1.0"
