"""hledger-fmt - format the transactions section of an hledger journal in place."""

__version__ = "0.3.0"
