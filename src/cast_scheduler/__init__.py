"""Cast Scheduler: signer authorization and scheduled cast lifecycle."""

__version__ = "0.1.0"
