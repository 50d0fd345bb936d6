"""netpay - Philippine take-home pay estimator."""

__version__ = "0.3.0"
