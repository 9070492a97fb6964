"""
IntaSend Payment Gateway client for Django

Typed bindings for IntaSend checkout links, M-Pesa collections, payouts,
refunds, wallets and payment links.
"""

__version__ = "0.1.0"
