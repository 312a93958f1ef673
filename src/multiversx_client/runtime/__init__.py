"""
Runtime support: error model and account addresses.
"""

from .errors import *
from .address import Address, HRP, PUBKEY_LENGTH
