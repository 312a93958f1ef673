"""
Example 01: sign and send an EGLD transfer on devnet.

Usage:
    MX_SEED_HEX=<32-byte hex seed> python examples/01_transfer.py erd1...receiver
"""

import logging
import os
import sys

from multiversx_client import (
    Address,
    Ed25519Signer,
    MultiversXError,
    ProxyProvider,
    Transaction,
)


def main() -> int:
    logging.basicConfig(level=logging.INFO)

    if len(sys.argv) != 2 or "MX_SEED_HEX" not in os.environ:
        print(__doc__)
        return 1

    signer = Ed25519Signer.from_hex(os.environ["MX_SEED_HEX"])
    receiver = Address.from_bech32(sys.argv[1])

    with ProxyProvider("devnet") as provider:
        try:
            config = provider.get_network_config()
            account = provider.get_account(signer.address())

            tx = Transaction(
                config,
                nonce=account.nonce,
                value=10**16,
                sender=signer.address(),
                receiver=receiver,
                data="hello",
            )
            tx.gas_limit = config.min_gas_limit + config.gas_per_data_byte * len(tx.data.encode("utf-8"))

            tx.sign(signer)
            local_hash = tx.compute_hash()
            tx.send(provider)
        except MultiversXError as e:
            print(f"Failed: {e}")
            return 1

    print(f"Local hash:  {local_hash}")
    print(f"Server hash: {tx.tx_hash}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
