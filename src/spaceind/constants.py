from __future__ import annotations

# Testnet defaults; point these at regtest/mainnet nodes as needed.
DEFAULT_BITCOIN_RPC_URL = "http://localhost:18332"
DEFAULT_BITCOIN_RPC_USER = "test"
DEFAULT_BITCOIN_RPC_PASSWORD = "test"
DEFAULT_SPACED_RPC_URL = "http://localhost:22221"

# Block height at which the spaces protocol activated on testnet (use 0 on regtest)
TESTNET_ACTIVATION_HEIGHT = 2_865_460
