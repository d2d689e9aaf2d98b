"""
Transaction document lookup: resolves a transaction signature to its
getTransaction document before it enters the pipeline.
"""

from backend_txinsight.lookup.rpc_lookup import (
    DocumentLookup,
    SolanaRpcLookup,
    is_valid_signature,
)

__all__ = ["DocumentLookup", "SolanaRpcLookup", "is_valid_signature"]
