"""
API server package: HTTP interface over the transaction pipeline.

Validates requests, delegates to TransactionPipeline and maps classified
errors to JSON error responses.
"""
