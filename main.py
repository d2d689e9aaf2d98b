"""
Main entrypoint: TxInsight FastAPI server.

Env: API_PROVIDER and provider credentials (ELYN_API_KEY / ELYN_API_ENDPOINT or
OPENAI_API_KEY), SOLANA_RPC_URL, API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn backend_txinsight.api_server.app:app --host 0.0.0.0 --port 8000
"""

import uvicorn

# Configure structured JSON logging (after .env is loaded) before other imports that may log
from backend_txinsight.txinsight_logging import get_logger
from backend_txinsight.config import env

logger = get_logger("main")


def main() -> None:
    api_host = env.get_api_host()
    api_port = env.get_api_port()

    from backend_txinsight.api_server.app import app

    logger.info("main_api_starting", host=api_host, port=api_port)
    uvicorn.run(app, host=api_host, port=api_port, log_level="info")


if __name__ == "__main__":
    main()
