"""
Standalone server entry point for the Gemini relay.

Architectural role:
- Configure process logging for operator visibility.
- Run the FastAPI relay app under uvicorn.

Interface responsibilities:
- `--host` / `--port` override `RELAY_HOST` / `RELAY_PORT`.

Side effects:
- Installs a stream handler on the root logger.
- Warns at startup when `GEMINI_API_KEY` is missing. The server still starts
  and answers relay requests with the configuration error.
"""

import argparse
import logging

import uvicorn

from gemini_relay.llm import provider_config


logger = logging.getLogger(__name__)


def configure_logging(level: str = provider_config.LOG_LEVEL) -> None:
    """Attach a timestamped stream handler to the root logger, once."""
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setLevel(level)
    formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')
    handler.setFormatter(formatter)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gemini image-analysis relay")
    parser.add_argument("--host", default=provider_config.RELAY_HOST,
                        help=f"Host to bind (default: {provider_config.RELAY_HOST})")
    parser.add_argument("-p", "--port", type=int, default=provider_config.RELAY_PORT,
                        help=f"Port to listen on (default: {provider_config.RELAY_PORT})")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    configure_logging()

    if not provider_config.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set; relay requests will fail with a configuration error")

    logger.info("Starting Gemini relay on %s:%s (model %s)", args.host, args.port, provider_config.MODEL_NAME)

    from gemini_relay.api.http_api import app
    uvicorn.run(app, host=args.host, port=args.port, workers=1)


if __name__ == "__main__":
    main()
