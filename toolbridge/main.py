import logging
import sys
import threading

from toolbridge.config import Settings, get_bridge_config, load_host_config, settings
from toolbridge.integration import get_host_bridge, initialize_bridge_for_host, shutdown_bridge_server
from toolbridge.tools import get_tool_registry

logger = logging.getLogger("toolbridge")


def setup_logging(source: Settings = settings) -> None:
    """Configure root logging for the standalone host."""
    level = logging.DEBUG if source.DEBUG else getattr(logging, source.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> int:
    """Run the bridge as a standalone host process until it is signalled."""
    setup_logging()

    config = load_host_config()
    if not get_bridge_config(config).enabled:
        logger.info("🛑 Bridge disabled (set BRIDGE_ENABLED=true to serve)")
        return 0

    server = initialize_bridge_for_host(config, get_tool_registry())
    if server is not None and not server.is_listening:
        get_host_bridge().start()

    logger.info(f"🚀 Tool Bridge serving on {server.url}, press Ctrl+C to exit")
    try:
        # Woken by SystemExit/KeyboardInterrupt from the signal handlers
        threading.Event().wait()
    except (KeyboardInterrupt, SystemExit):
        pass
    finally:
        shutdown_bridge_server()

    return 0


if __name__ == "__main__":
    sys.exit(main())
