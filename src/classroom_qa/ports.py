"""Local port probing used before starting the development server."""

import socket

from loguru import logger


class PortUnavailableError(RuntimeError):
    """No free port was found in the scanned range."""


def is_port_in_use(port: int, host: str = "127.0.0.1") -> bool:
    """Return True if something already listens on ``host:port``."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.settimeout(0.5)
        return sock.connect_ex((host, port)) == 0


def find_available_port(start_port: int, attempts: int = 10, host: str = "127.0.0.1") -> int:
    """Scan upward from ``start_port`` and return the first free port.

    Raises:
        PortUnavailableError: If ``attempts`` consecutive ports are taken.
    """
    for port in range(start_port, start_port + attempts):
        if not is_port_in_use(port, host):
            return port
        logger.warning("Port in use, trying next", port=port, next_port=port + 1)

    raise PortUnavailableError(
        f"No available port found after {attempts} attempts starting at {start_port}"
    )
