"""domaddr: parse, validate, and compose ``host[:port]`` domain names."""

from domaddr.domain.names import Domain, HostPort, parse_host_port
from domaddr.domain.port import Port

__version__ = "0.1.0"

__all__ = ["Domain", "HostPort", "Port", "__version__", "parse_host_port"]
