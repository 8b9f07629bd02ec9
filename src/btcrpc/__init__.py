__all__ = [
    # Client
    "BitcoinClient",
    # Configuration
    "RpcConfig",
    "load_config",
    # Errors
    "RpcError",
    "TransportError",
    "ProtocolError",
    "RemoteError",
    # Wire
    "Operation",
    "Param",
    "marshal",
    "encode_request",
    "decode_response",
    "HttpTransport",
    # Catalog
    "CATALOG",
    "get_operation",
]

from .catalog import CATALOG, get_operation
from .client import BitcoinClient
from .config import RpcConfig, load_config
from .errors import ProtocolError, RemoteError, RpcError, TransportError
from .wire.envelope import decode_response, encode_request
from .wire.params import Operation, Param, marshal
from .wire.transport import HttpTransport
