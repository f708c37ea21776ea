from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional, Mapping, Dict, Any


class CandidateType(str, Enum):
    HOST = "host"
    SRFLX = "srflx"
    PRFLX = "prflx"
    RELAY = "relay"


class Transport(str, Enum):
    UDP = "udp"
    TCP = "tcp"


@dataclass(frozen=True)
class IceCandidate:
    foundation: str
    component_id: int
    transport: str              # verbatim, e.g. "udp" | "UDP" | "tcp"
    priority: int
    connection_address: str     # not validated as an IP or hostname
    port: int                   # not range-checked
    candidate_type: str         # "host" | "srflx" | "prflx" | "relay" | vendor token
    rel_addr: Optional[str] = None
    rel_port: Optional[int] = None
    extensions: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # always held as a read-only copy, whatever mapping was passed in
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))

    def __reduce__(self):
        # mappingproxy can't be pickled; rebuild from a plain dict
        return (self.__class__, (
            self.foundation, self.component_id, self.transport, self.priority,
            self.connection_address, self.port, self.candidate_type,
            self.rel_addr, self.rel_port, dict(self.extensions),
        ))

    @property
    def known_type(self) -> Optional[CandidateType]:
        try:
            return CandidateType(self.candidate_type)
        except ValueError:
            return None

    @property
    def known_transport(self) -> Optional[Transport]:
        try:
            return Transport(self.transport.lower())
        except ValueError:
            return None

    def to_public(self) -> Dict[str, Any]:
        # asdict() can't deepcopy a mappingproxy
        return {
            "foundation": self.foundation,
            "component_id": self.component_id,
            "transport": self.transport,
            "priority": self.priority,
            "connection_address": self.connection_address,
            "port": self.port,
            "candidate_type": self.candidate_type,
            "rel_addr": self.rel_addr,
            "rel_port": self.rel_port,
            "extensions": dict(self.extensions),
        }
