from .candidate import IceCandidate, CandidateType, Transport
from .errors import CandidateParseError, EmptyInput, MalformedStructure, InvalidNumber
from .parser import parse, try_parse

__all__ = [
    "parse", "try_parse",
    "IceCandidate", "CandidateType", "Transport",
    "CandidateParseError", "EmptyInput", "MalformedStructure", "InvalidNumber",
]
