# candidateparser/parser.py
from __future__ import annotations
import re
from typing import Dict, List, Optional

from .candidate import IceCandidate
from .errors import CandidateParseError, EmptyInput, MalformedStructure, InvalidNumber

PREFIX = "candidate:"
TYP = "typ"
RADDR = "raddr"
RPORT = "rport"

# foundation comp transport priority addr port "typ" cand-type
MIN_TOKENS = 8

_digits_re = re.compile(r"[0-9]+")
_ws_re = re.compile(r"[ \t]+")

# component-id and priority are 64-bit
MAX_U64 = 2**64 - 1


def _number(tokens: List[str], idx: int, field: str, line: str, limit: Optional[int] = None) -> int:
    v = tokens[idx]
    if not _digits_re.fullmatch(v):
        raise InvalidNumber(field, v, line)
    n = int(v)
    if limit is not None and n > limit:
        raise InvalidNumber(field, v, line, reason="is out of range")
    return n


def _tokenize(line: str) -> List[str]:
    # SP and HTAB only; other whitespace belongs to the token
    text = line.rstrip("\r\n").strip(" \t")
    if text.startswith(PREFIX):
        text = text[len(PREFIX):].lstrip(" \t")
    return _ws_re.split(text) if text else []


def parse(line: str) -> IceCandidate:
    """
    Parse one SDP candidate-attribute line into an IceCandidate.

    Accepts an optional leading "candidate:" and a trailing CRLF/LF.
    Raises EmptyInput, MalformedStructure or InvalidNumber; nothing is
    defaulted, so a returned record always has every required field.
    """
    tokens = _tokenize(line)
    if not tokens:
        raise EmptyInput("candidate line is empty", line)
    if len(tokens) < MIN_TOKENS:
        raise MalformedStructure(
            f"expected at least {MIN_TOKENS} tokens, got {len(tokens)}", line
        )

    component_id = _number(tokens, 1, "component_id", line, MAX_U64)
    priority = _number(tokens, 3, "priority", line, MAX_U64)
    port = _number(tokens, 5, "port", line)

    if tokens[6] != TYP:
        raise MalformedStructure(f"expected {TYP!r} at token 7, got {tokens[6]!r}", line)

    rest = tokens[MIN_TOKENS:]
    if len(rest) % 2:
        raise MalformedStructure(f"extension {rest[-1]!r} has no value", line)

    rel_addr: Optional[str] = None
    rel_port: Optional[int] = None
    extensions: Dict[str, str] = {}
    for i in range(0, len(rest), 2):
        name, value = rest[i], rest[i + 1]
        if name == RADDR:
            rel_addr = value
        elif name == RPORT:
            rel_port = _number(rest, i + 1, "rel_port", line)
        else:
            extensions[name] = value  # last one wins

    return IceCandidate(
        foundation=tokens[0],
        component_id=component_id,
        transport=tokens[2],
        priority=priority,
        connection_address=tokens[4],
        port=port,
        candidate_type=tokens[7],
        rel_addr=rel_addr,
        rel_port=rel_port,
        extensions=extensions,
    )


def try_parse(line: str) -> Optional[IceCandidate]:
    """Like parse(), but returns None for a malformed line."""
    try:
        return parse(line)
    except CandidateParseError:
        return None
