from typing import Iterable, Iterator, Tuple


def iter_candidate_lines(stream: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, line) for lines worth parsing.

    Blank lines and lines starting with "#" are skipped. The terminator is
    left on so the parser strips it.
    """
    for n, line in enumerate(stream, start=1):
        s = line.strip()
        if not s or s.startswith("#"):
            continue
        yield n, line
