"""High score record: a single ``highscore: <int>`` line"""
import logging
import re

log = logging.getLogger(__name__)

RECORD = re.compile(r"\s*highscore:\s*(-?\d+)")


def read_highscore(path) -> int:
    """Missing or unparsable files count as no high score yet."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            match = RECORD.match(fh.read())
            value = int(match.group(1)) if match else None
    except (OSError, ValueError) as exc:
        # ValueError covers undecodable bytes and digit runs past int()'s limit
        log.debug("no high score read from %s: %s", path, exc)
        return 0
    if value is None:
        log.debug("unparsable high score file %s", path)
        return 0
    return max(0, value)


def write_highscore(path, value: int) -> bool:
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(f"highscore: {value}")
    except OSError as exc:
        log.debug("high score not written to %s: %s", path, exc)
        return False
    return True
