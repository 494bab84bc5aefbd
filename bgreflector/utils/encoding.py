"""
Encoding helpers to read localization text files without crashing on bad bytes.
"""

import chardet
from pathlib import Path
from typing import Optional, Tuple


def read_text_safely(path: Path, preferred: Tuple[str, ...] = ("utf-8-sig", "utf-8", "utf-16")) -> Optional[str]:
    """
    Read file as text with tolerant fallbacks:
    - try preferred encodings first (UTF-16 only when a BOM says so)
    - then chardet detection with errors='replace'
    Returns None on I/O failure.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError:
        return None

    for enc in preferred:
        if enc == "utf-16" and raw[:2] not in (b"\xff\xfe", b"\xfe\xff"):
            continue
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue

    detected = chardet.detect(raw)
    enc = detected.get("encoding") or "utf-8"
    try:
        return raw.decode(enc, errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")
