from __future__ import annotations

from dataclasses import dataclass

ASCII_WHITESPACE = " \t\n\r\x0b\x0c"


@dataclass(frozen=True)
class ParserConfig:
    whitespace: str = ASCII_WHITESPACE
    output_path: str = "test_output.css"
