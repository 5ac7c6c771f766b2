from abc import ABC, abstractmethod
from typing import Any, TypeAlias


# Symbol space: 0..255 are literal bytes, plus two sentinels
PSEUDO_EOF: int = 256
NOT_A_SYMBOL: int = -1
EOF_FREQUENCY: int = 1

# Type alias for Frequency table (symbol -> count)
FreqType: TypeAlias = dict[int, int]
# Type alias for Code table (symbol -> bit string such as "0110")
CodeType: TypeAlias = dict[int, str]


class Compressor(ABC):
    @abstractmethod
    def encode(self, data: bytes) -> dict[str, Any]:
        pass

    @abstractmethod
    def decode(self, encoded: dict[str, Any]) -> bytes:
        pass
