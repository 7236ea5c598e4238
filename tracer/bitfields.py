"""
Flag Byte Decomposition

The low bits of the STREAM (11FSSOOD) and ACK (101NLLMM) frame type
bytes, described as tables of named fields.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class BitField:
    """A named run of bits inside a flag byte."""
    name: str
    shift: int
    width: int = 1

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def extract(self, flags: int) -> int:
        return (flags >> self.shift) & self.mask


STREAM_FLAG_FIELDS = (
    BitField("F", shift=5),            # FIN
    BitField("SS", shift=3, width=2),  # stream ID length
    BitField("OO", shift=1, width=2),  # offset length
    BitField("D", shift=0),            # data length present
)

ACK_FLAG_FIELDS = (
    BitField("N", shift=4),            # num blocks present
    BitField("LL", shift=2, width=2),  # largest acknowledged length
    BitField("MM", shift=0, width=2),  # ACK block length length
)


def decompose(flags: int, fields: Sequence[BitField]) -> List[Tuple[str, int]]:
    """Split a flag byte into (name, value) pairs in table order."""
    return [(f.name, f.extract(flags)) for f in fields]


def format_flags(flags: int, fields: Sequence[BitField]) -> str:
    """Render a flag byte as "NAME=0x.." pairs separated by spaces."""
    return " ".join(f"{name}=0x{value:02x}" for name, value in decompose(flags, fields))


def _field(fields: Sequence[BitField], name: str) -> BitField:
    for f in fields:
        if f.name == name:
            return f
    raise KeyError(name)


def stream_fin(flags: int) -> int:
    return _field(STREAM_FLAG_FIELDS, "F").extract(flags)


def stream_id_len_bits(flags: int) -> int:
    return _field(STREAM_FLAG_FIELDS, "SS").extract(flags)


def stream_offset_len_bits(flags: int) -> int:
    return _field(STREAM_FLAG_FIELDS, "OO").extract(flags)


def stream_has_data_length(flags: int) -> int:
    return _field(STREAM_FLAG_FIELDS, "D").extract(flags)


def ack_has_num_blocks(flags: int) -> int:
    return _field(ACK_FLAG_FIELDS, "N").extract(flags)


def ack_largest_len_bits(flags: int) -> int:
    return _field(ACK_FLAG_FIELDS, "LL").extract(flags)


def ack_block_len_bits(flags: int) -> int:
    return _field(ACK_FLAG_FIELDS, "MM").extract(flags)
