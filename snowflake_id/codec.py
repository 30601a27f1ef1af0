from typing import NamedTuple

TIMESTAMP_BITS = 41
SEQUENCE_AND_ID_BITS = 22

# 2,199,023,255,551 ms, roughly 69 years after base time. 41 rather than 42 bits
# keeps the sign bit clear so ids stay non-negative as signed 64-bit integers.
MAX_ELAPSED = (1 << TIMESTAMP_BITS) - 1


class DecodedId(NamedTuple):
    elapsed: int
    sequence: int
    instance_id: int


def encode(
    elapsed: int, sequence: int, instance_id: int, id_bits: int, sequence_bits: int
) -> int:
    return (
        (elapsed << (id_bits + sequence_bits))
        | (sequence << id_bits)
        | instance_id
    )


def decode(id_: int, id_bits: int, sequence_bits: int) -> DecodedId:
    return DecodedId(
        elapsed=(id_ >> (id_bits + sequence_bits)) & MAX_ELAPSED,
        sequence=(id_ >> id_bits) & ((1 << sequence_bits) - 1),
        instance_id=id_ & ((1 << id_bits) - 1),
    )
