from collections.abc import Iterable
import logging

from .errors import ConversionError


log = logging.getLogger(__name__)


def convert_multi_byte_number_payload_to_single_decimal_number(
    chunks: Iterable[int], endianness: str = "big"
) -> int:
    assert endianness in ["big", "little"]
    # Accepts bytes and bytearray as well as plain lists.
    chunks = list(chunks)
    if endianness == "little":
        chunks.reverse()

    value = 0
    for chunk in chunks:
        if not 0 <= chunk <= 255:
            raise ConversionError(f"Byte out of range: {chunk}")
        value = (value << 8) + chunk
    return value


def convert_decimal_value_to_byte_array(
    value: int, num_bytes: int = 2, endianness: str = "big"
) -> list[int]:
    assert num_bytes >= 1
    assert endianness in ["big", "little"]

    if value != int(value):
        raise ConversionError(f"Not an integer: {value}")
    value = int(value)

    channel_max_value = 1
    for _ in range(num_bytes):
        channel_max_value *= 256
    channel_max_value -= 1
    if not 0 <= value <= channel_max_value:
        log.debug(f"Rejecting {value}, does not fit in {num_bytes} bytes")
        raise ConversionError(f"{value} does not fit in {num_bytes} bytes")

    values = []
    for _ in range(num_bytes):
        values.append(value % 256)
        value //= 256
    if endianness == "big":
        values.reverse()
    return values


def convert_decimal_value_to_2_byte_hex_array(value: int) -> list[int]:
    hi, lo = convert_decimal_value_to_byte_array(value, num_bytes=2)
    return [hi, lo]
