from backend.fileio.level_codec import decode_level, encode_level
from backend.fileio.manager import FileManager
from backend.fileio.record_codec import (
    decode_record,
    encode_record,
    read_record,
    write_record,
)

__all__ = [
    "FileManager",
    "decode_level",
    "decode_record",
    "encode_level",
    "encode_record",
    "read_record",
    "write_record",
]
