# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import abc
from abc import abstractmethod

from id3content.encoding import *
from id3content.errors import *

# The idea for the Spec system comes from Mutagen.

class Spec(metaclass=abc.ABCMeta):
    def __init__(self, name):
        self.name = name

    @abstractmethod
    def read(self, frame, cursor, version): pass

    def validate(self, frame, value):
        return value

    def to_str(self, value):
        return "{0}={1}".format(self.name, repr(value))

class ByteSpec(Spec):
    def read(self, frame, cursor, version):
        return cursor.read_byte()
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, int):
            raise TypeError("Not a byte")
        if value not in range(256):
            raise ValueError("Invalid byte value")
        return value

class CounterSpec(Spec):
    "A big-endian integer taking up the rest of the frame; 0 if missing."
    def read(self, frame, cursor, version):
        value = 0
        for b in cursor.read_rest():
            value <<= 8
            value += b
        return value
    def validate(self, frame, value):
        if value is None:
            return None
        if type(value) is not int:
            raise TypeError("Not an integer: {0}".format(repr(value)))
        if value < 0:
            raise ValueError("Value is negative")
        return value

class BinaryDataSpec(Spec):
    def read(self, frame, cursor, version):
        return cursor.read_rest()
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError("Not a byte sequence")
        return bytes(value)
    def to_str(self, value):
        if value is None:
            return super().to_str(value)
        return '{0}={1}{2}'.format(self.name, value[0:16], "..." if len(value) > 16 else "")

class SimpleStringSpec(Spec):
    def __init__(self, name, length):
        super().__init__(name)
        self.length = length
    def read(self, frame, cursor, version):
        return cursor.read(self.length).decode('iso-8859-1')
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError("Not a string")
        if len(value) != self.length:
            raise ValueError("String length mismatch")
        value.encode('iso-8859-1')
        return value

class LanguageSpec(SimpleStringSpec):
    "ISO-639-2 language code; the three bytes are kept as they are."
    def __init__(self, name):
        super().__init__(name, 3)

class NullTerminatedStringSpec(Spec):
    "A Latin-1 string ending at the first null byte."
    def __init__(self, name, default=None):
        super().__init__(name)
        self.default = default
    def read(self, frame, cursor, version):
        value = decode_text(cursor, LATIN1, terminated=True)
        return value if value is not None else self.default
    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError("Not a string")
        value.encode('iso-8859-1')
        return value

class URLStringSpec(NullTerminatedStringSpec):
    "A Latin-1 URL; missing URLs are read as empty strings."
    def __init__(self, name):
        super().__init__(name, default="")

class EncodingSpec(ByteSpec):
    "EncodingSpec must precede any encoded string spec."
    def read(self, frame, cursor, version):
        return verify_encoding(cursor.read_byte(), version)
    def validate(self, frame, value):
        if isinstance(value, str):
            name = value.lower().replace("-", "")
            for i in range(len(encodings)):
                if encodings[i][0].lower().replace("-", "") == name:
                    value = i
                    break
        if value is None:
            return None
        if not isinstance(value, int):
            raise TypeError("Not an encoding")
        if 0 <= value < len(encodings):
            return value
        raise ValueError("Invalid encoding 0x{0:X}".format(value))
    def to_str(self, value):
        return encoding_name(value) if value is not None else "<undef>"

class EncodedStringSpec(Spec):
    "A null-terminated string in the frame's encoding."
    def __init__(self, name, default=""):
        super().__init__(name)
        self.default = default

    def _decode(self, frame, cursor):
        return decode_text(cursor, frame.encoding, terminated=True)

    def read(self, frame, cursor, version):
        value = self._decode(frame, cursor)
        return value if value is not None else self.default

    def validate(self, frame, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError("Not a string")
        return value

class EncodedFullTextSpec(EncodedStringSpec):
    "A string in the frame's encoding that takes up the rest of the frame."
    def _decode(self, frame, cursor):
        return decode_text(cursor, frame.encoding, terminated=False)

