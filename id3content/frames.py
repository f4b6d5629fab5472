# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Class definitions for decoded ID3v2 frames."""

import abc

from id3content.encoding import *
from id3content.errors import *
from id3content.specs import *

class Frame(metaclass=abc.ABCMeta):
    _framespec = tuple()
    # Payloads shorter than this carry no value
    _min_length = 0

    def __init__(self, frameid=None, **kwargs):
        self.frameid = frameid if frameid else type(self).__name__
        assert len(self._framespec) > 0
        for spec in self._framespec:
            val = kwargs.get(spec.name, None)
            setattr(self, spec.name, val)

    def __setattr__(self, name, value):
        # Automatic validation on assignment
        for spec in self._framespec:
            if name == spec.name:
                value = spec.validate(self, value)
                break
        super().__setattr__(name, value)

    def __eq__(self, other):
        return (isinstance(other, type(self))
                and self.frameid == other.frameid
                and self._framespec == other._framespec
                and all(getattr(self, spec.name, None) ==
                        getattr(other, spec.name, None)
                        for spec in self._framespec))

    @classmethod
    def parse(cls, cursor, version, frameid=None):
        """Read a frame of this class from cursor.

        Returns None if the payload is too short to hold a frame body.
        Fields are read in _framespec order; each one consumes its bytes
        from the cursor.
        """
        if len(cursor) < cls._min_length:
            return None
        frame = cls(frameid=frameid)
        for spec in frame._framespec:
            setattr(frame, spec.name, spec.read(frame, cursor, version))
        return frame

    def __repr__(self):
        stype = type(self).__name__
        args = []
        if stype != self.frameid:
            args.append("frameid={0!r}".format(self.frameid))
        for spec in self._framespec:
            if isinstance(spec, BinaryDataSpec):
                data = getattr(self, spec.name)
                if isinstance(data, bytes):
                    args.append("{0}=<{1} bytes of binary data {2!r}{3}>".format(
                            spec.name, len(data),
                            data[:20], "..." if len(data) > 20 else ""))
                else:
                    args.append("{0}={1!r}".format(spec.name, data))
            else:
                args.append("{0}={1!r}".format(spec.name, getattr(self, spec.name)))
        return "{0}({1})".format(stype, ", ".join(args))

    def _str_fields(self):
        fields = []
        for spec in self._framespec:
            fields.append(spec.to_str(getattr(self, spec.name, None)))
        return ", ".join(fields)

    def __str__(self):
        flag = "!" if isinstance(self, ErrorFrame) else " "
        return "{0}{1}({2})".format(flag, self.frameid, self._str_fields())

class BinaryFrame(Frame):
    "A frame whose content is kept as opaque data."
    _framespec = (BinaryDataSpec("data"),)

class ErrorFrame(Frame):
    _framespec = (BinaryDataSpec("data"),)

    def __init__(self, frameid, data, exception, **kwargs):
        super().__init__(frameid=frameid, **kwargs)
        self.data = data
        self.exception = exception

    def _str_fields(self):
        strs = ["ERROR"]
        if self.exception:
            strs.append(str(self.exception))
        strs.append(repr(self.data))
        return ", ".join(strs)

class TextFrame(Frame):
    _framespec = (EncodingSpec("encoding"),
                  EncodedStringSpec("value"))
    _min_length = 2

    @classmethod
    def parse(cls, cursor, version, frameid=None):
        if len(cursor) < cls._min_length:
            return None
        encoding = verify_encoding(cursor.read_byte(), version)
        if len(cursor) < code_unit_size(encoding):
            # No room for even a terminator
            return None
        value = decode_text(cursor, encoding, terminated=True)
        return cls(frameid=frameid, encoding=encoding,
                   value=value if value is not None else "")

    def _str_fields(self):
        return "{0} {1!r}".format(self._framespec[0].to_str(self.encoding),
                                  self.value)

class URLFrame(Frame):
    _framespec = (URLStringSpec("url"), )
    _min_length = 1

    def _str_fields(self):
        return repr(self.url)

class LanguageFrame(Frame):
    "A frame with a language code, a short description and a full text."
    _framespec = (EncodingSpec("encoding"),
                  LanguageSpec("language"),
                  EncodedStringSpec("description"),
                  EncodedFullTextSpec("content"))
    _min_length = 5

def is_frame_class(cls):
    return (isinstance(cls, type)
            and issubclass(cls, Frame)
            and 3 <= len(cls.__name__) <= 4
            and cls.__name__ == cls.__name__.upper())
