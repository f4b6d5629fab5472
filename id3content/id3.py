# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Frames with a structure of their own, and ID3v2.2 frame names.
"""

import id3content.frames as Frames
from id3content.specs import *


# 4.1. Unique file identifier
class UFID(Frames.Frame):
    "Unique file identifier"
    _framespec = (NullTerminatedStringSpec("owner"), BinaryDataSpec("data"))
    _min_length = 1


# 4.2.6. User defined information frame
class TXXX(Frames.Frame):
    """User defined text information frame

    Some taggers only put a byte order mark on the description of UTF-16
    frames; the value then uses the description's byte order.
    """
    _framespec = (EncodingSpec("encoding"),
                  EncodedStringSpec("description"),
                  EncodedFullTextSpec("value"))
    _min_length = 2

    @classmethod
    def parse(cls, cursor, version, frameid=None):
        if len(cursor) < cls._min_length:
            return None
        frame = cls(frameid=frameid)
        frame.encoding = cls._framespec[0].read(frame, cursor, version)
        bom = cursor.peek_rest()[:2]
        frame.description = cls._framespec[1].read(frame, cursor, version)
        value = decode_text(cursor, frame.encoding, terminated=False, bom=bom)
        frame.value = value if value is not None else ""
        return frame


# 4.3.2. User defined URL link frame
class WXXX(Frames.Frame):
    "User defined URL link frame"
    _framespec = (EncodingSpec("encoding"),
                  EncodedStringSpec("description"),
                  URLStringSpec("url"))
    _min_length = 2


# 4.8. and 4.10.
class USLT(Frames.LanguageFrame):
    "Unsynchronised lyric/text transcription"

class COMM(Frames.LanguageFrame):
    "Comments"


# 4.14. Attached picture
class APIC(Frames.Frame):
    """Attached picture

    ID3v2.2 tags store a three-letter image format (PNG or JPG) where
    later versions have a MIME type; both are read into mime.
    """
    _framespec = (EncodingSpec("encoding"),
                  NullTerminatedStringSpec("mime"),
                  ByteSpec("type"),
                  EncodedStringSpec("description", default=None),
                  BinaryDataSpec("data"))

    _v22_format = SimpleStringSpec("format", 3)
    _v22_formats = {"PNG": "image/png", "JPG": "image/jpeg"}

    @classmethod
    def parse(cls, cursor, version, frameid=None):
        if version != 2:
            return super().parse(cursor, version, frameid)
        frame = cls(frameid=frameid)
        frame.encoding = cls._framespec[0].read(frame, cursor, version)
        fmt = cls._v22_format.read(frame, cursor, version)
        frame.mime = cls._v22_formats.get(fmt.upper(), "image/" + fmt.lower())
        for spec in frame._framespec[2:]:
            setattr(frame, spec.name, spec.read(frame, cursor, version))
        return frame

    def _str_fields(self):
        name = (picture_types[self.type]
                if self.type is not None and self.type < len(picture_types)
                else "Unknown")
        return "{0}({1}), desc={2}, mime={3}: {4} bytes of data".format(
            self.type, name, repr(self.description), repr(self.mime),
            len(self.data) if self.data is not None else 0)


# 4.17. Popularimeter
class POPM(Frames.Frame):
    "Popularimeter"
    _framespec = (NullTerminatedStringSpec("email", default=""),
                  ByteSpec("rating"),
                  CounterSpec("counter"))


# ID3v2.2 names of frames in later versions
v22_frameids = {
    "UFI": "UFID",
    "TT1": "TIT1", "TT2": "TIT2", "TT3": "TIT3",
    "TP1": "TPE1", "TP2": "TPE2", "TP3": "TPE3", "TP4": "TPE4",
    "TCM": "TCOM", "TXT": "TEXT", "TLA": "TLAN", "TCO": "TCON",
    "TAL": "TALB", "TPA": "TPOS", "TRK": "TRCK", "TRC": "TSRC",
    "TYE": "TYER", "TDA": "TDAT", "TIM": "TIME", "TRD": "TRDA",
    "TMT": "TMED", "TFT": "TFLT", "TBP": "TBPM", "TCR": "TCOP",
    "TPB": "TPUB", "TEN": "TENC", "TSS": "TSSE", "TOF": "TOFN",
    "TLE": "TLEN", "TSI": "TSIZ", "TDY": "TDLY", "TKE": "TKEY",
    "TOT": "TOAL", "TOA": "TOPE", "TOL": "TOLY", "TOR": "TORY",
    "TXX": "TXXX",
    "WAF": "WOAF", "WAR": "WOAR", "WAS": "WOAS", "WCM": "WCOM",
    "WCP": "WCOP", "WPB": "WPUB", "WXX": "WXXX",
    "IPL": "IPLS", "MCI": "MCDI", "ETC": "ETCO", "MLL": "MLLT",
    "STC": "SYTC", "ULT": "USLT", "SLT": "SYLT", "COM": "COMM",
    "RVA": "RVAD", "EQU": "EQUA", "REV": "RVRB", "PIC": "APIC",
    "GEO": "GEOB", "CNT": "PCNT", "POP": "POPM", "BUF": "RBUF",
    "CRA": "AENC", "LNK": "LINK",
    # Nonstandard frames
    "TCP": "TCMP", "TDS": "TDES", "TID": "TGID", "TDR": "TDRL",
    "WFD": "WFED", "TCT": "TCAT", "TKW": "TKWD", "PCS": "PCST",
    "GP1": "GRP1", "MVN": "MVNM", "MVI": "MVIN",
    }


# Attached picture (APIC & PIC) types
picture_types = (
    "Other", "32x32 icon", "Other icon", "Front Cover", "Back Cover",
    "Leaflet", "Media", "Lead artist", "Artist", "Conductor",
    "Band/Orchestra", "Composer", "Lyricist/text writer",
    "Recording Location", "Recording", "Performance", "Screen capture",
    "A bright coloured fish", "Illustration", "Band/artist",
    "Publisher/Studio")


__all__ = [ obj.__name__ for obj in list(globals().values())
            if Frames.is_frame_class(obj)]
