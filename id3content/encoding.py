# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Text encodings used inside ID3v2 frames.

Text fields are preceded by an encoding byte that selects one of the
entries of the encodings table below.  Strings are either terminated by
a null character of the encoding's code unit width, or extend to the end
of the frame.
"""

from id3content.errors import *

LATIN1 = 0
UTF16 = 1      # with byte order mark
UTF16BE = 2    # ID3v2.4 only
UTF8 = 3       # ID3v2.4 only

# Indexed by the encoding byte
encodings = (('iso-8859-1', b"\x00"),
             ('utf-16', b"\x00\x00"),
             ('utf-16-be', b"\x00\x00"),
             ('utf-8', b"\x00"))

_v22_encodings = (LATIN1, UTF16)

def verify_encoding(encoding, version):
    """Check that encoding is a valid encoding byte for the given tag version.

    Returns the encoding; raises V2InvalidTextEncodingError for
    encodings that ID3v2.2 does not allow, InvalidEncodingError for bytes
    that name no encoding at all.
    """
    if version == 2 and encoding not in _v22_encodings:
        raise V2InvalidTextEncodingError(
            "ID3v2.2 only supports Latin-1 and UTF-16 text "
            "(found encoding 0x{0:02X})".format(encoding))
    if not 0 <= encoding < len(encodings):
        raise InvalidEncodingError("Found invalid encoding 0x{0:02X}".format(encoding))
    return encoding

def encoding_name(encoding):
    return encodings[encoding][0]

def code_unit_size(encoding):
    return len(encodings[encoding][1])

def decode_text(cursor, encoding, terminated=False, bom=None):
    """Decode a string from cursor.

    If terminated is true, the string ends at the first null character;
    the terminator is consumed but not returned.  Otherwise the string
    takes up the rest of the frame, minus any trailing nulls.

    bom is the byte order mark to assume for UTF-16 strings that
    have none of their own.

    Returns None if there was nothing left to read.
    """
    if not cursor:
        return None
    enc, term = encodings[encoding]
    if terminated:
        rawstr = cursor.read_until(term, step=len(term))
    else:
        rawstr = cursor.read_rest()
        while rawstr.endswith(term) and len(rawstr) % len(term) == 0:
            rawstr = rawstr[:-len(term)]
    if encoding == UTF16:
        enc, rawstr = _utf16_byte_order(rawstr, bom)
    try:
        return rawstr.decode(enc)
    except UnicodeDecodeError as e:
        raise TextDecodeError("Invalid {0} text: {1}".format(enc, e.reason)) from e

_utf16_codecs = {b"\xff\xfe": 'utf-16-le', b"\xfe\xff": 'utf-16-be'}

def _utf16_byte_order(rawstr, bom=None):
    "Strip the byte order mark from a UTF-16 string and return the matching codec."
    if len(rawstr) == 0:
        return 'utf-16-le', rawstr
    if rawstr[:2] in _utf16_codecs:
        return _utf16_codecs[rawstr[:2]], rawstr[2:]
    if bom in _utf16_codecs:
        return _utf16_codecs[bom], rawstr
    raise TextDecodeError("UTF-16 string has an invalid byte order mark")
