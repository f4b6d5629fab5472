# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Decoding of ID3v2 frame content.

decode_content picks a frame class purely from the frame id, then lets
that class read its fields from the cursor.  The frame header must have
been stripped by the caller, and ID3v2.2 frame ids must already be
upgraded to their four-letter names; the tag version is still needed
because it decides which text encodings are legal and how attached
pictures are laid out.
"""

import id3content.frames as Frames
import id3content.id3 as ID3
from id3content.errors import *

# Apple extensions that hold text but do not start with T:
# WFED (podcast URL), GRP1 (grouping), MVNM (movement name),
# MVIN (movement number)
TEXT_FRAME_EXCEPTIONS = ("WFED", "GRP1", "MVNM", "MVIN")

_language_frames = {
    "COMM": ID3.COMM,
    "USLT": ID3.USLT,
    }

def decode_content(cursor, frameid, version):
    """Decode the content of a single frame.

    Returns a frame instance, or None if the frame has no usable content.
    Raises FrameError (with frameid set) if the content is malformed.
    """
    try:
        return _dispatch(cursor, frameid, version)
    except FrameError as e:
        if e.frameid is None:
            e.frameid = frameid
        raise
    except EOFError as e:
        raise TruncatedFrameError("Frame content is truncated", frameid) from e

def _dispatch(cursor, frameid, version):
    # First match wins
    if frameid == "APIC":
        return ID3.APIC.parse(cursor, version)
    if frameid == "TXXX":
        return ID3.TXXX.parse(cursor, version)
    if frameid == "WXXX":
        return ID3.WXXX.parse(cursor, version)
    if frameid in _language_frames:
        return parse_language(cursor, frameid, version)
    if frameid == "UFID":
        return ID3.UFID.parse(cursor, version)
    if frameid.startswith("T"):
        return parse_text(cursor, frameid, version)
    if frameid in TEXT_FRAME_EXCEPTIONS:
        return parse_text(cursor, frameid, version)
    if frameid.startswith("W"):
        return parse_link(cursor, frameid)
    if frameid == "POPM":
        return ID3.POPM.parse(cursor, version)
    # SYLT, GEOB and anything unknown
    return Frames.BinaryFrame(frameid=frameid, data=cursor.read_rest())

def parse_text(cursor, frameid, version):
    "Read a text frame: an encoding byte followed by a single string."
    return Frames.TextFrame.parse(cursor, version, frameid)

def parse_link(cursor, frameid):
    "Read a URL link frame. URLs are always Latin-1, whatever the tag version."
    return Frames.URLFrame.parse(cursor, None, frameid)

def parse_language(cursor, frameid, version):
    # Only COMM and USLT get here
    cls = _language_frames[frameid]
    return cls.parse(cursor, version)
