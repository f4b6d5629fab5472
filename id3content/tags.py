# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

from warnings import warn

import id3content.frames as Frames
import id3content.id3 as ID3
from id3content.content import decode_content
from id3content.cursor import Cursor
from id3content.errors import *

tag_versions = (2, 3, 4)

def upgrade_frameid(frameid):
    "Return the ID3v2.3/2.4 name of an ID3v2.2 frame id."
    return ID3.v22_frameids.get(frameid, frameid)

def _check_version(version):
    if version not in tag_versions:
        raise TagError("Unknown ID3 version: 2.{0}".format(version))

def decode_frame(frameid, data, version):
    """Decode the content of a frame in an ID3v2.<version> tag.

    data is the frame payload without the frame header.  Returns None if
    the frame carries no usable content.
    """
    _check_version(version)
    if version == 2:
        frameid = upgrade_frameid(frameid)
    return decode_content(Cursor(data), frameid, version)

def decode_frames(frames, version, strict=False):
    """Decode a sequence of (frameid, data) pairs from a single tag.

    Frames without content are skipped.  A frame that fails to decode
    is returned as an ErrorFrame, so that one bad frame does not lose
    the rest of the tag; set strict to propagate the error instead.
    ID3v2.2 frame ids are upgraded in the result, including those of
    ErrorFrames.
    """
    _check_version(version)
    result = []
    for (frameid, data) in frames:
        if version == 2:
            frameid = upgrade_frameid(frameid)
        try:
            frame = decode_content(Cursor(data), frameid, version)
        except FrameError as e:
            if strict:
                raise
            warn("Skipping invalid frame: {0}".format(e), ErrorFrameWarning)
            result.append(Frames.ErrorFrame(frameid, bytes(data), e))
            continue
        if frame is None:
            warn("Frame {0} is empty".format(frameid), EmptyFrameWarning)
            continue
        result.append(frame)
    return result
