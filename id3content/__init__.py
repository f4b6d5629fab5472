# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import id3content.frames
import id3content.id3
import id3content.content

from id3content.errors import *
from id3content.cursor import Cursor
from id3content.content import decode_content
from id3content.tags import decode_frame, decode_frames, upgrade_frameid
