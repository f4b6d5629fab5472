# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import warnings

import id3content
import id3content.frames as Frames
from id3content.errors import *
from id3content.id3 import *
from id3content.tags import decode_frame, decode_frames, upgrade_frameid

class TagsTestCase(unittest.TestCase):
    def testUpgrade(self):
        self.assertEqual(upgrade_frameid("TT2"), "TIT2")
        self.assertEqual(upgrade_frameid("PIC"), "APIC")
        self.assertEqual(upgrade_frameid("XYZ"), "XYZ")
        self.assertEqual(upgrade_frameid("TIT2"), "TIT2")

    def testDecodeV22(self):
        frame = decode_frame("TT2", b"\x00Title", 2)
        self.assertEqual(frame, Frames.TextFrame(frameid="TIT2", encoding=0, value="Title"))
        frame = decode_frame("COM", b"\x00eng\x00hi", 2)
        self.assertTrue(isinstance(frame, COMM))
        self.assertEqual(frame.content, "hi")
        frame = decode_frame("PIC", b"\x00PNG\x03\x00data", 2)
        self.assertEqual(frame.mime, "image/png")
        frame = decode_frame("WFD", b"\x00http://example.com/", 2)
        self.assertTrue(type(frame) is Frames.TextFrame)
        frame = decode_frame("XYZ", b"\x01", 2)
        self.assertEqual(frame, Frames.BinaryFrame(frameid="XYZ", data=b"\x01"))

    def testNoUpgradeInLaterVersions(self):
        frame = decode_frame("COM", b"\x00eng\x00hi", 3)
        self.assertTrue(type(frame) is Frames.BinaryFrame)

    def testVersions(self):
        for version in (0, 1, 5, None):
            self.assertRaises(TagError, decode_frame, "TIT2", b"\x00a", version)
            self.assertRaises(TagError, decode_frames, [], version)
        self.assertTrue(issubclass(TagError, ValueError))

    def testDecodeFrames(self):
        frames = [("TIT2", b"\x00Title"),
                  ("TPE1", b"\x07Artist"),
                  ("TALB", b""),
                  ("WOAR", b"http://example.com/")]
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            result = decode_frames(frames, 4)
        self.assertEqual([frame.frameid for frame in result], ["TIT2", "TPE1", "WOAR"])
        self.assertEqual(result[0].value, "Title")
        self.assertTrue(isinstance(result[1], Frames.ErrorFrame))
        self.assertTrue(isinstance(result[1].exception, InvalidEncodingError))
        self.assertEqual(result[1].data, b"\x07Artist")
        self.assertEqual(result[2].url, "http://example.com/")
        categories = [warning.category for warning in w]
        self.assertEqual(categories, [ErrorFrameWarning, EmptyFrameWarning])

    def testDecodeFramesStrict(self):
        frames = [("TT2", b"\x00Title"), ("TT3", b"\x02\x00\x41")]
        self.assertRaises(V2InvalidTextEncodingError, decode_frames, frames, 2, strict=True)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", id3content.Warning)
            result = decode_frames(frames, 2)
        self.assertEqual(len(result), 2)
        self.assertEqual([frame.frameid for frame in result], ["TIT2", "TIT3"])
        self.assertTrue(isinstance(result[1], Frames.ErrorFrame))
        self.assertEqual(result[1].exception.frameid, "TIT3")

    def testDecodeFramesV22Names(self):
        frames = [("TT2", b"\x00ok"), ("TT1", b"\x03bad"), ("TAL", b"")]
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            result = decode_frames(frames, 2)
        self.assertEqual([frame.frameid for frame in result], ["TIT2", "TIT1"])
        self.assertEqual(result[1].frameid, result[1].exception.frameid)
        self.assertTrue("TALB" in str(w[-1].message))

    def testWarningsAsErrors(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", id3content.Warning)
            self.assertRaises(EmptyFrameWarning, decode_frames, [("TIT2", b"")], 4)

    def testPublicNames(self):
        self.assertTrue(id3content.decode_frame is decode_frame)
        frame = id3content.decode_content(id3content.Cursor(b"\x00hi"), "TIT2", 4)
        self.assertEqual(frame.value, "hi")

suite = unittest.TestLoader().loadTestsFromTestCase(TagsTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
