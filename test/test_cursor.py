# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest

from id3content.cursor import Cursor

class CursorTestCase(unittest.TestCase):
    def testRead(self):
        cursor = Cursor(b"abcdef")
        self.assertEqual(len(cursor), 6)
        self.assertEqual(cursor.read(2), b"ab")
        self.assertEqual(cursor.read_byte(), ord("c"))
        self.assertEqual(cursor.position, 3)
        self.assertEqual(len(cursor), 3)
        self.assertEqual(cursor.read(0), b"")
        self.assertEqual(cursor.read_rest(), b"def")
        self.assertFalse(cursor)
        self.assertEqual(cursor.read_rest(), b"")

    def testShortRead(self):
        cursor = Cursor(b"ab")
        self.assertRaises(EOFError, cursor.read, 3)
        # A failed read consumes nothing
        self.assertEqual(cursor.position, 0)
        self.assertEqual(cursor.read(2), b"ab")
        self.assertRaises(EOFError, cursor.read_byte)

    def testReadUntil(self):
        cursor = Cursor(b"foo\x00bar\x00baz")
        self.assertEqual(cursor.read_until(b"\x00"), b"foo")
        self.assertEqual(cursor.peek_rest(), b"bar\x00baz")
        self.assertEqual(cursor.read_until(b"\x00"), b"bar")
        # No terminator: everything that is left
        self.assertEqual(cursor.read_until(b"\x00"), b"baz")
        self.assertFalse(cursor)

    def testReadUntilAligned(self):
        # The null pair at offset 1 straddles two code units
        cursor = Cursor(b"\x01\x00\x00\x41\x00\x00\x42\x00")
        self.assertEqual(cursor.read_until(b"\x00\x00", step=2), b"\x01\x00\x00\x41")
        self.assertEqual(cursor.position, 6)
        self.assertEqual(cursor.read_until(b"\x00\x00", step=2), b"\x42\x00")
        self.assertEqual(len(cursor), 0)

    def testCopiesData(self):
        data = bytearray(b"abc")
        cursor = Cursor(data)
        data[0] = ord("x")
        self.assertEqual(cursor.read(1), b"a")

suite = unittest.TestLoader().loadTestsFromTestCase(CursorTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
