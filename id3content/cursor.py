# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Sequential reading of frame payloads."""

class Cursor:
    """A read position over the payload of a single frame.

    Every read consumes bytes from the front of the remaining data, so
    fields decoded one after another never see bytes that an earlier
    field has already used.  Short reads raise EOFError and leave the
    position unchanged.
    """
    def __init__(self, data):
        self.data = bytes(data)
        self.position = 0

    def __len__(self):
        return len(self.data) - self.position

    def __bool__(self):
        return self.position < len(self.data)

    def read(self, length):
        "Read exactly length bytes; raise EOFError if the payload ends sooner."
        if length < 0:
            raise ValueError("Negative read length")
        if len(self) < length:
            raise EOFError
        start = self.position
        self.position += length
        return self.data[start:self.position]

    def read_byte(self):
        return self.read(1)[0]

    def read_until(self, terminator, step=1):
        """Read up to the next occurrence of terminator and skip past it.

        Only matches starting at a multiple of step from the current
        position are considered, so a two-byte terminator is found on
        code unit boundaries only.  Without a terminator, the rest of the
        payload is returned.
        """
        start = self.position
        end = len(self.data)
        width = len(terminator)
        index = self.data.find(terminator, start)
        while index >= 0 and (index - start) % step:
            index = self.data.find(terminator, index + 1)
        if index < 0:
            self.position = end
            return self.data[start:end]
        self.position = index + width
        return self.data[start:index]

    def peek_rest(self):
        return self.data[self.position:]

    def read_rest(self):
        rest = self.peek_rest()
        self.position = len(self.data)
        return rest

    def __repr__(self):
        return "<Cursor at {0} of {1} bytes>".format(self.position, len(self.data))
