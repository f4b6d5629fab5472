# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

class Error(Exception): pass

class Warning(Error, UserWarning): pass

class FrameWarning(Warning): pass
class ErrorFrameWarning(FrameWarning): pass
class EmptyFrameWarning(FrameWarning): pass

class TagError(Error, ValueError): pass

class FrameError(Error):
    """A frame's content could not be decoded.

    The frameid attribute names the offending frame once the error has
    passed through the content dispatcher.
    """
    def __init__(self, message, frameid=None):
        super().__init__(message)
        self.frameid = frameid

    def __str__(self):
        message = super().__str__()
        if self.frameid is None:
            return message
        return "{0}: {1}".format(self.frameid, message)

class TruncatedFrameError(FrameError): pass
class V2InvalidTextEncodingError(FrameError): pass
class TextDecodeError(FrameError): pass
class InvalidEncodingError(TextDecodeError): pass
