#!/usr/bin/env python

from setuptools import setup

setup(
    name="id3content",
    version="0.1.0",
    packages=["id3content"],
    python_requires=">=3.6",
    description="ID3v2 frame content decoder in pure Python 3",
    long_description="""
Decodes the payload of individual ID3v2.2, ID3v2.3 and ID3v2.4 frames
into typed frame objects: text and URL frames, comments and lyrics,
user defined text and links, attached pictures, popularimeters and
unique file identifiers.  Frames the package does not model are kept as
opaque binary data.

Malformed frames raise a FrameError naming the frame, and frames too
short to hold any content are reported as empty, so callers can skip a
single bad frame and still read the rest of the tag.
""",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
