"""MPDU: split an MP4 into a bounded set of JPEG frames and save them as a ZIP."""

__version__ = "0.1.0"
