"""Error codes reported while reading JPEG data."""

from enum import IntEnum


class JPEGReadError(IntEnum):
    """Reasons a JPEG stream can fail to parse."""

    JPEG_OK = 0
    JPEG_SOI_NOT_FOUND = 1
    JPEG_SOF_NOT_FOUND = 2
    JPEG_UNEXPECTED_EOF = 3
    JPEG_MARKER_BYTE_NOT_FOUND = 4
    JPEG_UNSUPPORTED_MARKER = 5
    JPEG_WRONG_MARKER_SIZE = 6
    JPEG_INVALID_PRECISION = 7
    JPEG_INVALID_WIDTH = 8
    JPEG_INVALID_HEIGHT = 9
    JPEG_INVALID_NUMCOMP = 10
    JPEG_INVALID_SAMP_FACTOR = 11
    JPEG_INVALID_START_OF_SCAN = 12
    JPEG_INVALID_END_OF_SCAN = 13
    JPEG_INVALID_SCAN_BIT_POSITION = 14
    JPEG_INVALID_COMPS_IN_SCAN = 15
    JPEG_INVALID_HUFFMAN_INDEX = 16
    JPEG_INVALID_QUANT_TBL_INDEX = 17
    JPEG_INVALID_QUANT_VAL = 18
    JPEG_INVALID_MARKER_LEN = 19
    JPEG_INVALID_SAMPLING_FACTORS = 20
    JPEG_INVALID_HUFFMAN_CODE = 21
    JPEG_INVALID_SYMBOL = 22
    JPEG_NON_REPRESENTABLE_DC_COEFF = 23
    JPEG_NON_REPRESENTABLE_AC_COEFF = 24
    JPEG_INVALID_SCAN = 25
    JPEG_OVERLAPPING_SCANS = 26
    JPEG_INVALID_SCAN_ORDER = 27
    JPEG_EXTRA_ZERO_RUN = 28
    JPEG_DUPLICATE_DRI = 29
    JPEG_DUPLICATE_SOF = 30
    JPEG_WRONG_RESTART_MARKER = 31
    JPEG_DUPLICATE_COMPONENT_ID = 32
    JPEG_COMPONENT_NOT_FOUND = 33
    JPEG_HUFFMAN_TABLE_NOT_FOUND = 34
    JPEG_HUFFMAN_TABLE_ERROR = 35
    JPEG_QUANT_TABLE_NOT_FOUND = 36
    JPEG_EMPTY_DHT = 37
    JPEG_EMPTY_DQT = 38
    JPEG_OUT_OF_BAND_COEFF = 39
    JPEG_EOB_RUN_TOO_LONG = 40
    JPEG_IMAGE_TOO_LARGE = 41


class JPEGError(Exception):
    """Raised when JPEG data cannot be read; carries a JPEGReadError code."""

    def __init__(self, code: JPEGReadError, message: str = "") -> None:
        self.code = JPEGReadError(code)
        self.message = message or self.code.name
        super().__init__(f"{self.code.name}: {self.message}")