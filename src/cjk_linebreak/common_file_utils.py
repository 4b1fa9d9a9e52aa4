#!/usr/bin/env python3

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
common_file_utils.py - Reading input files in unknown CJK encodings

Hand-wrapped CJK sources are often GB18030, Big5 or Shift_JIS rather than
UTF-8, so input bytes go through chardet before decoding.
"""

import logging

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "gb18030", "big5", "shift_jis", "euc-kr"]


def detect_encoding(raw_data: bytes, sample_size: int = 32 * 1024) -> tuple[str | None, float]:
    """
    Detect the encoding of raw bytes with chardet.

    Args:
        raw_data: Bytes to analyze
        sample_size: Number of leading bytes to feed to chardet

    Returns:
        (encoding, confidence) tuple; encoding is None when undetected
    """
    result = chardet.detect(raw_data[:sample_size])
    encoding = result.get("encoding")
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet.detect: {encoding} (confidence: {confidence})")
    return encoding, confidence


def decode_bytes(
    raw_data: bytes,
    default_encoding: str = "utf-8",
    detect: bool = True,
    confidence_threshold: float = 0.7,
    fallback_encodings: list[str] | None = None,
) -> str:
    """
    Decode input bytes, trying the detected encoding first.

    Order of attempts: detected encoding (if confident enough), then
    ``default_encoding``, then the fallbacks.

    Raises:
        UnicodeDecodeError: If no candidate encoding decodes the data
    """
    if raw_data.startswith(b"\xef\xbb\xbf"):
        return raw_data.decode("utf-8-sig")

    candidates: list[str] = []
    if detect:
        encoding, confidence = detect_encoding(raw_data)
        if encoding and confidence >= confidence_threshold:
            candidates.append(encoding)
        elif encoding:
            logger.debug(f"Ignoring detected encoding {encoding}: confidence {confidence} below {confidence_threshold}")
    candidates.append(default_encoding)
    candidates.extend(fallback_encodings or DEFAULT_FALLBACK_ENCODINGS)

    last_error: UnicodeDecodeError | None = None
    tried = set()
    for encoding in candidates:
        key = encoding.lower()
        if key in tried:
            continue
        tried.add(key)
        try:
            text = raw_data.decode(encoding)
            logger.debug(f"Decoded input with {encoding}")
            return text
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
            if isinstance(e, UnicodeDecodeError):
                last_error = e

    if last_error is not None:
        raise last_error
    raise UnicodeDecodeError("unknown", raw_data, 0, len(raw_data), "no usable encoding")
