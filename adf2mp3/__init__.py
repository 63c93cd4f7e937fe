"""
GTA Vice City ADF to MP3 converter.

The game ships its radio stations as `.adf` files, which are plain MP3 streams
with every byte XORed against a single constant. This package reverses that
obfuscation, streaming the file through a fixed-size buffer.

Subpackages:
    config: Static constants, the logger format and the optional user config.
    domain: File inspection and the exception hierarchy.
    services: The transcoder itself and the conversion report files.
    utils: Output path derivation and formatting helpers.
"""

__version__ = "1.0.0"
