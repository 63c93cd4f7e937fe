"""
Configuration Package for adf2mp3.

This package centralizes the static settings of the converter so that the
transcoding logic never hardcodes them:
- The XOR mask, chunk size and output extension of the audio conversion.
- Logging format, report file names and the optional user YAML config.
"""
