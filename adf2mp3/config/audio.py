"""
Configuration settings for the ADF to MP3 conversion itself.

These values describe the obfuscation used by the game and are not user
configurable.
"""

# The GTA Vice City ADF files are MP3 files that had each byte XORed with
# this constant (0x22, or 42 in octal). Applying it a second time restores
# the original byte.
GTA_MAGIC = 34

# The input is streamed through a reusable buffer of this many bytes.
CHUNK_SIZE = 8192

# Extension appended to the input name when no output path is given.
OUTPUT_EXTENSION = ".mp3"

# Extension of the obfuscated game assets, used only in help text.
INPUT_EXTENSION = ".adf"
