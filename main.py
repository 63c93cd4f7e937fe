"""
Main entry point for adf2mp3.

Converts a GTA Vice City `.adf` radio file into a playable MP3:

    $ python main.py FLASH.adf            # writes FLASH.mp3
    $ python main.py FLASH.adf flash.mp3

The installed console script `adf2mp3` runs the same `main()`.
"""

import sys

from adf2mp3.app import main


if __name__ == "__main__":
    sys.exit(main())
