"""
Utilities Package for adf2mp3.

Modules:
    - path_utils.py: Derives the output file name from the input file name.
    - format_utils.py: Formats byte counts and durations for log messages.
"""
